"""create genres and games

Revision ID: 5b1e7c2d9a40
Revises:
Create Date: 2025-09-02 00:00:00
"""
from alembic import op
import sqlalchemy as sa

revision = "5b1e7c2d9a40"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "genres",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.UniqueConstraint("name", name="uq_genres_name"),
    )
    op.create_table(
        "games",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=50), nullable=False),
        sa.Column("genre_id", sa.Integer(), sa.ForeignKey("genres.id"), nullable=False),
        sa.Column("price", sa.Numeric(18, 2), nullable=False),
        sa.Column("release_date", sa.Date(), nullable=False),
    )
    op.create_index("ix_games_genre_id", "games", ["genre_id"])


def downgrade() -> None:
    op.drop_index("ix_games_genre_id", table_name="games")
    op.drop_table("games")
    op.drop_table("genres")
