from fastapi.responses import JSONResponse


def error_response(message: str, status_code: int = 400, errors: list | None = None):
    content = {"success": False, "error": message}
    if errors is not None:
        content["errors"] = errors
    return JSONResponse(status_code=status_code, content=content)


def validation_errors(raw_errors) -> list[dict]:
    """
    Flatten pydantic/FastAPI error entries into field-level violations.
    The leading location segment ("body", "path", ...) is dropped.
    """
    violations = []
    for err in raw_errors:
        loc = [str(part) for part in err.get("loc", ())]
        if loc and loc[0] in {"body", "path", "query"}:
            loc = loc[1:]
        violations.append({"field": ".".join(loc), "message": err.get("msg", "")})
    return violations
