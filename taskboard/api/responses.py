# taskboard/api/responses.py

from fastapi.responses import JSONResponse

from taskboard.schemas import Result


def envelope(result: Result) -> JSONResponse:
    """Serialises a service Result, using its code as the HTTP status."""
    return JSONResponse(status_code=result.code, content=result.model_dump(mode="json"))


def failure(message: str, code: int = 400) -> JSONResponse:
    return envelope(Result.fail(message, code=code))
