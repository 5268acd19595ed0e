from fastapi import Request
from fastapi.responses import JSONResponse

from dairy_admin.core.errors import ApiError, NetworkError, ValidationFailed


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    # Upstream messages are passed through verbatim
    if isinstance(exc, NetworkError) or not exc.status:
        status_code = 502
    else:
        status_code = exc.status
    return JSONResponse(status_code=status_code, content={"success": False, "message": exc.message})


async def validation_failed_handler(request: Request, exc: ValidationFailed) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"success": False, "message": exc.message, "field": exc.field},
    )
