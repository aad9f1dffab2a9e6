from fastapi.responses import JSONResponse

from todoapp.core.errors import ServiceError


def error_response(error: ServiceError) -> JSONResponse:
    return JSONResponse({"error": error.message}, status_code=error.status_code)
