"""
Envelope to HTTP translation shared by the API routers
"""
from fastapi.responses import JSONResponse

from dtos.response import ResponseModel


def to_http_response(envelope: ResponseModel) -> JSONResponse:
    """Serialize an envelope with the HTTP status matching its code."""
    return JSONResponse(
        status_code=envelope.code.http_status,
        content=envelope.model_dump(mode="json")
    )
