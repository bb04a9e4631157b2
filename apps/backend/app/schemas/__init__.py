from app.schemas.proxy import (
    ProxyTask,
    ProxyRequest,
    ErrorResponse,
    ImageResponse,
    OperationResponse,
)

__all__ = [
    "ProxyTask",
    "ProxyRequest",
    "ErrorResponse",
    "ImageResponse",
    "OperationResponse",
]
