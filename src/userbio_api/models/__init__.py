"""API response models."""

from userbio_api.models.health import ENDPOINTS, HealthCheckResponse, InfoResponse
from userbio_api.models.messages import ErrorResponse, MessageResponse

__all__ = [
    "ENDPOINTS",
    "ErrorResponse",
    "HealthCheckResponse",
    "InfoResponse",
    "MessageResponse",
]
