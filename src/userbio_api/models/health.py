"""Health and info response models."""

from typing import ClassVar

from pydantic import BaseModel

ENDPOINTS = {
    "createUser": "POST /api/user",
    "getAllUsers": "GET /api/users",
    "getUserById": "GET /api/user/:id",
    "updateUser": "PUT /api/update/user/:id",
    "deleteUser": "DELETE /api/delete/user/:id",
}


class InfoResponse(BaseModel):
    """Service status returned from the root endpoint."""

    status: str = "OK"
    message: str = "API is running!"
    version: str
    port: int
    environment: str | None = None
    database: str
    store: str
    endpoints: dict[str, str] = ENDPOINTS


class HealthCheckResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str
    environment: str | None = None
    bio_enrichment: bool = False
    message: str = "API is healthy"

    class Config:
        """Pydantic config."""

        json_schema_extra: ClassVar[dict] = {
            "example": {
                "status": "ok",
                "version": "1.0.0",
                "environment": "development",
                "bio_enrichment": True,
                "message": "API is healthy",
            }
        }
