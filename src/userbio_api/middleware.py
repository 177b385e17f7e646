"""CORS wiring for browser clients of the user API."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

logger = logging.getLogger(__name__)

USER_API_METHODS = ["GET", "POST", "PUT", "DELETE"]


def cors_headers_for(origin: str | None, allowed_origins: list[str]) -> dict[str, str]:
    """CORS headers for responses built outside CORSMiddleware, such as unhandled 500s."""
    if not origin or origin not in allowed_origins:
        return {}
    return {"Access-Control-Allow-Origin": origin, "Vary": "Origin"}


def setup_middleware(app: FastAPI, cors_origins: list[str]) -> None:
    """Allow the configured browser origins to call the user endpoints.

    No CORS middleware is installed when no origins are configured.
    """
    if not cors_origins:
        logger.info("CORS disabled (CORS_ORIGINS not set)")
        return

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_methods=USER_API_METHODS,
        allow_headers=["Content-Type"],
    )
    logger.info("CORS enabled for origins: %s", cors_origins)
