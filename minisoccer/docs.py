"""API description in Swagger 2.0 form."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class SwaggerInfo:
    """Metadata for the generated API document."""

    version: str = "1.0"
    host: str = "localhost:3011"
    base_path: str = "/api"
    schemes: list[str] = field(default_factory=list)
    title: str = "MiniSoccer Backend API"
    description: str = "Backend for field booking, authentication, and admin control."
    instance_name: str = "swagger"


SWAGGER_INFO = SwaggerInfo()


def swagger_document(info: Optional[SwaggerInfo] = None) -> dict[str, Any]:
    """Return the Swagger document described by ``info``."""
    info = SWAGGER_INFO if info is None else info
    return {
        "schemes": list(info.schemes),
        "swagger": "2.0",
        "info": {
            "description": info.description,
            "title": info.title,
            "contact": {},
            "version": info.version,
        },
        "host": info.host,
        "basePath": info.base_path,
        "paths": {},
    }