"""Pydantic based configuration for the captcha HTTP server."""

from __future__ import annotations

from pydantic import BaseModel, Field

from captcha_core.config import STD_HEIGHT, STD_WIDTH


class ServerSettings(BaseModel):
    image_width: int = Field(default=STD_WIDTH, ge=1, description="Width of served images")
    image_height: int = Field(default=STD_HEIGHT, ge=1, description="Height of served images")
    url_prefix: str = Field(default="/captcha", description="Path under which images are served")
    host: str = Field(default="localhost", description="Interface the development server binds to")
    port: int = Field(default=8666, description="Port the development server listens on")
