"""Pydantic schemas for request/response payloads."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class NewCaptchaRequest(BaseModel):
    length: Optional[int] = Field(default=None, ge=1, le=32)


class NewCaptchaResponse(BaseModel):
    id: str
    image_url: str


class VerifyRequest(BaseModel):
    id: str
    solution: str


class CaptchaResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    data: Optional[dict] = None
