"""Configuration for the captcha engine."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_LEN = 6
COLLECT_NUM = 100
EXPIRATION = 10 * 60.0
STD_WIDTH = 240
STD_HEIGHT = 80


class CaptchaSettings(BaseSettings):
    """Static settings consumed by the store, renderer and service."""

    model_config = SettingsConfigDict(env_prefix="CAPTCHA_")

    default_length: int = Field(
        default=DEFAULT_LEN,
        ge=1,
        description="Number of characters in a newly issued solution",
    )
    collect_num: int = Field(
        default=COLLECT_NUM,
        ge=1,
        description="Number of created challenges that triggers an expiry sweep",
    )
    expiration: float = Field(
        default=EXPIRATION,
        gt=0,
        description="Seconds a challenge stays valid after creation or reload",
    )
    image_width: int = Field(default=STD_WIDTH, ge=1, description="Standard image width")
    image_height: int = Field(default=STD_HEIGHT, ge=1, description="Standard image height")
