"""Image captcha issuing and verification."""

from .alphabet import InvalidSolutionError, decode, encode
from .config import CaptchaSettings
from .image import CaptchaImage, render_image
from .service import CaptchaService, ChallengeNotFoundError, default_service
from .store import ChallengeStore, MemoryStore

__all__ = [
    "CaptchaImage",
    "CaptchaService",
    "CaptchaSettings",
    "ChallengeNotFoundError",
    "ChallengeStore",
    "InvalidSolutionError",
    "MemoryStore",
    "decode",
    "default_service",
    "encode",
    "render_image",
]
