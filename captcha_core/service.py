"""Challenge issuing, rendering and verification."""

from __future__ import annotations

import json
import logging
import secrets
import threading
from typing import BinaryIO, Optional, Sequence

from .alphabet import InvalidSolutionError, encode
from .config import CaptchaSettings
from .image import CaptchaImage
from .store import ChallengeStore, MemoryStore

LOGGER = logging.getLogger(__name__)

STAGE_LABELS = {"issue": "Issue", "verify": "Verify"}
EVENT_LABELS = {
    ("issue", "new"): "Issued challenge",
    ("issue", "reload"): "Reloaded challenge",
    ("issue", "reload.missing"): "Reload for unknown challenge",
    ("verify", "empty"): "Rejected empty attempt",
    ("verify", "invalid"): "Rejected attempt outside the alphabet",
    ("verify", "not_found"): "Challenge not found",
    ("verify", "success"): "Challenge solved",
    ("verify", "failure"): "Wrong solution",
}


class ChallengeNotFoundError(LookupError):
    pass


def _log(stage: str, event: str, req: str, level: int = logging.INFO, **fields: object) -> None:
    stage_label = STAGE_LABELS.get(stage, stage.title())
    event_label = EVENT_LABELS.get((stage, event), event)
    payload: dict[str, object] = {"request_id": req}
    payload.update({key: value for key, value in fields.items() if value is not None})
    message = f"[Captcha: {stage_label}]: {event_label}\n{json.dumps(payload, indent=2, sort_keys=True)}"
    LOGGER.log(level, message)


class CaptchaService:
    """Creates challenges, serves their images and checks answers.

    The store is fixed at construction time. Use :func:`default_service` for
    the shared per-process instance.
    """

    def __init__(
        self,
        settings: Optional[CaptchaSettings] = None,
        store: Optional[ChallengeStore] = None,
    ) -> None:
        self.settings = settings or CaptchaSettings()
        if store is None:
            store = MemoryStore(self.settings.collect_num, self.settings.expiration)
        self.store = store

    # ------------------------------------------------------------------
    def new(self) -> str:
        return self.new_len(self.settings.default_length)

    def new_len(self, length: int) -> str:
        if length < 1:
            raise ValueError("Solution length must be positive")
        challenge_id = self.store.create(length)
        _log("issue", "new", secrets.token_hex(4), id=challenge_id, length=length, level=logging.DEBUG)
        return challenge_id

    def reload(self, challenge_id: str) -> bool:
        """Give ``challenge_id`` a new solution; False if it is not live."""
        reloaded = self.store.reload(challenge_id)
        event = "reload" if reloaded else "reload.missing"
        _log("issue", event, secrets.token_hex(4), id=challenge_id, level=logging.DEBUG)
        return reloaded

    # ------------------------------------------------------------------
    def image_bytes(self, challenge_id: str, width: Optional[int] = None, height: Optional[int] = None) -> bytes:
        """Render the current solution of ``challenge_id`` without consuming it."""
        solution = self.store.get(challenge_id, consume=False)
        if solution is None:
            raise ChallengeNotFoundError(f"Challenge {challenge_id} not found")
        if width is None:
            width = self.settings.image_width
        if height is None:
            height = self.settings.image_height
        return CaptchaImage(solution, width, height).encode()

    def write_image(
        self,
        stream: BinaryIO,
        challenge_id: str,
        width: Optional[int] = None,
        height: Optional[int] = None,
    ) -> int:
        data = self.image_bytes(challenge_id, width, height)
        stream.write(data)
        return len(data)

    # ------------------------------------------------------------------
    def verify(self, challenge_id: str, attempt: Sequence[int]) -> bool:
        """Check ``attempt`` against the stored solution, consuming the challenge.

        An empty attempt is rejected before the store is touched. Any other
        attempt removes the challenge whether it matches or not.
        """
        req_id = secrets.token_hex(4)
        if not attempt:
            _log("verify", "empty", req_id, id=challenge_id, level=logging.WARNING)
            return False
        solution = self.store.get(challenge_id, consume=True)
        if solution is None:
            _log("verify", "not_found", req_id, id=challenge_id, level=logging.WARNING)
            return False
        matched = list(attempt) == list(solution)
        _log("verify", "success" if matched else "failure", req_id, id=challenge_id)
        return matched

    def verify_string(self, challenge_id: str, text: str) -> bool:
        """Like :meth:`verify`, for a typed answer such as ``"a7K2"``.

        Text containing a character outside ``0-9``/``A-Z`` (any case) is
        rejected without touching the store, so the challenge survives.
        """
        try:
            attempt = encode(text)
        except InvalidSolutionError:
            _log("verify", "invalid", secrets.token_hex(4), id=challenge_id, level=logging.WARNING)
            return False
        return self.verify(challenge_id, attempt)


_default_service: Optional[CaptchaService] = None
_default_lock = threading.Lock()


def default_service() -> CaptchaService:
    """Return the process-wide service, creating it on first use."""
    global _default_service
    with _default_lock:
        if _default_service is None:
            _default_service = CaptchaService()
        return _default_service
