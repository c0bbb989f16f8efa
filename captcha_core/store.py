"""Challenge storage with time-to-live and one-time consumption."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Protocol

from .config import COLLECT_NUM, EXPIRATION
from .generators import random_id, random_solution

LOGGER = logging.getLogger(__name__)


class ChallengeStore(Protocol):
    """Capability every challenge store must provide.

    Implementations must guarantee two things. A ``get`` with ``consume=True``
    removes the entry atomically, so no other caller can read or consume it
    afterwards. An entry past its deadline is never returned, whether or not a
    sweep has removed it yet.
    """

    def create(self, length: int) -> str:
        ...

    def get(self, challenge_id: str, consume: bool = False) -> Optional[bytes]:
        ...

    def reload(self, challenge_id: str) -> bool:
        ...

    def sweep(self) -> int:
        ...


@dataclass
class _Entry:
    solution: bytes
    expires_at: float


class MemoryStore:
    """In-process store that evicts expired entries every ``collect_num`` inserts.

    Expired entries are filtered on every lookup, so the sweep cadence only
    affects memory use, never verification results.
    """

    def __init__(
        self,
        collect_num: int = COLLECT_NUM,
        expiration: float = EXPIRATION,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if collect_num < 1:
            raise ValueError("collect_num must be positive")
        if expiration <= 0:
            raise ValueError("expiration must be positive")
        self.collect_num = collect_num
        self.expiration = expiration
        self._clock = clock
        self._entries: Dict[str, _Entry] = {}
        self._insert_count = 0
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    # ------------------------------------------------------------------
    def create(self, length: int) -> str:
        solution = random_solution(length)
        with self._lock:
            challenge_id = random_id()
            while challenge_id in self._entries:
                challenge_id = random_id()
            self._insert(challenge_id, solution)
        return challenge_id

    def set(self, challenge_id: str, solution: bytes) -> None:
        """Store ``solution`` under ``challenge_id``, replacing any previous entry."""
        with self._lock:
            self._insert(challenge_id, bytes(solution))

    def get(self, challenge_id: str, consume: bool = False) -> Optional[bytes]:
        with self._lock:
            entry = self._entries.get(challenge_id)
            if entry is None:
                return None
            if entry.expires_at <= self._clock():
                del self._entries[challenge_id]
                return None
            if consume:
                del self._entries[challenge_id]
            return entry.solution

    def reload(self, challenge_id: str) -> bool:
        with self._lock:
            entry = self._entries.get(challenge_id)
            now = self._clock()
            if entry is None or entry.expires_at <= now:
                self._entries.pop(challenge_id, None)
                return False
            self._entries[challenge_id] = _Entry(
                solution=random_solution(len(entry.solution)),
                expires_at=now + self.expiration,
            )
            return True

    def sweep(self) -> int:
        with self._lock:
            return self._sweep_locked()

    # Helpers -----------------------------------------------------------
    def _insert(self, challenge_id: str, solution: bytes) -> None:
        self._entries[challenge_id] = _Entry(
            solution=solution,
            expires_at=self._clock() + self.expiration,
        )
        self._insert_count += 1
        if self._insert_count >= self.collect_num:
            self._insert_count = 0
            self._sweep_locked()

    def _sweep_locked(self) -> int:
        now = self._clock()
        expired = [cid for cid, entry in self._entries.items() if entry.expires_at <= now]
        for cid in expired:
            del self._entries[cid]
        if expired:
            LOGGER.debug("Swept %d expired challenges", len(expired))
        return len(expired)
