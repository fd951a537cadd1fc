"""
Holds the one live UserProfile snapshot.

Writers swap the whole (immutable) profile under a lock, so readers get
either the previous profile, the new one, or None, never a mix.
"""

from __future__ import annotations

import logging
import threading

from core.models.profile import UserProfile

_LOG = logging.getLogger(__name__)


class ProfileStore:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._current: UserProfile | None = None

    def publish(self, profile: UserProfile) -> UserProfile:
        with self._lock:
            self._current = profile
        _LOG.info("current profile replaced (%s)", profile.inputs.name)
        return profile

    def current(self) -> UserProfile | None:
        return self._current

    def clear(self) -> None:
        with self._lock:
            self._current = None
