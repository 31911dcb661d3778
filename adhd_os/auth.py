"""Session collaborator and the sign-in gate in front of the dashboard."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

logger = logging.getLogger(__name__)

LOADING = "loading"
SIGNED_OUT = "signed_out"
SIGNED_IN = "signed_in"


@dataclass(frozen=True)
class User:
    id: str
    name: str
    email: Optional[str] = None


@dataclass(frozen=True)
class SessionSnapshot:
    user: Optional[User] = None
    is_loading: bool = False


Listener = Callable[[SessionSnapshot], None]


class AuthSession:
    """Tracks who is signed in and notifies subscribers on every change."""

    def __init__(self, snapshot: SessionSnapshot | None = None) -> None:
        self._snapshot = snapshot or SessionSnapshot(is_loading=True)
        self._listeners: list[Listener] = []

    @property
    def snapshot(self) -> SessionSnapshot:
        return self._snapshot

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` and deliver the current snapshot right away."""

        self._listeners.append(listener)
        listener(self._snapshot)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def resolve(self, user: Optional[User]) -> None:
        """Finish the initial session lookup."""

        self._publish(SessionSnapshot(user=user, is_loading=False))

    def login(self, user: User) -> None:
        logger.info("User %s signed in", user.id)
        self._publish(SessionSnapshot(user=user, is_loading=False))

    def logout(self) -> None:
        if self._snapshot.user is not None:
            logger.info("User %s signed out", self._snapshot.user.id)
        self._publish(SessionSnapshot(user=None, is_loading=False))

    def _publish(self, snapshot: SessionSnapshot) -> None:
        self._snapshot = snapshot
        for listener in list(self._listeners):
            listener(snapshot)


def gate_view(snapshot: SessionSnapshot) -> str:
    """Loading wins over signed-out; the dashboard renders only for a user."""

    if snapshot.is_loading:
        return LOADING
    if snapshot.user is None:
        return SIGNED_OUT
    return SIGNED_IN
