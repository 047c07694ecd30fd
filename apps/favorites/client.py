"""Client side of the heart button.

``FavoriteToggle`` flips the displayed state as soon as the user clicks,
then pushes the intended value to the server once clicks stop for a short
quiet window. Every push gets an attempt id so a late answer to an old
push cannot undo a newer click:

- a push that succeeds becomes the committed value if it is newer than
  the last committed push;
- once no click is pending and no push is in flight, the display settles
  on the committed value, which rolls back a failed push.

``FavoriteApiClient`` is the HTTP transport for the pushes.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Protocol

import requests

from shared.domain.exceptions import RemoteSyncFailure

logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE_SECONDS = 0.3
SIGN_IN_MESSAGE = "Please sign in to favorite the listing!"
FAILURE_MESSAGE = "Failed to favorite"

RemoteUpdate = Callable[[str, bool], Awaitable[None]]


class Notifier(Protocol):
    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


class LoggingNotifier:
    """Fallback notification surface that only writes to the log."""

    def success(self, message: str) -> None:
        logger.info(message)

    def error(self, message: str) -> None:
        logger.warning(message)


@dataclass(frozen=True)
class Committed:
    value: bool


@dataclass(frozen=True)
class Pending:
    intended: bool
    attempt_id: int


@dataclass(frozen=True)
class FavoriteButtonState:
    listing_id: str
    is_favorite: bool
    syncing: bool


def _default_debounce() -> float:
    from django.conf import settings  # type: ignore

    if settings.configured:
        return getattr(settings, "FAVORITE_DEBOUNCE_SECONDS", DEFAULT_DEBOUNCE_SECONDS)
    return DEFAULT_DEBOUNCE_SECONDS


class FavoriteToggle:
    """Optimistic, debounced favorite switch for one listing.

    Must be driven from a running asyncio loop.
    """

    def __init__(
        self,
        listing_id,  # type: ignore
        is_favorite: bool,
        *,
        remote: RemoteUpdate,
        is_authenticated: Callable[[], bool],
        notifier: Notifier | None = None,
        debounce: float | None = None,
    ) -> None:
        self.listing_id = str(listing_id)
        self._remote = remote
        self._is_authenticated = is_authenticated
        self._notifier = notifier or LoggingNotifier()
        self._debounce = _default_debounce() if debounce is None else debounce

        self._displayed = bool(is_favorite)
        self._intended = self._displayed
        self._committed_value = self._displayed
        self._committed_attempt = 0
        self._attempt = 0
        self._timer: asyncio.TimerHandle | None = None
        self._inflight: dict[int, asyncio.Task] = {}

    @property
    def is_favorite(self) -> bool:
        return self._displayed

    @property
    def state(self) -> Committed | Pending:
        if self._timer is not None:
            return Pending(self._intended, self._attempt + 1)
        if self._inflight:
            return Pending(self._intended, self._attempt)
        return Committed(self._committed_value)

    def render(self) -> FavoriteButtonState:
        return FavoriteButtonState(
            listing_id=self.listing_id,
            is_favorite=self._displayed,
            syncing=isinstance(self.state, Pending),
        )

    def click(self) -> bool:
        """Handle one activation; returns ``False`` when it was refused."""
        if not self._is_authenticated():
            self._notifier.error(SIGN_IN_MESSAGE)
            return False

        self._intended = not self._intended
        self._displayed = self._intended
        self._schedule_flush()
        return True

    async def drain(self) -> None:
        """Wait until no push is scheduled or in flight."""
        while self._timer is not None or self._inflight:
            if self._inflight:
                await asyncio.gather(*self._inflight.values(), return_exceptions=True)
            else:
                await asyncio.sleep(self._debounce / 10 or 0.001)

    def _schedule_flush(self) -> None:
        loop = asyncio.get_running_loop()
        if self._timer is not None:
            self._timer.cancel()
        self._timer = loop.call_later(self._debounce, self._flush)

    def _flush(self) -> None:
        self._timer = None
        self._attempt += 1
        attempt = self._attempt
        task = asyncio.ensure_future(self._push(attempt, self._intended))
        self._inflight[attempt] = task

    async def _push(self, attempt: int, value: bool) -> None:
        try:
            await self._remote(self.listing_id, value)
        except Exception as exc:  # noqa: BLE001
            logger.warning(
                "Favorite sync #%s for listing %s failed: %s", attempt, self.listing_id, exc
            )
            if attempt == self._attempt and self._timer is None:
                self._notifier.error(FAILURE_MESSAGE)
        else:
            if attempt > self._committed_attempt:
                self._committed_attempt = attempt
                self._committed_value = value
        finally:
            self._inflight.pop(attempt, None)
            self._settle()

    def _settle(self) -> None:
        if self._timer is not None or self._inflight:
            return
        if self._displayed != self._committed_value:
            logger.info(
                "Rolling back favorite state of listing %s to %s", self.listing_id, self._committed_value
            )
        self._intended = self._committed_value
        self._displayed = self._committed_value


class FavoriteApiClient:
    """HTTP transport for favorite pushes against ``/api/v1/favorites/``."""

    def __init__(
        self,
        base_url: str,
        *,
        token: str | None = None,
        session: requests.Session | None = None,
        timeout: float = 10,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout
        self.token = token
        if token:
            self.session.headers["Authorization"] = f"Bearer {token}"

    def is_authenticated(self) -> bool:
        return bool(self.token)

    def update_favorite(self, listing_id, favorite: bool) -> None:  # type: ignore
        url = f"{self.base_url}/api/v1/favorites/"
        payload = {"listing_id": str(listing_id), "favorite": bool(favorite)}
        try:
            response = self.session.post(url, json=payload, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise RemoteSyncFailure(f"Favorite update failed: {exc}") from exc

    async def update_favorite_async(self, listing_id, favorite: bool) -> None:  # type: ignore
        await asyncio.to_thread(self.update_favorite, listing_id, favorite)

    def toggle_for(self, listing_id, is_favorite: bool, **kwargs) -> FavoriteToggle:  # type: ignore
        """Build a ``FavoriteToggle`` wired to this client."""
        return FavoriteToggle(
            listing_id,
            is_favorite,
            remote=self.update_favorite_async,
            is_authenticated=self.is_authenticated,
            **kwargs,
        )
