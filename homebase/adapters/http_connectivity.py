"""HTTP connectivity adapter — implements ConnectivityPort.

Tracks an online/offline flag fed by the host environment and offers a
retry action that probes a small resource with a HEAD request.

Gracefully degrades: a failed probe logs a warning and reports offline.
"""

from __future__ import annotations

import logging
from typing import Callable

import httpx

from homebase.config import settings
from homebase.ports.connectivity_port import TransitionCallback

logger = logging.getLogger(__name__)


class HttpConnectivityMonitor:
    """httpx-based implementation of ConnectivityPort."""

    def __init__(
        self,
        probe_url: str | None = None,
        timeout: float | None = None,
        online: bool = True,
    ) -> None:
        self._probe_url = probe_url or settings.CONNECTIVITY_PROBE_URL
        self._timeout = timeout if timeout is not None else settings.CONNECTIVITY_TIMEOUT_SECONDS
        self._online = online
        self._callbacks: list[TransitionCallback] = []

    @property
    def online(self) -> bool:
        return self._online

    def subscribe(self, callback: TransitionCallback) -> Callable[[], None]:
        """Register a transition callback. Returns an unsubscribe function."""
        self._callbacks.append(callback)

        def _unsubscribe() -> None:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

        return _unsubscribe

    def set_online(self, online: bool) -> None:
        """Update the flag; callbacks fire only when the state changes."""
        if online == self._online:
            return
        self._online = online
        event = "online" if online else "offline"
        logger.info("Connectivity changed: %s", event)
        for callback in list(self._callbacks):
            callback(event)

    async def retry(self) -> bool:
        """Probe the configured URL and update the online flag accordingly."""
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                resp = await client.head(
                    self._probe_url, headers={"Cache-Control": "no-store"},
                )
                resp.raise_for_status()
        except httpx.HTTPError as exc:
            logger.warning("Connectivity probe to %s failed: %s", self._probe_url, exc)
            self.set_online(False)
            return False

        self.set_online(True)
        return True
