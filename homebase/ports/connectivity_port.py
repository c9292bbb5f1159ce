"""Connectivity port — online/offline signal consumed by the presentation layer.

Core modules never depend on this; it is exposed for views that need to show
an offline banner and offer a retry action.
"""

from __future__ import annotations

from typing import Callable, Protocol

# Callback receives "online" or "offline"
TransitionCallback = Callable[[str], None]


class ConnectivityPort(Protocol):
    """Abstract connectivity signal."""

    @property
    def online(self) -> bool: ...

    def subscribe(self, callback: TransitionCallback) -> Callable[[], None]: ...

    async def retry(self) -> bool: ...
