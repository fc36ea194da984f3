"""Synchronous refresh notification."""

from __future__ import annotations

from collections.abc import Callable

from loguru import logger

RefreshHandler = Callable[[], None]
Unsubscribe = Callable[[], None]


class RefreshNotifier:
    """Fan-out for the unparameterized "refresh the tree" signal."""

    def __init__(self) -> None:
        self._handlers: list[RefreshHandler] = []

    def subscribe(self, handler: RefreshHandler) -> Unsubscribe:
        self._handlers.append(handler)

        def unsubscribe() -> None:
            if handler in self._handlers:
                self._handlers.remove(handler)

        return unsubscribe

    def emit(self) -> None:
        logger.debug("refresh.emit handlers={}", len(self._handlers))
        for handler in list(self._handlers):
            handler()
