"""Replaying stream of user settings with explicit cancellation."""

from __future__ import annotations

import logging
from collections.abc import Callable

from kubeconsole.models.state.app_settings import UserSettings

logger = logging.getLogger(__name__)

SettingsCallback = Callable[[UserSettings], None]


class Subscription:
    """Handle returned by SettingsStream.subscribe.

    Once cancelled, the callback is never invoked again.
    """

    def __init__(self, stream: SettingsStream, callback: SettingsCallback) -> None:
        self._stream = stream
        self._callback = callback
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        if self._cancelled:
            return
        self._cancelled = True
        self._stream._remove(self)

    def _deliver(self, settings: UserSettings) -> None:
        if not self._cancelled:
            self._callback(settings)


class SettingsStream:
    """Holds the current UserSettings and notifies subscribers on change.

    New subscribers immediately receive the current value.
    """

    def __init__(self, initial: UserSettings | None = None) -> None:
        self._current = initial or UserSettings()
        self._subscriptions: list[Subscription] = []

    @property
    def current(self) -> UserSettings:
        return self._current

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)

    def subscribe(self, callback: SettingsCallback) -> Subscription:
        subscription = Subscription(self, callback)
        self._subscriptions.append(subscription)
        subscription._deliver(self._current)
        return subscription

    def publish(self, settings: UserSettings) -> None:
        self._current = settings
        # Copy: callbacks may cancel their own subscription.
        for subscription in list(self._subscriptions):
            subscription._deliver(settings)
        logger.debug("Published settings to %d subscribers", len(self._subscriptions))

    def _remove(self, subscription: Subscription) -> None:
        if subscription in self._subscriptions:
            self._subscriptions.remove(subscription)
