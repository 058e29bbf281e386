"""Analytics events recorded to the application log."""

import logging

logger = logging.getLogger(__name__)


class LoggingAnalyticsService:
    """Fire-and-forget analytics sink."""

    def __init__(self) -> None:
        self.event_count = 0

    def emit_event(self, category: str, action: str) -> None:
        self.event_count += 1
        logger.info("analytics event category=%s action=%s", category, action)
