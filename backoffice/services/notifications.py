"""User-visible notifications collected while handling one request."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notification:
    title: str
    description: str
    variant: str = "default"


@dataclass
class Notifier:
    """Collects toast-style messages that the API returns alongside data."""

    messages: list[Notification] = field(default_factory=list)

    def success(self, title: str, description: str) -> None:
        logger.info("[NOTIFY] %s: %s", title, description)
        self.messages.append(Notification(title=title, description=description))

    def error(self, title: str, description: str) -> None:
        logger.warning("[NOTIFY] %s: %s", title, description)
        self.messages.append(Notification(title=title, description=description, variant="destructive"))

    def as_payload(self) -> list[dict[str, str]]:
        return [asdict(message) for message in self.messages]
