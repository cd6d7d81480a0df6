"""Publication of buffered user events."""

from typing import Optional

from domain.shared.ports.event_bus import IEventBus
from domain.user.core.entities.user import User


async def publish_user_events(user: User, event_bus: Optional[IEventBus]) -> None:
    """Drain the user's events and publish them in emission order.

    Must be called only after the repository write succeeded. Without a
    bus the events stay buffered on the user for the caller to drain.
    """
    if event_bus is None:
        return
    await event_bus.publish_all(user.drain_events())
