"""Event bus port (interface).

Defines contract for event publishing and subscription.
The domain defines the port, infrastructure provides the implementation.
"""

from typing import Awaitable, Callable, Iterable, Protocol, Type, TypeVar

from domain.shared.events.base import DomainEvent

TEvent = TypeVar("TEvent", bound=DomainEvent)

# Event handler type: async function that takes an event and returns None
EventHandler = Callable[[TEvent], Awaitable[None]]


class IEventBus(Protocol):
    """Interface for event publishing and subscription.

    Callers publish the events drained from an aggregate after the
    repository write succeeded.

    Example usage (application layer):
        >>> async def on_user_created(event: UserCreated) -> None:
        ...     print(f"User {event.user_id} created")
        ...
        >>> event_bus.subscribe(UserCreated, on_user_created)
        >>> await event_bus.publish_all(user.drain_events())
    """

    def subscribe(self, event_type: Type[TEvent], handler: EventHandler[TEvent]) -> None:
        """Subscribe a handler to an event type.

        Args:
            event_type: Concrete event class to listen for
            handler: Async function to call when such an event is published
        """
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Publish an event to all subscribed handlers.

        Note:
            - Handlers are called in subscription order
            - A failing handler does not prevent the others from running
        """
        ...

    async def publish_all(self, events: Iterable[DomainEvent]) -> None:
        """Publish several events, preserving their order."""
        ...

    def unsubscribe(self, event_type: Type[TEvent], handler: EventHandler[TEvent]) -> bool:
        """Unsubscribe a handler from an event type.

        Returns:
            True if handler was found and removed, False otherwise
        """
        ...

    def clear(self) -> None:
        """Clear all event subscriptions."""
        ...
