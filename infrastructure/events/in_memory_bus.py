"""In-memory event bus implementation.

Provides an in-memory implementation of the IEventBus port.
Handlers are stored in memory and awaited in subscription order.
"""

import logging
from typing import Any, Awaitable, Callable, Dict, Iterable, List, Type, TypeVar

from domain.shared.events.base import DomainEvent

logger = logging.getLogger(__name__)

TEvent = TypeVar("TEvent", bound=DomainEvent)


class InMemoryEventBus:
    """In-memory implementation of IEventBus port.

    Handlers are registered per concrete event class; publishing an event
    only reaches handlers subscribed to exactly its type.

    Persistence: handlers lost on process restart (in-memory only)
    Error handling: failed handlers log errors but don't prevent other handlers

    Example:
        >>> bus = InMemoryEventBus()
        >>>
        >>> async def log_event(event: UserCreated) -> None:
        ...     print(f"User created: {event.user_id}")
        >>>
        >>> bus.subscribe(UserCreated, log_event)
        >>> await bus.publish(UserCreated.create(...))
    """

    def __init__(self) -> None:
        """Initialize event bus with empty handler registry."""
        self._handlers: Dict[Type[DomainEvent], List[Callable[[Any], Awaitable[None]]]] = {}

    def subscribe(
        self,
        event_type: Type[TEvent],
        handler: Callable[[TEvent], Awaitable[None]],
    ) -> None:
        """Subscribe a handler to an event type.

        Note:
            Same handler can be subscribed multiple times (will be called multiple times)
        """
        self._handlers.setdefault(event_type, []).append(handler)

        logger.debug(
            "Handler subscribed",
            extra={
                "event_type": event_type.__name__,
                "handler": _handler_name(handler),
            },
        )

    async def publish(self, event: DomainEvent) -> None:
        """Publish an event to all subscribed handlers.

        If a handler fails, it logs an error but other handlers still execute.
        """
        event_type = type(event)
        handlers = list(self._handlers.get(event_type, []))

        if not handlers:
            logger.debug(
                "No handlers for event",
                extra={"event_type": event.event_type},
            )
            return

        logger.debug(
            "Publishing event",
            extra={
                "event_type": event.event_type,
                "event_id": str(event.event_id),
                "handler_count": len(handlers),
            },
        )

        for handler in handlers:
            try:
                await handler(event)
            except Exception as e:
                logger.error(
                    "Event handler failed",
                    extra={
                        "event_type": event.event_type,
                        "event_id": str(event.event_id),
                        "handler": _handler_name(handler),
                        "error": str(e),
                    },
                    exc_info=True,
                )

    async def publish_all(self, events: Iterable[DomainEvent]) -> None:
        """Publish events one after the other, in the given order."""
        for event in events:
            await self.publish(event)

    def unsubscribe(
        self,
        event_type: Type[TEvent],
        handler: Callable[[TEvent], Awaitable[None]],
    ) -> bool:
        """Unsubscribe a handler from an event type.

        Returns:
            True if handler was found and removed, False otherwise

        Note:
            If handler was subscribed multiple times, only first occurrence is removed
        """
        handlers = self._handlers.get(event_type)
        if not handlers or handler not in handlers:
            return False

        handlers.remove(handler)
        logger.debug(
            "Handler unsubscribed",
            extra={
                "event_type": event_type.__name__,
                "handler": _handler_name(handler),
            },
        )
        return True

    def clear(self) -> None:
        """Clear all event subscriptions."""
        self._handlers.clear()
        logger.debug("All event handlers cleared")

    def get_handler_count(self, event_type: Type[TEvent]) -> int:
        """Get number of handlers for an event type."""
        return len(self._handlers.get(event_type, []))


def _handler_name(handler: Callable[..., Any]) -> str:
    return getattr(handler, "__qualname__", None) or type(handler).__name__
