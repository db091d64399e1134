# cosmic_social/infrastructure/event_dispatcher.py
import logging
from collections import defaultdict
from collections.abc import Awaitable, Callable

from cosmic_social.domain.events import Event

Handler = Callable[[Event], Awaitable[None]]


class EventDispatcher:
    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.handlers: dict[str, list[Handler]] = defaultdict(list)
        self.logger = logger or logging.getLogger("EventDispatcher")

    def register(self, event_type: type[Event] | str, handler: Handler) -> None:
        name = event_type if isinstance(event_type, str) else event_type.__name__
        self.handlers[name].append(handler)

    async def dispatch(self, event: Event) -> None:
        event_type = event.__class__.__name__
        handlers = self.handlers.get(event_type, [])
        if not handlers:
            self.logger.debug(f"No handlers registered for {event_type}")
        for handler in handlers:
            await handler(event)
