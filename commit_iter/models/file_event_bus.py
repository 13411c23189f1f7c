from typing import Callable, List

from ..protocols.host_protocol import FileEventHandler
from ..schemas import FileEvent


class FileEventBus:
    """In-process file event source the host publishes into."""

    def __init__(self):
        self._handlers: List[FileEventHandler] = []

    def subscribe(self, handler: FileEventHandler) -> Callable[[], None]:
        self._handlers.append(handler)

        def unsubscribe() -> None:
            if handler in self._handlers:
                self._handlers.remove(handler)

        return unsubscribe

    async def publish(self, event: FileEvent) -> None:
        for handler in list(self._handlers):
            await handler(event)
