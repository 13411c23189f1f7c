from typing import Callable, List, Optional

import structlog

from ..protocols.host_protocol import FileEventSourceProtocol
from ..schemas import (
    DocumentChanged,
    DocumentSaved,
    FileEvent,
    FilesCreated,
    FilesDeleted,
    FilesRenamed,
)
from .dispatch_gate import DispatchGate
from .iteration import IterationWorkflow

logger = structlog.get_logger(__name__)


def affected_paths(event: FileEvent) -> Optional[List[str]]:
    """Paths an event addresses, or None when the event should be ignored.

    Renames address the old path. Content changes only count for saved,
    file-backed documents.
    """
    if isinstance(event, DocumentSaved):
        return [event.path]
    if isinstance(event, DocumentChanged):
        if event.content_changes and not event.is_dirty and event.scheme == "file":
            return [event.path]
        return None
    if isinstance(event, (FilesDeleted, FilesCreated)):
        return list(event.paths)
    if isinstance(event, FilesRenamed):
        return [f.old_path for f in event.files]
    return None


class FileEventRouter:
    """Forwards host file events through the dispatch gate to iteration."""

    def __init__(self, gate: DispatchGate, iteration: IterationWorkflow):
        self.gate = gate
        self.iteration = iteration
        self._unsubscribe: Optional[Callable[[], None]] = None

    def attach(self, source: FileEventSourceProtocol) -> None:
        self.detach()
        self._unsubscribe = source.subscribe(self.handle)

    def detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    async def handle(self, event: FileEvent) -> None:
        paths = affected_paths(event)
        if paths is None:
            return

        logger.debug("file_event", kind=type(event).__name__, paths=paths)
        await self.gate.for_each_repository(
            lambda repo: self.iteration.on_change(repo, paths)
        )
