"""Services for the application."""

from .commands import CommandSurface
from .dispatch_gate import DispatchGate
from .extension_factory import Extension, activate
from .file_events import FileEventRouter
from .initialization import InitializationWorkflow
from .iteration import IterationWorkflow
from .revert import RevertRoutine
from .state_store_factory import (
    create_state_store,
    create_state_store_from_settings,
)

__all__ = [
    "CommandSurface",
    "DispatchGate",
    "Extension",
    "FileEventRouter",
    "InitializationWorkflow",
    "IterationWorkflow",
    "RevertRoutine",
    "activate",
    "create_state_store",
    "create_state_store_from_settings",
]
