"""Schemas for the application."""

from .events import (
    DocumentChanged,
    DocumentSaved,
    FileEvent,
    FilesCreated,
    FilesDeleted,
    FilesRenamed,
    RenamedFile,
)
from .git import FileStatus, WorkingTreeChange, normalize_path
from .prompts import (
    ChoiceItem,
    ChoiceLabel,
    ChoiceResult,
    continuation_choices,
    new_message_suggestion,
)

__all__ = [
    "ChoiceItem",
    "ChoiceLabel",
    "ChoiceResult",
    "DocumentChanged",
    "DocumentSaved",
    "FileEvent",
    "FileStatus",
    "FilesCreated",
    "FilesDeleted",
    "FilesRenamed",
    "RenamedFile",
    "WorkingTreeChange",
    "continuation_choices",
    "new_message_suggestion",
    "normalize_path",
]
