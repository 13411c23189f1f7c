import os
from enum import Enum
from pathlib import PurePath
from typing import Optional, Union

from pydantic import BaseModel, field_validator


def normalize_path(path: Union[str, PurePath]) -> str:
    """Return the comparable string form of a file path."""
    return os.path.normpath(str(path))


class FileStatus(str, Enum):
    """Enum for working tree change kinds."""

    ADDED = "A"
    MODIFIED = "M"
    DELETED = "D"
    RENAMED = "R"
    UNTRACKED = "U"


class WorkingTreeChange(BaseModel):
    """A file that differs between the last commit and the working tree."""

    status: FileStatus
    file_path: str
    old_file_path: Optional[str] = None  # For renamed files

    @field_validator("file_path", "old_file_path")
    @classmethod
    def _normalize(cls, value: Optional[str]) -> Optional[str]:
        return normalize_path(value) if value else value
