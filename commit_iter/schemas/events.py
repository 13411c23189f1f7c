from typing import List, Union

from pydantic import BaseModel


class DocumentSaved(BaseModel):
    path: str


class DocumentChanged(BaseModel):
    """A text document's content changed (possibly from outside the editor)."""

    path: str
    content_changes: int = 0
    is_dirty: bool = False
    scheme: str = "file"


class FilesDeleted(BaseModel):
    paths: List[str]


class FilesCreated(BaseModel):
    paths: List[str]


class RenamedFile(BaseModel):
    old_path: str
    new_path: str


class FilesRenamed(BaseModel):
    files: List[RenamedFile]


FileEvent = Union[DocumentSaved, DocumentChanged, FilesDeleted, FilesCreated, FilesRenamed]
