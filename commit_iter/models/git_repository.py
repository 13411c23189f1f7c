import asyncio
from pathlib import Path
from typing import List, Optional

import structlog
from git import Repo

from ..schemas import FileStatus, WorkingTreeChange, normalize_path

logger = structlog.get_logger(__name__)

_CHANGE_TYPES = {
    "A": FileStatus.ADDED,
    "D": FileStatus.DELETED,
    "R": FileStatus.RENAMED,
}


class GitRepository:
    """Working copy backed by GitPython.

    The working tree change list covers unstaged changes and untracked
    files, and is only refreshed by ``status()``.
    """

    def __init__(self, local_path: str, selected: bool = False):
        self.local_path = Path(local_path)
        self.repo = Repo(self.local_path)
        self.selected = selected
        self.message_input = ""
        self._changes: List[WorkingTreeChange] = []

    @property
    def root(self) -> str:
        return normalize_path(self.repo.working_tree_dir)

    @property
    def working_tree_changes(self) -> List[WorkingTreeChange]:
        return list(self._changes)

    async def status(self) -> None:
        self._changes = await asyncio.to_thread(self._collect_changes)

    def _collect_changes(self) -> List[WorkingTreeChange]:
        root = Path(self.root)
        changes = []

        # Index vs working tree, i.e. unstaged modifications
        for item in self.repo.index.diff(None):
            file_path = item.b_path or item.a_path
            old_file_path: Optional[str] = None
            if item.renamed_file:
                old_file_path = str(root / item.a_path)
            changes.append(
                WorkingTreeChange(
                    status=_CHANGE_TYPES.get(item.change_type, FileStatus.MODIFIED),
                    file_path=str(root / file_path),
                    old_file_path=old_file_path,
                )
            )

        for file_path in self.repo.untracked_files:
            changes.append(
                WorkingTreeChange(
                    status=FileStatus.UNTRACKED, file_path=str(root / file_path)
                )
            )

        logger.debug("status_refreshed", repository=self.root, changes=len(changes))
        return changes
