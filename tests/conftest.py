"""Shared fakes for the host collaborators."""

from typing import List, Optional

import pytest

from commit_iter.config.settings import Settings
from commit_iter.models import ChangeStore, MemoryStateStore, RepositorySession
from commit_iter.schemas import (
    ChoiceItem,
    ChoiceResult,
    FileStatus,
    WorkingTreeChange,
    normalize_path,
)


class FakeRepository:
    """RepositoryProtocol implementation whose changes are set by the test."""

    def __init__(
        self,
        root: str,
        files: Optional[List[str]] = None,
        message_input: str = "",
        selected: bool = False,
    ):
        self._root = normalize_path(root)
        self.message_input = message_input
        self.selected = selected
        self.status_calls = 0
        self.changes: List[WorkingTreeChange] = []
        self.set_changes(*(files or []))

    @property
    def root(self) -> str:
        return self._root

    @property
    def working_tree_changes(self) -> List[WorkingTreeChange]:
        return list(self.changes)

    async def status(self) -> None:
        self.status_calls += 1

    def path(self, name: str) -> str:
        return normalize_path(f"{self._root}/{name}")

    def set_changes(self, *names: str) -> None:
        self.changes = [
            WorkingTreeChange(status=FileStatus.MODIFIED, file_path=self.path(n))
            for n in names
        ]


class ScriptedPrompts:
    """PromptServiceProtocol that replays queued answers.

    ``texts`` holds answers for ``ask_text``; ``choices`` holds
    ``(label, typed_value)`` tuples for ``ask_choice``. ``None`` in either
    queue, or an empty queue, means the prompt was dismissed.
    """

    def __init__(self):
        self.texts: list = []
        self.choices: list = []
        self.text_calls: list = []
        self.choice_calls: list = []
        self.warnings: list = []

    async def ask_text(
        self, prompt: str, placeholder: str, value: Optional[str] = None
    ) -> Optional[str]:
        self.text_calls.append(
            {"prompt": prompt, "placeholder": placeholder, "value": value}
        )
        return self.texts.pop(0) if self.texts else None

    async def ask_choice(
        self, items: List[ChoiceItem], placeholder: Optional[str] = None
    ) -> Optional[ChoiceResult]:
        self.choice_calls.append(items)
        answer = self.choices.pop(0) if self.choices else None
        if answer is None:
            return None
        label, value = answer
        item = next(i for i in items if i.label == label)
        return ChoiceResult(item=item, value=value)

    def show_warning(self, message: str) -> None:
        self.warnings.append(message)

    @property
    def prompt_count(self) -> int:
        return len(self.text_calls) + len(self.choice_calls)


@pytest.fixture
def settings() -> Settings:
    return Settings(DEBUG=True)


@pytest.fixture
def state_store() -> MemoryStateStore:
    return MemoryStateStore()


@pytest.fixture
def change_store(state_store, settings) -> ChangeStore:
    return ChangeStore(state_store, settings.EXTENSION_ID)


@pytest.fixture
def session() -> RepositorySession:
    return RepositorySession()


@pytest.fixture
def prompts() -> ScriptedPrompts:
    return ScriptedPrompts()


@pytest.fixture
def make_repo():
    def _make(root: str = "/work/repo", *files: str, **kwargs) -> FakeRepository:
        return FakeRepository(root, list(files), **kwargs)

    return _make
