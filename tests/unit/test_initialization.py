"""Unit tests for InitializationWorkflow."""

import pytest

from commit_iter.models import InitializationState
from commit_iter.services import InitializationWorkflow
from commit_iter.services.initialization import describe_changes


class TestInitializationWorkflow:
    @pytest.fixture(autouse=True)
    def _setup(self, session, change_store, prompts, settings, make_repo):
        self.session = session
        self.change_store = change_store
        self.prompts = prompts
        self.settings = settings
        self.make_repo = make_repo
        self.workflow = InitializationWorkflow(session, change_store, prompts, settings)

    @pytest.mark.asyncio
    async def test_clean_repository_is_initialized_without_prompt(self):
        """Test clean repository is initialized without prompt."""
        repo = self.make_repo("/work/clean")
        self.change_store.set_initial_message("left over")

        await self.workflow.initialize(repo)

        assert repo.status_calls == 1
        assert self.session.is_initialized(repo.root)
        assert self.prompts.prompt_count == 0
        assert self.change_store.get_initial_message() is None

    @pytest.mark.asyncio
    async def test_dirty_repository_prompts_once_and_seeds(self):
        """Test dirty repository prompts once and seeds."""
        repo = self.make_repo("/work/dirty", "a.py", "b.py")
        self.prompts.texts = ["feat: start"]

        await self.workflow.initialize(repo)

        assert len(self.prompts.text_calls) == 1
        call = self.prompts.text_calls[0]
        assert call["value"] == self.settings.INITIAL_MESSAGE_SUGGESTION
        assert call["placeholder"] == "Initial commit message"
        assert "[2] changes" in call["prompt"]
        assert repo.message_input == "feat: start"
        assert self.change_store.get_initial_message() == "feat: start"
        assert not self.session.is_initialized(repo.root)
        assert self.session.state(repo.root) is InitializationState.SEEDED

    @pytest.mark.asyncio
    async def test_dismissed_prompt_persists_nothing(self):
        """Test dismissed prompt persists nothing."""
        repo = self.make_repo("/work/dirty", "a.py")
        self.prompts.texts = [None]

        await self.workflow.initialize(repo)

        assert repo.message_input == ""
        assert self.change_store.get_initial_message() is None
        assert self.session.state(repo.root) is InitializationState.PENDING

    @pytest.mark.asyncio
    async def test_existing_message_input_wins(self):
        """Test existing message input wins."""
        repo = self.make_repo("/work/dirty", "a.py", message_input="wip: typed")
        self.change_store.set_iteration_message(repo.root, "stored")

        await self.workflow.initialize(repo)

        assert self.prompts.prompt_count == 0
        assert repo.message_input == "wip: typed"
        assert self.change_store.get_initial_message() == "wip: typed"

    @pytest.mark.asyncio
    async def test_stored_iteration_message_before_global_fallback(self):
        """Test stored iteration message before global fallback."""
        repo = self.make_repo("/work/dirty", "a.py")
        self.change_store.set_iteration_message(repo.root, "feat: stored")
        self.change_store.set_initial_message("feat: global")

        await self.workflow.initialize(repo)

        assert self.prompts.prompt_count == 0
        assert repo.message_input == "feat: stored"

    @pytest.mark.asyncio
    async def test_global_fallback_avoids_prompting_second_repository(self):
        """Test global fallback avoids prompting second repository."""
        first = self.make_repo("/work/a", "a.py")
        second = self.make_repo("/work/b", "b.py")
        self.prompts.texts = ["feat: both"]

        await self.workflow.initialize(first)
        await self.workflow.initialize(second)

        assert len(self.prompts.text_calls) == 1
        assert second.message_input == "feat: both"


class TestDescribeChanges:
    def test_singular(self):
        """Test singular."""
        assert describe_changes(1) == (
            "Your working tree seems to have [1] change, "
            "let's add a commit message for this"
        )

    def test_plural(self):
        """Test plural."""
        assert describe_changes(3).endswith("[3] changes, let's add a commit message for these")
