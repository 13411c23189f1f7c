"""Initial commit message seeding for newly seen repositories."""

from typing import Optional

import structlog

from ..config.settings import Settings
from ..models import ChangeStore, RepositorySession
from ..protocols.prompt_protocol import PromptServiceProtocol
from ..protocols.repository_protocol import RepositoryProtocol

logger = structlog.get_logger(__name__)


def describe_changes(count: int) -> str:
    plural = count > 1
    return (
        f"Your working tree seems to have [{count}] change{'s' if plural else ''}, "
        f"let's add a commit message for {'these' if plural else 'this'}"
    )


class InitializationWorkflow:
    """Decides whether a repository starts clean or needs an initial message."""

    def __init__(
        self,
        session: RepositorySession,
        change_store: ChangeStore,
        prompts: PromptServiceProtocol,
        settings: Settings,
    ):
        self.session = session
        self.change_store = change_store
        self.prompts = prompts
        self.settings = settings

    async def initialize(self, repo: RepositoryProtocol) -> None:
        await repo.status()
        changes = repo.working_tree_changes

        if not changes:
            self.session.mark_ready(repo.root)
            self.change_store.clear_initial_message()
            logger.info("repository_clean", repository=repo.root)
            return

        message = await self._resolve_initial_message(repo, len(changes))

        if message:
            if not repo.message_input:
                repo.message_input = message
            self.change_store.set_initial_message(message)
            self.session.mark_seeded(repo.root)
            logger.info(
                "initial_message_seeded", repository=repo.root, changes=len(changes)
            )
        else:
            self.session.mark_pending(repo.root)
            logger.info("initial_message_declined", repository=repo.root)

    async def _resolve_initial_message(
        self, repo: RepositoryProtocol, count: int
    ) -> Optional[str]:
        """Message input, then stored iteration message, then the global
        fallback, and only then the user."""
        message = (
            repo.message_input
            or self.change_store.get_iteration_message(repo.root)
            or self.change_store.get_initial_message()
        )
        if message:
            return message

        return await self.prompts.ask_text(
            prompt=describe_changes(count),
            placeholder="Initial commit message",
            value=repo.message_input or self.settings.INITIAL_MESSAGE_SUGGESTION,
        )
