from typing import Any, Awaitable, Callable, Dict, Optional

import structlog

from ..errors import UnknownCommandError
from ..protocols.prompt_protocol import PromptServiceProtocol
from ..protocols.repository_protocol import RepositoryProtocol, RepositorySetProtocol
from ..schemas import ChoiceItem
from .initialization import InitializationWorkflow
from .iteration import IterationWorkflow
from .revert import RevertRoutine

logger = structlog.get_logger(__name__)

Command = Callable[..., Awaitable[Any]]


class CommandSurface:
    """The ``init``, ``iter`` and ``cancel`` actions a host registers."""

    def __init__(
        self,
        namespace: str,
        repositories: RepositorySetProtocol,
        prompts: PromptServiceProtocol,
        initialization: InitializationWorkflow,
        iteration: IterationWorkflow,
        revert_routine: RevertRoutine,
    ):
        self.namespace = namespace
        self.repositories = repositories
        self.prompts = prompts
        self.initialization = initialization
        self.iteration = iteration
        self.revert_routine = revert_routine

    def commands(self) -> Dict[str, Command]:
        return {
            f"{self.namespace}:init": self.init,
            f"{self.namespace}:iter": self.iterate,
            f"{self.namespace}:cancel": self.cancel,
        }

    async def execute(self, command_id: str, *args: Any) -> Any:
        command = self.commands().get(command_id)
        if command is None:
            raise UnknownCommandError(f"Unknown command: {command_id}")
        return await command(*args)

    async def init(self, repo: RepositoryProtocol) -> None:
        await self.initialization.initialize(repo)

    async def iterate(self) -> None:
        repo = await self.resolve_repository()
        if repo is None:
            return
        await self.iteration.on_change(repo)

    async def cancel(self) -> None:
        repo = await self.resolve_repository()
        if repo is None:
            return
        self.revert_routine.revert(repo)

    async def resolve_repository(self) -> Optional[RepositoryProtocol]:
        """The selected repository, or the one the user picks.

        Returns None when there is nothing to pick or the pick was cancelled.
        """
        repos = self.repositories.repositories
        if any(r.selected for r in repos):
            repos = [r for r in repos if r.selected]

        if not repos:
            logger.info("no_repositories")
            return None
        if len(repos) == 1:
            return repos[0]

        choice = await self.prompts.ask_choice(
            [ChoiceItem(label=r.root) for r in repos],
            placeholder="Select a repository",
        )
        if choice is None:
            logger.info("repository_selection_cancelled")
            return None
        return next((r for r in repos if r.root == choice.item.label), None)
