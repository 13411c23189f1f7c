"""
Iteration tracking.

Reacts to file events for one repository: decides whether the current
message still covers the changed files, asks the user when new files
enter the dirty set, and records which paths the message accounts for.
"""

from typing import Iterable, List, Optional, Tuple

import structlog

from ..models import ChangeStore
from ..protocols.prompt_protocol import PromptServiceProtocol
from ..protocols.repository_protocol import RepositoryProtocol
from ..schemas import (
    ChoiceLabel,
    WorkingTreeChange,
    continuation_choices,
    new_message_suggestion,
    normalize_path,
)
from .revert import RevertRoutine

logger = structlog.get_logger(__name__)

NEW_MESSAGE_PROMPT = "What's going to change?"
NEW_MESSAGE_PLACEHOLDER = "New commit message"


def all_covered(changes: List[WorkingTreeChange], pending: List[str]) -> bool:
    covered = set(pending)
    return all(change.file_path in covered for change in changes)


class IterationWorkflow:
    """Keeps a repository's iteration message in step with its changes."""

    def __init__(
        self,
        change_store: ChangeStore,
        prompts: PromptServiceProtocol,
        revert_routine: RevertRoutine,
    ):
        self.change_store = change_store
        self.prompts = prompts
        self.revert_routine = revert_routine

    async def on_change(
        self,
        repo: RepositoryProtocol,
        affected_paths: Optional[Iterable[str]] = None,
    ) -> None:
        if self.change_store.get_initial_message():
            logger.debug("initial_message_in_progress", repository=repo.root)
            return

        filtered = affected_paths is not None
        if filtered:
            wanted = {normalize_path(p) for p in affected_paths}
            changes = [c for c in repo.working_tree_changes if c.file_path in wanted]
            if not changes:
                return
        else:
            changes = repo.working_tree_changes

        pending = self.change_store.get_pending_changes(repo.root)
        message = repo.message_input or self.change_store.get_iteration_message(
            repo.root
        )

        from_input = False
        if not message and (
            not filtered or not changes or not all_covered(changes, pending)
        ):
            message = await self.prompts.ask_text(
                prompt=NEW_MESSAGE_PROMPT,
                placeholder=NEW_MESSAGE_PLACEHOLDER,
                value=repo.message_input or new_message_suggestion(len(pending)),
            )
            from_input = True

        if changes and message:
            if not all_covered(changes, pending):
                if not from_input:
                    message, decision = await self._confirm_message(message, pending)
                    logger.info(
                        "new_changes_confirmed",
                        repository=repo.root,
                        decision=decision,
                    )
                if message:
                    pending.extend(
                        c.file_path for c in changes if c.file_path not in pending
                    )
            self.change_store.set_pending_changes(repo.root, pending)

        if message:
            self.change_store.set_iteration_message(repo.root, message)
            repo.message_input = message
            logger.debug(
                "iteration_message_recorded",
                repository=repo.root,
                pending=len(pending),
            )
        else:
            self.revert_routine.revert(repo)
            self.change_store.set_pending_changes(
                repo.root, [c.file_path for c in changes]
            )

    async def _confirm_message(
        self, message: str, pending: List[str]
    ) -> Tuple[str, str]:
        """Ask whether new changes still belong to ``message``.

        Returns the resolved message and the decision taken. A dismissed
        picker or an empty replacement keeps the current message.
        """
        choice = await self.prompts.ask_choice(continuation_choices(message))
        if choice is None:
            return message, "dismissed"

        label = choice.item.label
        if label == ChoiceLabel.YES.value:
            return message, "keep"

        if label == ChoiceLabel.NO.value:
            updated = await self.prompts.ask_text(
                prompt=NEW_MESSAGE_PROMPT,
                placeholder=NEW_MESSAGE_PLACEHOLDER,
                value=new_message_suggestion(len(pending)),
            )
        else:
            updated = choice.value

        if updated:
            return updated, "replace"
        return message, "keep"
