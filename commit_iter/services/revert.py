import structlog

from ..models import ChangeStore
from ..protocols.repository_protocol import RepositoryProtocol

logger = structlog.get_logger(__name__)


class RevertRoutine:
    """Resets a repository to the empty baseline: no message, nothing pending."""

    def __init__(self, change_store: ChangeStore):
        self.change_store = change_store

    def revert(self, repo: RepositoryProtocol) -> None:
        repo.message_input = ""
        self.change_store.set_pending_changes(repo.root, [])
        self.change_store.set_iteration_message(repo.root, "")
        logger.info("iteration_reverted", repository=repo.root)
