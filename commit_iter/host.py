"""In-process host for running the workflows outside an editor."""

from typing import Optional

from .config.logging import configure_logging
from .config.settings import Settings, get_settings
from .models import FileEventBus, RepositoryRegistry
from .protocols.prompt_protocol import PromptServiceProtocol
from .protocols.store_protocol import PersistentStoreProtocol
from .services import create_state_store_from_settings


class LocalHost:
    """Bundles a repository registry, an event bus, a store and prompts.

    An editor bridge opens repositories on ``registry`` and publishes file
    events on ``file_events``. Constructing it configures process-wide
    logging.
    """

    def __init__(
        self,
        prompts: PromptServiceProtocol,
        store: Optional[PersistentStoreProtocol] = None,
        settings: Optional[Settings] = None,
    ):
        settings = settings or get_settings()
        configure_logging(settings.LOG_LEVEL)
        self.registry = RepositoryRegistry()
        self.file_events = FileEventBus()
        self.prompts = prompts
        if store is None:
            store = create_state_store_from_settings(settings)
        self.store = store

    async def get_git_api(self) -> RepositoryRegistry:
        return self.registry
