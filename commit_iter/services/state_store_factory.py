"""Factory for creating workspace state stores with DEBUG mode support."""

import structlog

from ..config.settings import Settings
from ..models import JsonStateStore, MemoryStateStore
from ..protocols.store_protocol import PersistentStoreProtocol

logger = structlog.get_logger(__name__)


def create_state_store(
    state_file_path: str, debug_mode: bool = False
) -> PersistentStoreProtocol:
    """
    Create a state store based on debug mode.

    Args:
        state_file_path: JSON file holding the workspace state
        debug_mode: If True, returns an in-memory store that is never written

    Returns:
        PersistentStoreProtocol implementation
    """
    if debug_mode:
        logger.info("state_store_selected", kind="memory")
        return MemoryStateStore()

    logger.info("state_store_selected", kind="json", path=state_file_path)
    return JsonStateStore(state_file_path)


def create_state_store_from_settings(settings: Settings) -> PersistentStoreProtocol:
    return create_state_store(
        state_file_path=settings.STATE_FILE_PATH,
        debug_mode=settings.DEBUG,
    )
