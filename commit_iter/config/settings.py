from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Values control the key/command namespace, the default prompt texts and
    where the workspace state is persisted between editor sessions.
    """

    # Namespace for persisted keys and command ids ("1nm:iter", ...)
    EXTENSION_ID: str = "1nm"
    INITIAL_MESSAGE_SUGGESTION: str = "getting started with rigorous git routines"

    # Workspace-scoped state file
    STATE_FILE_PATH: str = "./.commit-iter/state.json"

    # Development and debugging
    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False


@lru_cache
def get_settings() -> Settings:
    return Settings()
