"""Activation: wires the workflows to a host and its event sources."""

from typing import Callable, Dict, List, Optional

import structlog

from ..config.settings import Settings, get_settings
from ..errors import HostDependencyUnavailableError
from ..models import ChangeStore, RepositorySession
from ..protocols.host_protocol import HostProtocol
from ..protocols.repository_protocol import RepositorySetProtocol
from .commands import Command, CommandSurface
from .dispatch_gate import DispatchGate
from .file_events import FileEventRouter
from .initialization import InitializationWorkflow
from .iteration import IterationWorkflow
from .revert import RevertRoutine

logger = structlog.get_logger(__name__)


class Extension:
    """An activated (or inert) extension instance."""

    def __init__(
        self,
        session: Optional[RepositorySession] = None,
        command_surface: Optional[CommandSurface] = None,
        router: Optional[FileEventRouter] = None,
        subscriptions: Optional[List[Callable[[], None]]] = None,
    ):
        self.session = session
        self.command_surface = command_surface
        self.router = router
        self.subscriptions = subscriptions or []

    @property
    def active(self) -> bool:
        return self.session is not None and self.session.active

    @property
    def commands(self) -> Dict[str, Command]:
        if self.command_surface is None or not self.active:
            return {}
        return self.command_surface.commands()

    def deactivate(self) -> None:
        for unsubscribe in self.subscriptions:
            unsubscribe()
        self.subscriptions = []
        if self.router is not None:
            self.router.detach()
        if self.session is not None:
            self.session.discard()


async def _locate_git_api(host: HostProtocol) -> RepositorySetProtocol:
    """Any failure to locate or activate the git integration is reported
    as HostDependencyUnavailableError."""
    try:
        repositories = await host.get_git_api()
    except HostDependencyUnavailableError:
        raise
    except Exception as e:
        raise HostDependencyUnavailableError(str(e)) from e

    if repositories is None:
        raise HostDependencyUnavailableError("git integration not found")
    return repositories


async def activate(host: HostProtocol, settings: Optional[Settings] = None) -> Extension:
    """
    Build the workflows for ``host`` and subscribe them to its events.

    When the host's version-control integration cannot be obtained, a single
    warning is shown and an inert extension is returned.
    """
    settings = settings or get_settings()

    try:
        repositories = await _locate_git_api(host)
    except HostDependencyUnavailableError as e:
        logger.warning("host_dependency_unavailable", error=str(e))
        host.prompts.show_warning(f"Commit message tracking is disabled: {e}")
        return Extension()

    session = RepositorySession()
    change_store = ChangeStore(host.store, settings.EXTENSION_ID)
    revert_routine = RevertRoutine(change_store)
    initialization = InitializationWorkflow(
        session, change_store, host.prompts, settings
    )
    iteration = IterationWorkflow(change_store, host.prompts, revert_routine)
    gate = DispatchGate(
        repositories, session, change_store, initialization, revert_routine
    )
    command_surface = CommandSurface(
        settings.EXTENSION_ID,
        repositories,
        host.prompts,
        initialization,
        iteration,
        revert_routine,
    )

    router = FileEventRouter(gate, iteration)
    router.attach(host.file_events)
    subscriptions = [repositories.on_did_open_repository(command_surface.init)]

    logger.info(
        "extension_activated",
        namespace=settings.EXTENSION_ID,
        repositories=len(repositories.repositories),
    )
    return Extension(session, command_surface, router, subscriptions)
