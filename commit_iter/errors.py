"""Exception types raised by commit-iter."""


class CommitIterError(Exception):
    """Base class for commit-iter errors."""

    pass


class HostDependencyUnavailableError(CommitIterError):
    """Raised when the host's version-control integration cannot be obtained."""

    pass


class UnknownCommandError(CommitIterError):
    """Raised when executing a command id that was never registered."""

    pass


class StateStoreError(CommitIterError):
    """Raised when workspace state cannot be persisted."""

    pass
