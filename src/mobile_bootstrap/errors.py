"""Exception hierarchy for mobile-bootstrap."""


class AppError(Exception):
    """Base exception for app-specific failures."""


class UsageError(ValueError, AppError):
    """Malformed invocation: no command, unknown command, bad help request."""


class FlagError(UsageError):
    """A known command was given flags or arguments it does not accept."""


class ConfigError(ValueError, AppError):
    """Project configuration (mobile.toml) could not be used."""


class CommandError(AppError):
    """Failure outcome of a command entry point.

    An empty message means the command already reported the problem
    itself; the dispatcher exits 1 without printing anything further.
    """

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class UsageTemplateError(RuntimeError):
    """The static usage template could not be rendered."""
