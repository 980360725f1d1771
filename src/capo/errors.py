"""
Error definitions for CAPO.

Every fatal condition has its own exception type carrying the process
exit status the command line maps it to. Library callers catch
``CapoError`` (or a specific subclass); nothing in the library exits
the process itself.

Exit statuses:
- 2: profile could not be determined
- 3: neither --all nor a list of settings was given (CLI only)
- 4: a requested setting is missing (CLI only)
- 5: no properties file found for the profile in the search path
- 6: the user's home directory could not be determined
"""

import typing as _typing

import capo.constants as constants


class CapoError(Exception):
    """Base class for CAPO errors that abort the current operation."""

    exit_code: _typing.ClassVar[int] = 1

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ProfileUndeterminedError(CapoError):
    """Raised when no profile was given and none is set in the environment."""

    exit_code = 2

    def __init__(self) -> None:
        super().__init__(
            "ERROR: CAPO can't deduce the 'profile', give it the -P argument "
            f"or set the {constants.CAPO_ENV_VAR} environment variable!"
        )


class MissingOptionError(CapoError):
    """Raised by the CLI when neither --all nor any setting was requested."""

    exit_code = 3

    def __init__(self) -> None:
        super().__init__("ERROR: either -A or a list of settings is needed!")


class MissingSettingError(CapoError):
    """Raised by the CLI when a requested setting has no value."""

    exit_code = 4

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"ERROR: missing setting {key}")


class NoConfigurationFoundError(CapoError):
    """Raised when no directory in the search path yields a properties file."""

    exit_code = 5

    def __init__(self, profile: str, search_path: _typing.Sequence[str]) -> None:
        self.profile = profile
        self.search_path = tuple(search_path)
        super().__init__(
            "ERROR: unable to locate CAPO files in the required path using "
            f"the current profile '{profile}' "
            f"(searched: {constants.PATH_DELIMITER.join(self.search_path)})"
        )


class HomeDirectoryUnavailableError(CapoError):
    """Raised when the user's home directory cannot be determined."""

    exit_code = 6

    def __init__(self, reason: str | None = None) -> None:
        message = "ERROR: Unable to find the user's home directory"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
