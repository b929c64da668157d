from typing import Optional

from folder_cleaner.types import PathType


class WalkError(Exception):
    """
    Base class for errors that abort a directory walk.

    A walk either completes and returns a consistent leaf sequence with its
    metadata, or raises a subclass of this exception and returns nothing.
    """

    pass


class RootNotFoundError(WalkError):
    """
    Exception raised when the root path of a walk does not exist.

    Attributes:
        path (str): The root path that was requested.

    Example:
        >>> error = RootNotFoundError("/no/such/folder")
        >>> str(error)
        'Root path does not exist: /no/such/folder'
    """

    def __init__(self, path: PathType) -> None:
        self.path = str(path)
        super().__init__(f"Root path does not exist: {self.path}")


class WalkIOError(WalkError):
    """
    Exception raised when a directory cannot be listed or a file cannot be stat'ed mid-walk.

    Attributes:
        path (str): The filesystem entry that could not be read.
        cause (Optional[OSError]): The underlying operating system error.

    Example:
        >>> error = WalkIOError("/data/locked", PermissionError(13, "Permission denied"))
        >>> str(error)
        'Error accessing /data/locked: [Errno 13] Permission denied'
    """

    def __init__(self, path: PathType, cause: Optional[OSError] = None) -> None:
        self.path = str(path)
        self.cause = cause
        message = f"Error accessing {self.path}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)

    @property
    def is_permission_error(self) -> bool:
        """True if the underlying failure was a permission problem."""
        return isinstance(self.cause, PermissionError)


class ConfigError(Exception):
    """Base class for configuration file errors."""

    pass


class UserDirNotFoundError(ConfigError):
    """Exception raised when the user's home directory cannot be determined."""

    def __init__(self) -> None:
        super().__init__("Unable to determine the user's home directory.")


class ConfigReadError(ConfigError):
    """
    Exception raised when the configuration file cannot be read.

    Example:
        >>> str(ConfigReadError("/home/me/.nuke.toml"))
        'Unable to read config file: /home/me/.nuke.toml'
    """

    def __init__(self, path: PathType) -> None:
        self.path = str(path)
        super().__init__(f"Unable to read config file: {self.path}")


class ConfigParseError(ConfigError):
    """Exception raised when the configuration file contains invalid TOML or invalid settings."""

    def __init__(self, path: PathType, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Failed to parse config file {self.path}: {reason}")


class ConfigGroupNotFoundError(ConfigError):
    """
    Exception raised when a requested group is missing from the configuration.

    Example:
        >>> str(ConfigGroupNotFoundError("photos"))
        "No folder group named 'photos' in your config."
    """

    def __init__(self, group: str) -> None:
        self.group = group
        super().__init__(f"No folder group named '{group}' in your config.")


class PathOrConfigKeyError(Exception):
    """
    Exception raised when a command-line key is neither a config group nor an existing path.

    Example:
        >>> str(PathOrConfigKeyError("downlaods"))
        "Your entered key: 'downlaods' is neither a valid path nor an entry in your config."
    """

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Your entered key: '{key}' is neither a valid path nor an entry in your config.")
