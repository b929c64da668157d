"""Identity of directories by device and inode, for cycle detection."""

import os
from typing import NamedTuple

from folder_cleaner.types import PathType


class FileIdentifier(NamedTuple):
    """Device and inode pair uniquely identifying a filesystem entry.

    Two paths reaching the same directory, for instance through a symbolic link,
    share an identifier.

    Note:
        On Windows, st_ino might not be as reliable as on Unix systems, but Python's
        os.stat implementation provides values that can be used for identification.
    """

    device_id: int
    inode_number: int

    @classmethod
    def from_path(cls, path: PathType) -> "FileIdentifier":
        """Stat ``path``, following symlinks, and build its identifier.

        Raises:
            OSError: If the path cannot be stat'ed.
        """
        stat_info = os.stat(path)
        return cls(stat_info.st_dev, stat_info.st_ino)
