"""Loading folder groups from the user's TOML configuration file.

The configuration lives in ``~/.nuke.toml``. Every top-level array of tables is a
named group of folders; an optional ``[size]`` table sets the default display unit::

    [size]
    display = "MB"

    [[downloads]]
    directory = "~/Downloads"
    extensions_to_delete = ["tmp", ".log"]
    extensions_to_keep = ["pdf"]
    recursive = true
    delete_hidden = false
    protect = ["important/"]
"""

import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from folder_cleaner.deletion_rules.rule_set import RuleSet
from folder_cleaner.exceptions import (
    ConfigGroupNotFoundError,
    ConfigParseError,
    ConfigReadError,
    UserDirNotFoundError,
)
from folder_cleaner.size_units import DataSizeUnit
from folder_cleaner.types import PathType

log = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".nuke.toml"
SIZE_SECTION = "size"


def get_user_config_path(config_filename: str = CONFIG_FILE_NAME) -> Path:
    """Path of the configuration file in the user's home directory.

    Raises:
        UserDirNotFoundError: If the home directory cannot be determined.
    """
    try:
        home = Path.home()
    except RuntimeError:
        raise UserDirNotFoundError()
    return home / config_filename


class UserConfig:
    """Parsed configuration file.

    Attributes:
        display_unit (DataSizeUnit): Default unit from the ``[size]`` table.
        groups (Dict[str, List[RuleSet]]): Rule sets per group name, in file order.
    """

    def __init__(self, display_unit: DataSizeUnit, groups: Dict[str, List[RuleSet]]):
        self.display_unit = display_unit
        self.groups = groups

    def all_rule_sets(self) -> List[RuleSet]:
        return [rule_set for group in self.groups.values() for rule_set in group]

    def group(self, name: str) -> List[RuleSet]:
        """Rule sets of a single group.

        Raises:
            ConfigGroupNotFoundError: If the group is not defined.
        """
        if name not in self.groups:
            raise ConfigGroupNotFoundError(name)
        return self.groups[name]


def _string_list(entry: Mapping[str, Any], field: str, source: str) -> Optional[List[str]]:
    value = entry.get(field)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigParseError(source, f"'{field}' must be a list of strings")
    return value


def _boolean(entry: Mapping[str, Any], field: str, source: str) -> bool:
    value = entry.get(field, False)
    if not isinstance(value, bool):
        raise ConfigParseError(source, f"'{field}' must be true or false")
    return value


def _unit(value: Any, source: str) -> DataSizeUnit:
    if not isinstance(value, str):
        raise ConfigParseError(source, "display unit must be a string")
    try:
        return DataSizeUnit.parse(value)
    except ValueError as e:
        raise ConfigParseError(source, str(e))


def _rule_set_from_entry(entry: Any, group: str, default_unit: DataSizeUnit, source: str) -> RuleSet:
    if not isinstance(entry, dict):
        raise ConfigParseError(source, f"entries of group '{group}' must be tables")

    directory = entry.get("directory")
    if not isinstance(directory, str) or not directory:
        raise ConfigParseError(source, f"every entry of group '{group}' needs a 'directory'")

    # Older configs spell the delete list "extensions_to_del"
    extensions_to_delete = _string_list(entry, "extensions_to_delete", source)
    if extensions_to_delete is None:
        extensions_to_delete = _string_list(entry, "extensions_to_del", source)

    unit = default_unit
    if "display_units" in entry:
        unit = _unit(entry["display_units"], source)

    return RuleSet(
        Path(directory).expanduser(),
        extensions_to_delete=extensions_to_delete,
        extensions_to_keep=_string_list(entry, "extensions_to_keep", source),
        recurse_into_subdirectories=_boolean(entry, "recursive", source),
        include_hidden=_boolean(entry, "delete_hidden", source),
        protect_patterns=_string_list(entry, "protect", source),
        display_unit=unit,
    )


def parse_config(content: str, source: str = "<string>") -> UserConfig:
    """Parse configuration text.

    Args:
        content: TOML document.
        source: Name reported in error messages.

    Raises:
        ConfigParseError: If the TOML is invalid or a setting has the wrong type.

    Example:
        >>> config = parse_config('[[images]]\\ndirectory = "/tmp/images"\\n')
        >>> list(config.groups)
        ['images']
        >>> config.groups["images"][0].extensions_to_delete
        frozenset()
    """
    try:
        document = tomllib.loads(content)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(source, str(e))

    display_unit = DataSizeUnit.MB
    size_section = document.pop(SIZE_SECTION, None)
    if size_section is not None:
        if not isinstance(size_section, dict):
            raise ConfigParseError(source, f"'{SIZE_SECTION}' must be a table")
        if "display" in size_section:
            display_unit = _unit(size_section["display"], source)

    groups: Dict[str, List[RuleSet]] = {}
    for name, entries in document.items():
        if not isinstance(entries, list):
            raise ConfigParseError(source, f"'{name}' must be an array of tables, e.g. [[{name}]]")
        groups[name] = [_rule_set_from_entry(entry, name, display_unit, source) for entry in entries]

    return UserConfig(display_unit, groups)


def load_config(config_path: PathType) -> UserConfig:
    """Read and parse a configuration file.

    Raises:
        ConfigReadError: If the file cannot be read.
        ConfigParseError: If the file contents are invalid.
    """
    path = Path(config_path)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        log.debug("Failed to read %s: %s", path, e)
        raise ConfigReadError(path) from e
    return parse_config(content, str(path))


def fetch_group_rule_sets(config_path: PathType, group: Optional[str] = None) -> List[RuleSet]:
    """Rule sets of one group, or of every group when ``group`` is empty.

    Raises:
        ConfigReadError: If the file cannot be read.
        ConfigParseError: If the file contents are invalid.
        ConfigGroupNotFoundError: If ``group`` is not defined.
    """
    config = load_config(config_path)
    if group:
        return config.group(group)
    return config.all_rule_sets()
