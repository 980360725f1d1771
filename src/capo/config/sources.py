"""Properties file source for CAPO configuration.

This module provides:

- PropertiesFile: one successfully parsed ``{profile}.properties`` file.
- PropertiesSource: locates and parses the profile's file in a single
  search-path directory.

A directory without a readable, well-formed file is not an error: it
contributes nothing, and the reason is logged as a warning. Most
directories in a search path will not have a file for any given profile.
"""

from __future__ import annotations

import dataclasses as _dataclasses
import logging as _logging
import pathlib as _pathlib
import types as _types
import typing as _typing

import javaproperties as _javaproperties

import capo.constants as constants

_logger = _logging.getLogger(__name__)


def properties_filename(profile: str) -> str:
    """
    Build the properties file name for a profile.

    Args:
        profile: Profile name (e.g., "production").

    Returns:
        File name, e.g. "production.properties".
    """
    return f"{profile}{constants.PROPERTIES_SUFFIX}"


@_dataclasses.dataclass(frozen=True)
class PropertiesFile:
    """Key/value pairs read from one properties file."""

    filename: str
    """Bare file name, used as the provenance identifier."""

    path: _pathlib.Path
    """Full path the file was read from."""

    options: _typing.Mapping[str, str]
    """Parsed pairs, keys exactly as they appear in the file."""

    def __post_init__(self) -> None:
        # Freeze the mapping so a loaded file can't change under the merge
        object.__setattr__(self, "options", _types.MappingProxyType(dict(self.options)))

    def __hash__(self) -> int:
        return hash((self.filename, self.path, frozenset(self.options.items())))

    def __len__(self) -> int:
        return len(self.options)


class PropertiesSource:
    """
    Reads a profile's properties file from one directory at a time.

    The source holds no state between calls; a single instance can be
    reused for every directory in a search path.
    """

    def __init__(self, *, encoding: str = constants.PROPERTIES_ENCODING) -> None:
        """
        Initialize the source.

        Args:
            encoding: Text encoding of properties files. Defaults to
                ISO-8859-1, the conventional .properties encoding.
        """
        self._encoding = encoding

    def resolve(self, profile: str, directory: str) -> PropertiesFile | None:
        """
        Load ``{profile}.properties`` from a directory.

        Args:
            profile: Profile name. Must be non-empty.
            directory: Directory to look in. Not checked for existence.

        Returns:
            The parsed file, or None if it could not be opened or parsed.
        """
        filename = properties_filename(profile)
        path = _pathlib.Path(directory) / filename

        try:
            with path.open(encoding=self._encoding) as fp:
                options = self._parse(fp)
        except OSError as e:
            _logger.warning("Couldn't open file: %s (%s)", path, e.strerror or e)
            return None
        except ValueError as e:
            # Malformed escapes and undecodable bytes
            _logger.warning("Couldn't read properties from file %s: %s", path, e)
            return None

        _logger.debug("Loaded %d properties from %s", len(options), path)
        return PropertiesFile(filename=filename, path=path, options=options)

    def _parse(self, fp: _typing.TextIO) -> dict[str, str]:
        """Parse Java-style properties text into a plain dict."""
        return dict(_javaproperties.load(fp))
