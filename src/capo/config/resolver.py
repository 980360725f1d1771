"""Profile configuration resolver.

CapoConfig searches an ordered path of directories for the profile's
properties file, loads every file it finds, and merges them into one
flat mapping of settings.

Merge rules:
- Directories are processed in search-path order, lowest priority first.
- Each key is overwritten individually, so a later file replaces only the
  keys it defines; keys defined only by earlier files keep their values.
- Keys are case-insensitive: they are stored and looked up uppercased.
- For every key the resolver remembers which file supplied its current
  value (the file's bare name, e.g. "test.properties").

The user's ``~/.capo`` directory is always appended to the search path,
so personal settings override shared ones.

Thread safety: all state is built during construction and never changed
afterwards, so concurrent reads are safe.
"""

from __future__ import annotations

import logging as _logging
import pathlib as _pathlib
import typing as _typing

import capo.config.sources as sources
import capo.config.types as types
import capo.constants as constants
import capo.errors as errors

_logger = _logging.getLogger(__name__)


def normalize_key(key: str) -> str:
    """Return the canonical (uppercase) form of a setting key."""
    return key.upper()


def split_search_path(path: str) -> list[str]:
    """
    Split a search path string into its directories, preserving order.

    Note:
        The delimiter is always ':', regardless of platform. Windows drive
        letters (``C:\\capo``) will therefore be split apart.
    """
    return path.split(constants.PATH_DELIMITER)


def _user_capo_dir(home_dir: _pathlib.Path | str | None) -> str:
    """Get the user's CAPO directory, appended last to every search path."""
    if home_dir is None:
        try:
            home_dir = _pathlib.Path.home()
        except (RuntimeError, KeyError) as e:
            raise errors.HomeDirectoryUnavailableError(str(e)) from e
        # Older interpreters hand back '~' unexpanded instead of raising
        if str(home_dir).startswith("~"):
            raise errors.HomeDirectoryUnavailableError()
    return str(_pathlib.Path(home_dir) / constants.USER_CAPO_DIR)


def _numeric_getter(
    value_type: types.NumericType,
) -> _typing.Callable[[CapoConfig, str], int | float | None]:
    """Build a ``get_<type>`` method bound to one numeric domain."""

    def getter(self: CapoConfig, key: str) -> int | float | None:
        return self.get_as(key, value_type)

    getter.__name__ = f"get_{value_type.name}"
    getter.__qualname__ = f"CapoConfig.get_{value_type.name}"
    getter.__doc__ = (
        f"Get a setting as {value_type.name}, or None if missing or not a valid "
        f"{value_type.name}."
    )
    return getter


class CapoConfig:
    """
    Merged settings for one profile across a search path.

    Example:
        >>> config = CapoConfig("test", "/etc/capo:/opt/app/capo")
        >>> config.get("section1.database.user")
        'user'
        >>> config.get_location("section1.database.user")
        'test.properties'
        >>> config.get_u64("section3.integer.hundred")
        100

    Args:
        profile: Profile name. Required; None or empty raises
            ProfileUndeterminedError.
        path: Search path, directories joined by ':'. None uses
            ``constants.DEFAULT_CAPO_PATH``.
        home_dir: Home directory whose ``.capo`` subdirectory is searched
            last. None uses the current user's home.
        source: Loader for a single directory. Defaults to PropertiesSource.

    Raises:
        ProfileUndeterminedError: No profile given.
        HomeDirectoryUnavailableError: Home directory can't be determined.
        NoConfigurationFoundError: No directory had a readable file.
    """

    def __init__(
        self,
        profile: str | None,
        path: str | None = None,
        *,
        home_dir: _pathlib.Path | str | None = None,
        source: sources.PropertiesSource | None = None,
    ) -> None:
        if not profile:
            raise errors.ProfileUndeterminedError()

        if path is None:
            path = constants.DEFAULT_CAPO_PATH

        self._profile = profile
        self._search_path: tuple[str, ...] = (
            *split_search_path(path),
            _user_capo_dir(home_dir),
        )
        self._source = source if source is not None else sources.PropertiesSource()

        self._files = self._load_files()
        if not self._files:
            raise errors.NoConfigurationFoundError(self._profile, self._search_path)

        self._options: dict[str, str] = {}
        self._locations: dict[str, str] = {}
        self._merge()

    def _load_files(self) -> tuple[sources.PropertiesFile, ...]:
        """Load the profile's file from every search-path directory, in order."""
        files: list[sources.PropertiesFile] = []
        for directory in self._search_path:
            loaded = self._source.resolve(self._profile, directory)
            if loaded is not None:
                files.append(loaded)
        return tuple(files)

    def _merge(self) -> None:
        """Fold loaded files into options and locations, last writer wins."""
        for loaded in self._files:
            for key, value in loaded.options.items():
                normalized = normalize_key(key)
                self._options[normalized] = value
                self._locations[normalized] = loaded.filename

        _logger.debug(
            "Merged %d settings for profile '%s' from %d file(s)",
            len(self._options),
            self._profile,
            len(self._files),
        )

    # =========================================================================
    # Introspection
    # =========================================================================

    @property
    def profile(self) -> str:
        """The profile being resolved."""
        return self._profile

    @property
    def search_path(self) -> tuple[str, ...]:
        """Directories searched, lowest priority first (user dir last)."""
        return self._search_path

    @property
    def files(self) -> tuple[sources.PropertiesFile, ...]:
        """Files that were found, in search-path order."""
        return self._files

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and normalize_key(key) in self._options

    def __len__(self) -> int:
        return len(self._options)

    def __repr__(self) -> str:
        return (
            f"CapoConfig(profile={self._profile!r}, settings={len(self._options)}, "
            f"files={len(self._files)})"
        )

    # =========================================================================
    # Retrieval
    # =========================================================================

    def get(self, key: str) -> str | None:
        """
        Get the value of a setting.

        Args:
            key: Setting name, case-insensitive.

        Returns:
            The value, or None if no file defines the key.
        """
        return self._options.get(normalize_key(key))

    def get_as(
        self,
        key: str,
        value_type: types.NumericType | str,
    ) -> int | float | None:
        """
        Get the value of a setting parsed into a numeric domain.

        A missing key and a value that doesn't parse both return None.

        Args:
            key: Setting name, case-insensitive.
            value_type: A NumericType (e.g. ``types.U64``) or its short
                name (e.g. "u64").

        Returns:
            The parsed number, or None.

        Raises:
            KeyError: If value_type names an unknown domain.
        """
        if isinstance(value_type, str):
            value_type = types.get_numeric_type(value_type)
        value = self.get(key)
        if value is None:
            return None
        return value_type.parse(value)

    get_i8 = _numeric_getter(types.I8)
    get_i16 = _numeric_getter(types.I16)
    get_i32 = _numeric_getter(types.I32)
    get_i64 = _numeric_getter(types.I64)
    get_i128 = _numeric_getter(types.I128)
    get_isize = _numeric_getter(types.ISIZE)
    get_u8 = _numeric_getter(types.U8)
    get_u16 = _numeric_getter(types.U16)
    get_u32 = _numeric_getter(types.U32)
    get_u64 = _numeric_getter(types.U64)
    get_u128 = _numeric_getter(types.U128)
    get_usize = _numeric_getter(types.USIZE)
    get_f32 = _numeric_getter(types.F32)
    get_f64 = _numeric_getter(types.F64)

    def get_bool(self, key: str) -> bool | None:
        """
        Get the value of a setting as a bool.

        "yes"/"true" are True and "no"/"false" are False, in any case.

        Returns:
            The bool, or None if the key is missing or holds another word.
        """
        value = self.get(key)
        if value is None:
            return None
        return types.parse_bool(value)

    def get_options(self) -> dict[str, str]:
        """Get a copy of all settings, keyed by uppercase name."""
        return dict(self._options)

    def get_location(self, key: str) -> str | None:
        """
        Get the name of the file that supplied a setting's current value.

        Returns:
            File name (e.g. "test.properties"), or None if the key is missing.
        """
        return self._locations.get(normalize_key(key))

    def get_locations(self) -> dict[str, str]:
        """Get a copy of the key -> file name mapping for all settings."""
        return dict(self._locations)
