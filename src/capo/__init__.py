"""
CAPO - profile configuration lookup

Resolves a named profile into one merged set of settings by searching
an ordered path of directories for ``{profile}.properties`` files.
"""

import importlib.metadata as _metadata

# Version is defined in pyproject.toml - read it and parse into tuple (primary representation)
_raw_version = _metadata.version("capo")
__version_info__: tuple[int, int, int] = tuple(int(x) for x in _raw_version.split(".")[:3])  # type: ignore[assignment]
__version__: str = ".".join(str(x) for x in __version_info__)
__author__ = "CAPO Contributors"

from capo.config import CapoConfig, CapoSettings  # noqa: E402
from capo.errors import CapoError  # noqa: E402

__all__ = ["__version__", "__version_info__", "CapoConfig", "CapoSettings", "CapoError"]
