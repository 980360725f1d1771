"""
Shared constants for CAPO.

This module provides a single source of truth for default values
that are used across multiple modules.
"""

# Environment variables (read only by capo.config.settings)
CAPO_ENV_VAR = "CAPO_PROFILE"
"""Environment variable naming the default profile."""

CAPO_PATH_VAR = "CAPO_PATH"
"""Environment variable holding the default search path."""

# Search path
DEFAULT_CAPO_PATH = "/home/casa/capo:/home/ssa/capo"
"""Search path used when none is given explicitly or via CAPO_PATH."""

PATH_DELIMITER = ":"
"""Separator between directories in a search path string.

There is no escaping, so a directory containing ':' cannot be expressed.
"""

USER_CAPO_DIR = ".capo"
"""Directory under the user's home that is always searched last."""

# Properties files
PROPERTIES_SUFFIX = ".properties"
"""Suffix appended to the profile name to form the file name."""

PROPERTIES_ENCODING = "latin-1"
"""Encoding of .properties files (ISO-8859-1, as in Java)."""
