"""
Environment defaults using pydantic-settings.

The resolver itself only accepts already-resolved strings. This module is
the one place that consults the process environment, so the command line
(or any other bootstrap code) reads it once and passes the values in.

Loads from:
1. Explicit arguments given to ``resolve()`` (highest precedence)
2. Environment variables CAPO_PROFILE and CAPO_PATH

Environment variables:
- CAPO_PROFILE: profile to use when none is given
- CAPO_PATH: search path to use when none is given
"""

import typing as _typing

import pydantic as _pydantic
import pydantic_settings as _pydantic_settings

import capo.constants as constants


class CapoSettings(_pydantic_settings.BaseSettings):
    """
    Environment-provided defaults for profile and search path.

    Both fields are optional: a missing profile is reported by the
    resolver, and a missing path falls back to the built-in default.
    Variables are read when the instance is created, not at import.
    """

    model_config = _pydantic_settings.SettingsConfigDict(
        extra="ignore",
        frozen=True,
    )

    profile: str | None = _pydantic.Field(
        default=None,
        description="Default profile (CAPO_PROFILE)",
        validation_alias=constants.CAPO_ENV_VAR,
    )

    path: str | None = _pydantic.Field(
        default=None,
        description="Default search path, directories joined by ':' (CAPO_PATH)",
        validation_alias=constants.CAPO_PATH_VAR,
    )

    @_pydantic.field_validator("profile", "path", mode="before")
    @classmethod
    def _blank_is_unset(cls, value: _typing.Any) -> _typing.Any:
        """Treat an empty or whitespace-only variable as not set."""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def resolve(
        self,
        profile: str | None = None,
        path: str | None = None,
    ) -> tuple[str | None, str | None]:
        """
        Combine explicit values with the environment defaults.

        Args:
            profile: Explicit profile, or None to use CAPO_PROFILE.
            path: Explicit search path, or None to use CAPO_PATH.

        Returns:
            Tuple of (profile, path); either may still be None.
        """
        return (
            profile if profile is not None else self.profile,
            path if path is not None else self.path,
        )
