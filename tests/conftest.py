"""
Shared pytest fixtures for CAPO tests.

This file is automatically loaded by pytest. Fixtures defined here are
available to all test files without explicit imports.
"""

import logging as _logging
import os as _os
import pathlib as _pathlib
import typing as _typing
import unittest.mock as _mock

import click.testing as _click_testing
import pytest as _pytest

import capo.config as config

# Environment keys that should be cleared for isolated tests
ENV_KEYS_TO_CLEAR = [
    "CAPO_PROFILE",
    "CAPO_PATH",
]

# Directory holding the ten-key test.properties fixture
FIXTURES_DIR = _pathlib.Path(__file__).parent / "fixtures" / "capo"

# Expected contents of fixtures/capo/test.properties (keys as written)
FIXTURE_OPTIONS = {
    "section1.database.user": "user",
    "section1.database.password": "password",
    "section2.programA.run": "true",
    "section2.programA.output": "/testing/resources",
    "section2.programB.run": "false",
    "section2.programB.contactList": "apples@banannas.com",
    "section3.integer.one": "1",
    "section3.integer.hundred": "100",
    "section4.float.pi": "3.1415",
    "section4.float.phi": "1.6180",
}


# =============================================================================
# Isolation
# =============================================================================


@_pytest.fixture(autouse=True)
def isolated_home(
    tmp_path_factory: _pytest.TempPathFactory,
    monkeypatch: _pytest.MonkeyPatch,
) -> _pathlib.Path:
    """
    Point HOME at an empty directory and clear CAPO_* variables.

    The resolver always searches ~/.capo, so a real user's files must
    never leak into test results.
    """
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    for key in ENV_KEYS_TO_CLEAR:
        monkeypatch.delenv(key, raising=False)
    return home


@_pytest.fixture(autouse=True)
def restore_root_logging() -> _typing.Iterator[None]:
    """Undo logging configuration done by CLI invocations."""
    root = _logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@_pytest.fixture
def clean_env() -> dict[str, str]:
    """
    Return environment dict with test-related keys removed.

    Use with mock.patch.dict to isolate tests from the actual environment.
    """
    return {k: v for k, v in _os.environ.items() if k not in ENV_KEYS_TO_CLEAR}


@_pytest.fixture
def isolated_env(clean_env: dict[str, str]) -> _typing.Any:
    """
    Context manager that isolates tests from environment variables.

    Usage:
        def test_something(isolated_env):
            with isolated_env:
                settings = config.CapoSettings()
    """
    return _mock.patch.dict(_os.environ, clean_env, clear=True)


# =============================================================================
# Properties directories
# =============================================================================


@_pytest.fixture
def fixtures_dir() -> _pathlib.Path:
    """Directory containing the shared test.properties fixture."""
    return FIXTURES_DIR


@_pytest.fixture
def fixture_options() -> dict[str, str]:
    """Expected contents of the shared test.properties fixture."""
    return dict(FIXTURE_OPTIONS)


@_pytest.fixture
def fixture_config(fixtures_dir: _pathlib.Path) -> config.CapoConfig:
    """Resolver for profile 'test' over the fixture directory only."""
    return config.CapoConfig("test", str(fixtures_dir))


@_pytest.fixture
def make_capo_dir(
    tmp_path: _pathlib.Path,
) -> _typing.Callable[..., _pathlib.Path]:
    """
    Factory creating a directory with one properties file in it.

    Usage:
        def test_merge(make_capo_dir):
            shared = make_capo_dir("shared", "a = 1\\n")
            site = make_capo_dir("site", "a = 2\\n", profile="prod")
    """

    def _make(name: str, content: str | None = None, *, profile: str = "test") -> _pathlib.Path:
        directory = tmp_path / name
        directory.mkdir(parents=True, exist_ok=True)
        if content is not None:
            (directory / f"{profile}.properties").write_text(content, encoding="latin-1")
        return directory

    return _make


# =============================================================================
# CLI
# =============================================================================


@_pytest.fixture
def cli_runner() -> _click_testing.CliRunner:
    """CLI runner for end-to-end tests."""
    return _click_testing.CliRunner()
