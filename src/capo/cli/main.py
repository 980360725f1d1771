"""
Main CLI entry point for CAPO.

Provides the command-line interface using Click. Looks up one or more
settings (or all of them with -A) for a profile and prints them in a
form that can be evaluated by a shell:

    $ capo -P production section1.database.user
    SECTION1_DATABASE_USER='user' # production.properties

Exit statuses follow capo.errors: 2 no profile, 3 nothing requested,
4 missing setting, 5 no properties files, 6 no home directory.
"""

import logging as _logging
import sys as _sys
import typing as _typing

import click as _click

import capo
import capo.cli.output as output
import capo.config as config
import capo.errors as errors

# Custom Click context settings for better help formatting
CONTEXT_SETTINGS: dict[str, _typing.Any] = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 100,
}


def _configure_logging(*, quiet: bool, verbose: bool) -> None:
    """Send diagnostics to stderr at a level matching the flags."""
    if verbose:
        level = _logging.DEBUG
    elif quiet:
        level = _logging.ERROR
    else:
        level = _logging.WARNING
    _logging.basicConfig(
        stream=_sys.stderr,
        level=level,
        format="%(levelname)s: %(message)s",
        force=True,
    )


def _collect(
    capo_config: config.CapoConfig,
    keys: _typing.Iterable[str],
) -> list[output.Entry]:
    """
    Look up each key with its location.

    Returns:
        List of (normalized_key, value, location) in request order.

    Raises:
        MissingSettingError: On the first key with no value.
    """
    entries: list[output.Entry] = []
    for key in keys:
        normalized = config.normalize_key(key)
        value = capo_config.get(normalized)
        location = capo_config.get_location(normalized)
        if value is None or location is None:
            raise errors.MissingSettingError(normalized)
        entries.append((normalized, value, location))
    return entries


@_click.command(context_settings=CONTEXT_SETTINGS)
@_click.version_option(capo.__version__, "-v", "--version", prog_name="capo")
@_click.option(
    "-P",
    "--profile",
    type=str,
    default=None,
    help="Profile name to use, e.g. test, production (default: $CAPO_PROFILE)",
)
@_click.option(
    "--path",
    type=str,
    default=None,
    help="Directories to search, joined by ':' (default: $CAPO_PATH)",
)
@_click.option(
    "-A",
    "--all",
    "show_all",
    is_flag=True,
    help="Display all settings",
)
@_click.option(
    "-q",
    "--quiet",
    is_flag=True,
    help="Quiet mode: only display the value",
)
@_click.option(
    "--settings",
    "setting_options",
    multiple=True,
    help="Setting to query (repeatable); ignored with -A",
)
@_click.option(
    "--format",
    "output_format",
    type=_click.Choice(output.OUTPUT_FORMATS),
    default="shell",
    show_default=True,
    help="Output format",
)
@_click.option(
    "--verbose",
    is_flag=True,
    help="Log every directory searched",
)
@_click.argument("settings", nargs=-1)
def cli(
    profile: str | None,
    path: str | None,
    show_all: bool,
    quiet: bool,
    setting_options: tuple[str, ...],
    output_format: str,
    verbose: bool,
    settings: tuple[str, ...],
) -> None:
    """Read CAPO properties for a profile.

    SETTINGS are one or more setting names to query, ignored if -A.

    Examples:
        capo -P test section1.database.user
        capo -P test -q section3.integer.hundred
        capo -P test -A --format json
        CAPO_PROFILE=test capo --path /etc/capo:/opt/capo -A
    """
    _configure_logging(quiet=quiet, verbose=verbose)

    requested = [*setting_options, *settings]

    try:
        if not show_all and not requested:
            raise errors.MissingOptionError()

        env = config.CapoSettings()
        resolved_profile, resolved_path = env.resolve(profile, path)
        capo_config = config.CapoConfig(resolved_profile, resolved_path)

        keys = sorted(capo_config.get_options()) if show_all else requested
        entries = _collect(capo_config, keys)
    except errors.CapoError as e:
        _click.echo(e.message, err=True)
        raise SystemExit(e.exit_code) from None

    if entries:
        _click.echo(output.render(entries, output_format=output_format, quiet=quiet))


def main() -> None:
    """Main entry point with correct program name."""
    cli(prog_name="capo")


if __name__ == "__main__":
    main()
