"""
Output formatting for looked-up settings.

Each entry is a (key, value, location) triple. The shell format prints
lines that can be evaluated by a POSIX shell; json and yaml print a
mapping keyed by setting name, in the order the entries were given.
"""

import json as _json
import typing as _typing

import yaml as _yaml

Entry = tuple[str, str, str]

OUTPUT_FORMATS = ["shell", "json", "yaml"]


def fix_key(key: str) -> str:
    """Turn a setting name into a shell-friendly variable name."""
    return key.replace(".", "_").replace("-", "_")


def render(
    entries: _typing.Sequence[Entry],
    *,
    output_format: str,
    quiet: bool,
) -> str:
    """
    Format looked-up settings for output.

    Args:
        entries: (key, value, location) triples in output order.
        output_format: One of OUTPUT_FORMATS.
        quiet: Only show values, without variable names or locations.

    Returns:
        Formatted text without a trailing newline.

    Raises:
        ValueError: If output_format is not one of OUTPUT_FORMATS.
    """
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(f"Unknown output format: {output_format}")

    if output_format == "shell":
        if quiet:
            return "\n".join(value for _, value, _ in entries)
        return "\n".join(
            f"{fix_key(key)}='{value}' # {location}" for key, value, location in entries
        )

    data: dict[str, _typing.Any]
    if quiet:
        data = {key: value for key, value, _ in entries}
    else:
        data = {
            key: {"value": value, "location": location} for key, value, location in entries
        }

    if output_format == "json":
        return _json.dumps(data, indent=2)
    return _yaml.safe_dump(data, default_flow_style=False, sort_keys=False).rstrip("\n")
