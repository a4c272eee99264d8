"""Build a description of the host processor and print it as text or JSON."""

from __future__ import annotations

import enum
import sys
from collections.abc import Collection, Sequence
from pathlib import Path
from typing import Union

from .aarch64 import Aarch64Feature, Aarch64Info, feature_name, feature_value
from .cache_info import CacheInfo
from .introspection import features_from_cpuinfo_flags

Tree = Union[int, str, list, dict]
"""A node of the report: an int, a string, a list of nodes or a dict of nodes."""

_JSON_ESCAPED = frozenset('"\\/\b\f\n\r\t')
_KEY_WIDTH = 15


class OutputFormat(enum.Enum):
    """How the report is printed."""

    TEXT = "text"
    JSON = "json"


class UsageError(Exception):
    """Raised for a command line that asks for help or holds an unknown option."""

    def __init__(self, argument: str) -> None:
        super().__init__(f"unrecognised argument: {argument}")
        self.argument = argument
        self.help_requested = argument in ("-h", "--help")


def sorted_flag_names(features: Collection[Aarch64Feature]) -> list[str]:
    """Names of the features present, in byte order."""
    return sorted(
        feature_name(feature)
        for feature in Aarch64Feature
        if feature_value(features, feature)
    )


def cache_info_entries(cache_info: CacheInfo) -> list[dict[str, Tree]]:
    """One mapping per cache level, with the fields in display order."""
    return [
        {
            "level": level.level,
            "cache_type": level.cache_type.label(),
            "cache_size": level.cache_size,
            "ways": level.ways,
            "line_size": level.line_size,
            "tlb_entries": level.tlb_entries,
            "partitioning": level.partitioning,
        }
        for level in cache_info
    ]


def build_aarch64_tree(info: Aarch64Info) -> dict[str, Tree]:
    """Report tree for an AArch64 processor."""
    return {
        "arch": "aarch64",
        "implementer": info.implementer,
        "variant": info.variant,
        "part": info.part,
        "revision": info.revision,
        "flags": sorted_flag_names(info.features),
    }


def json_string(value: str) -> str:
    """Quote ``value``, putting a backslash before quotes, slashes and control characters."""
    escaped = "".join("\\" + ch if ch in _JSON_ESCAPED else ch for ch in value)
    return f'"{escaped}"'


def to_json(tree: Tree) -> str:
    """Compact JSON for a report tree; map keys are written without escaping."""
    if isinstance(tree, dict):
        body = ",".join(f'"{key}":{to_json(value)}' for key, value in tree.items())
        return "{" + body + "}"
    if isinstance(tree, list):
        return "[" + ",".join(to_json(item) for item in tree) + "]"
    if isinstance(tree, str):
        return json_string(tree)
    if isinstance(tree, int):
        return str(tree)
    raise TypeError(f"cannot render {type(tree).__name__} in a report")


def _text_field(node: Tree) -> str:
    if isinstance(node, dict):
        if not node:
            return ""
        return "{" + to_json(node)[1:-1] + "}"
    if isinstance(node, list):
        return ",".join(_text_field(item) for item in node)
    if isinstance(node, str):
        return node
    if isinstance(node, int):
        return f"{node:3d} (0x{node & 0xFFFFFFFF:02X})"
    raise TypeError(f"cannot render {type(node).__name__} in a report")


def to_text(tree: Tree) -> str:
    """Plain text for a report tree: one ``key : value`` line per top-level entry."""
    if not isinstance(tree, dict):
        return ""
    return "\n".join(
        f"{key:<{_KEY_WIDTH}} : {_text_field(value)}" for key, value in tree.items()
    )


def usage(name: str) -> str:
    """Help message for the command started as ``name``."""
    return (
        "\n"
        f"Usage: {name} [options]\n"
        "      Options:\n"
        "      -h | --help     Show help message.\n"
        "      -j | --json     Format output as json instead of plain text.\n"
        "\n"
    )


def parse_arguments(argv: Sequence[str]) -> OutputFormat:
    """Output format asked for by ``argv`` (program name excluded)."""
    output_format = OutputFormat.TEXT
    for argument in argv:
        if argument in ("-j", "--json"):
            output_format = OutputFormat.JSON
        else:
            raise UsageError(argument)
    return output_format


def render(tree: Tree, output_format: OutputFormat) -> str:
    """Report tree in the given format, without a trailing newline."""
    if output_format is OutputFormat.JSON:
        return to_json(tree)
    return to_text(tree)


def _parse_int(text: str) -> int:
    try:
        return int(text.strip(), 0)
    except ValueError:
        return 0


def _detect_info(path: Path = Path("/proc/cpuinfo")) -> Aarch64Info:
    try:
        content = path.read_text(encoding="utf-8", errors="replace")
    except OSError:
        return Aarch64Info()
    fields: dict[str, str] = {}
    for line in content.splitlines():
        key, sep, value = line.partition(":")
        if sep:
            fields.setdefault(key.strip(), value.strip())
    return Aarch64Info(
        features=features_from_cpuinfo_flags(fields.get("Features", "")),
        implementer=_parse_int(fields.get("CPU implementer", "0")),
        variant=_parse_int(fields.get("CPU variant", "0")),
        part=_parse_int(fields.get("CPU part", "0")),
        revision=_parse_int(fields.get("CPU revision", "0")),
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Print the host processor report; returns the process exit status."""
    program = sys.argv[0] if sys.argv and sys.argv[0] else "cpufeat"
    arguments = list(sys.argv[1:] if argv is None else argv)
    tree = build_aarch64_tree(_detect_info())
    try:
        output_format = parse_arguments(arguments)
    except UsageError as error:
        sys.stdout.write(usage(program))
        return 0 if error.help_requested else 1
    sys.stdout.write(render(tree, output_format) + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())