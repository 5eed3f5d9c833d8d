"""Render wrapper stubs and the merged import block."""

import json
import os
from typing import Any, Dict, Iterable, Mapping, Optional

from .quoting import go_quote
from .source.models import Candidate

GENERATED_HEADER = "// Code generated by gomust; DO NOT EDIT."
SETTINGS_PREFIX = "// gomust:settings "


class UpdateError(Exception):
    """Update mode found no previous output to take settings from."""


def render(imports: Mapping[str, str], functions: Iterable[Candidate]) -> str:
    """
    Render the import block (only if non-empty) and one stub per function.

    Imports are sorted by alias and functions by name so the output is
    stable across runs.
    """
    lines = []
    if imports:
        lines.append("Imports:")
        for alias in sorted(imports):
            lines.append(f"  {alias} {go_quote(imports[alias])}")
    out = "".join(line + "\n" for line in lines)

    for fn in sorted(functions, key=lambda c: c.name):
        out += f"{fn.doc}func (must) {fn.name}()\n\n"
    return out


def render_file(body: str, settings: Dict[str, Any]) -> str:
    """Prefix rendered output with the generated-code header and settings."""
    return (
        f"{GENERATED_HEADER}\n"
        f"{SETTINGS_PREFIX}{json.dumps(settings, sort_keys=True)}\n\n"
        f"{body}"
    )


def write_output(path: str, body: str, settings: Dict[str, Any]) -> None:
    """Write the generated file: header, settings line, then body."""
    with open(path, "w") as f:
        f.write(render_file(body, settings))


def read_settings(path: str) -> Optional[Dict[str, Any]]:
    """Settings recorded in a previously generated file, or None."""
    if not os.path.exists(path):
        return None
    with open(path, "r") as f:
        for line in f:
            if line.startswith(SETTINGS_PREFIX):
                try:
                    return json.loads(line[len(SETTINGS_PREFIX):])
                except json.JSONDecodeError:
                    return None
            if not line.startswith("//"):
                break
    return None


def load_update_settings(path: str) -> Dict[str, Any]:
    """Settings to regenerate with in update mode; raises UpdateError."""
    settings = read_settings(path)
    if settings is None:
        raise UpdateError(f"no previous gomust output with recorded settings: {path}")
    return settings
