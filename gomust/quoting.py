"""Go literal formatting shared by diagnostics and rendered output."""

import json


def go_quote(value: str) -> str:
    """Double-quoted string literal, as Go's %q prints it for plain text."""
    return json.dumps(value, ensure_ascii=False)
