"""Argcomplete completers for CLI."""

import os


class PackageDirCompleter:
    """Completer for package directories.

    Directories holding Go files complete as a finished argument; the rest
    keep a trailing separator so completion can descend into them.
    """

    def __call__(self, prefix, parsed_args, **kwargs):
        parent, partial = os.path.split(prefix)
        try:
            names = os.listdir(parent or ".")
        except OSError:
            return []

        completions = []
        for name in sorted(names):
            if not name.startswith(partial) or name.startswith("."):
                continue
            path = os.path.join(parent, name)
            if not os.path.isdir(path):
                continue
            if has_go_files(path):
                completions.append(path)
            completions.append(path + os.sep)
        return completions


def has_go_files(directory: str) -> bool:
    """True if directory directly contains a .go file."""
    try:
        return any(name.endswith(".go") for name in os.listdir(directory))
    except OSError:
        return False
