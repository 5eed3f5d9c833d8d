"""Load a Go package directory into parsed source files."""

import logging
import os
from typing import Dict

from .models import Package
from .parser import GoSyntaxError, get_parser, parse_source

logger = logging.getLogger(__name__)


class PackageLoadError(Exception):
    """The package directory could not be read or parsed."""


def list_go_files(directory: str, test_suffix: str = "_test"):
    """Sorted paths of the non-test .go files of a directory."""
    files = []
    for name in sorted(os.listdir(directory)):
        if not name.endswith(".go"):
            continue
        if name.endswith(test_suffix + ".go"):
            logger.debug(f"Skipping test file {name}")
            continue
        path = os.path.join(directory, name)
        if os.path.isfile(path):
            files.append(path)
    return files


def load_package_dir(directory: str, test_suffix: str = "_test") -> Dict[str, Package]:
    """
    Parse every non-test Go file of a directory, grouped by package name.

    Args:
        directory: Package directory (not scanned recursively)
        test_suffix: Suffix marking test packages and test files

    Returns:
        Dict of package name -> Package, test packages excluded

    Raises:
        PackageLoadError: directory or file unreadable, or a syntax error
    """
    try:
        paths = list_go_files(directory, test_suffix)
    except OSError as e:
        raise PackageLoadError(str(e)) from e

    parser = get_parser()
    packages: Dict[str, Package] = {}

    for path in paths:
        try:
            with open(path, "rb") as f:
                content = f.read()
            source_file = parse_source(content, path, parser)
        except (OSError, GoSyntaxError) as e:
            raise PackageLoadError(str(e)) from e

        if source_file.package.endswith(test_suffix):
            logger.debug(f"Skipping {source_file.name}: test package {source_file.package}")
            continue

        package = packages.setdefault(source_file.package, Package(name=source_file.package))
        package.files[path] = source_file
        logger.debug(
            f"Parsed {source_file.name}: package {source_file.package}, "
            f"{len(source_file.functions)} functions, {len(source_file.imports)} imports"
        )

    logger.debug(f"Loaded {len(paths)} files from {directory} ({len(packages)} packages)")
    return packages
