"""Shared fixtures for building Go packages."""

import os
import shutil
import tempfile

import pytest

from gomust.source import Package, get_parser, parse_source


@pytest.fixture
def go_package():
    """Factory writing {file name: source} into a fresh directory."""
    created = []

    def make(files):
        directory = tempfile.mkdtemp()
        created.append(directory)
        for name, content in files.items():
            with open(os.path.join(directory, name), "w") as f:
                f.write(content)
        return directory

    yield make

    for directory in created:
        shutil.rmtree(directory)


@pytest.fixture
def parse_go():
    """Parse Go source text into a SourceFile without touching disk."""
    parser = get_parser()

    def parse(content, path="a.go"):
        return parse_source(content.encode("utf-8"), path, parser)

    return parse


@pytest.fixture
def parse_package(parse_go):
    """Parse {file name: source} into the packages mapping the loader returns."""

    def parse(files):
        packages = {}
        for name in sorted(files):
            source_file = parse_go(files[name], name)
            package = packages.setdefault(source_file.package, Package(name=source_file.package))
            package.files[name] = source_file
        return packages

    return parse
