"""End-to-end tests for the scan and resolve pipeline."""

import logging

import pytest

from gomust import GeneratorConfig, render, run_pipeline
from gomust.source import PackageLoadError


READER_GO = '''package reader

import (
	"context"
	"io"
)

// ReadAll reads everything.
func ReadAll() (int, error) { return 0, nil }

// MustReadAll is already a wrapper.
func MustReadAll() (int, error) { return 0, nil }

// Fetch reads from r until ctx is done.
func Fetch(ctx context.Context, r io.Reader) ([]byte, error) { return nil, nil }

func helper() error { return nil }
'''

WRITER_GO = '''package reader

import "io"

func Drain(w io.Writer) error { return nil }
'''


def test_readall_example(go_package):
    directory = go_package({"reader.go": READER_GO.split("// Fetch")[0]})
    result = run_pipeline(directory)

    assert sorted(result.candidates) == ["ReadAll"]
    out = render(result.resolution.import_paths(), result.functions)
    assert out.count("func (must) ReadAll()") == 1
    assert "MustReadAll" not in out


def test_full_package(go_package):
    directory = go_package({
        "reader.go": READER_GO,
        "writer.go": WRITER_GO,
        "reader_test.go": "package reader\n\nfunc TestThing() error { return nil }\n",
    })
    result = run_pipeline(directory)

    assert [c.name for c in result.functions] == ["Drain", "Fetch", "ReadAll"]
    assert result.resolution.import_paths() == {"context": "context", "io": "io"}
    assert result.error_count == 0


def test_rerun_is_identical(go_package):
    directory = go_package({
        "a.go": 'package p\n\nimport f "fmt"\n\nfunc A(x f.Stringer) error { return nil }\n',
        "b.go": 'package p\n\nimport f "strings"\n\nfunc B(x f.Builder) error { return nil }\n',
    })
    first = run_pipeline(directory)
    second = run_pipeline(directory)

    assert first.resolution.import_paths() == second.resolution.import_paths()
    assert first.error_count == second.error_count == 1
    assert render(first.resolution.import_paths(), first.functions) == \
        render(second.resolution.import_paths(), second.functions)


def test_parse_failure_is_fatal(go_package):
    directory = go_package({"a.go": "package p\n\nfunc A( error {\n"})
    with pytest.raises(PackageLoadError):
        run_pipeline(directory)


def test_unknown_alias_strategy(go_package):
    directory = go_package({"a.go": "package p\n"})
    with pytest.raises(ValueError):
        run_pipeline(directory, GeneratorConfig(alias_strategy="bogus"))


def test_progress_is_logged_at_debug(go_package, caplog):
    caplog.set_level(logging.INFO, logger="gomust")
    directory = go_package({"reader.go": READER_GO, "writer.go": WRITER_GO})
    run_pipeline(directory)
    assert [r.getMessage() for r in caplog.records if r.levelno == logging.INFO] == []

    caplog.set_level(logging.DEBUG, logger="gomust")
    run_pipeline(directory)
    messages = [r.getMessage() for r in caplog.records if r.levelno == logging.DEBUG]
    assert any(m.startswith("Loaded 2 files") for m in messages)
    assert "Selected 3 functions" in messages
