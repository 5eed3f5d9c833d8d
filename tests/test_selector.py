"""Tests for candidate selection."""

import logging

from gomust.analysis import has_wrapper_prefix, is_exported, select_candidates
from gomust.config import GeneratorConfig


def selected_names(parse_package, source):
    packages = parse_package({"a.go": source})
    return sorted(select_candidates(packages))


class TestQualificationRules:
    def test_methods_are_excluded(self, parse_package):
        source = (
            "package p\n\n"
            "type T struct{}\n\n"
            "func (t T) Open() error { return nil }\n"
            "func (t *T) Close() error { return nil }\n"
            "func Open() error { return nil }\n"
        )
        assert selected_names(parse_package, source) == ["Open"]

    def test_unexported_functions_are_excluded(self, parse_package):
        source = "package p\n\nfunc open() error { return nil }\n"
        assert selected_names(parse_package, source) == []

    def test_functions_without_results_are_excluded(self, parse_package):
        source = "package p\n\nfunc Run() {}\n"
        assert selected_names(parse_package, source) == []

    def test_wrapper_prefix_boundary(self, parse_package):
        source = (
            "package p\n\n"
            "func MustFoo() error { return nil }\n"
            "func Mustache() error { return nil }\n"
            "func Must() error { return nil }\n"
        )
        assert selected_names(parse_package, source) == ["Must", "Mustache"]

    def test_last_result_must_be_bare_error(self, parse_package):
        source = (
            "package p\n\n"
            "import \"errors\"\n\n"
            "func Single() error { return nil }\n"
            "func Pair() (int, error) { return 0, nil }\n"
            "func Named() (n int, err error) { return 0, nil }\n"
            "func Pointer() *error { return nil }\n"
            "func Qualified() errors.error { return nil }\n"
            "func Slice() []error { return nil }\n"
            "func ErrorFirst() (error, int) { return nil, 0 }\n"
            "func NotError() int { return 0 }\n"
        )
        assert selected_names(parse_package, source) == ["Named", "Pair", "Single"]

    def test_custom_prefix_and_error_type(self, parse_package):
        packages = parse_package({"a.go": (
            "package p\n\n"
            "func TryOpen() Status { return 0 }\n"
            "func Open() Status { return 0 }\n"
            "func Close() error { return nil }\n"
        )})
        config = GeneratorConfig(wrapper_prefix="Try", error_type="Status")
        assert sorted(select_candidates(packages, config)) == ["Open"]


class TestDuplicates:
    def test_later_file_wins(self, parse_package, caplog):
        packages = parse_package({
            "a.go": "package p\n\n// From a.\nfunc Open() error { return nil }\n",
            "b.go": "package p\n\n// From b.\nfunc Open() error { return nil }\n",
        })
        with caplog.at_level(logging.WARNING):
            candidates = select_candidates(packages)

        assert candidates["Open"].file.name == "b.go"
        assert candidates["Open"].doc == "// From b.\n"
        assert "overrides" in caplog.text
        assert "a.go" in caplog.text

    def test_selection_is_deterministic(self, parse_package):
        files = {
            "b.go": "package p\n\nfunc Open() error { return nil }\n",
            "a.go": "package p\n\nfunc Open() error { return nil }\n",
        }
        first = select_candidates(parse_package(files))
        second = select_candidates(parse_package(files))
        assert first["Open"].file.name == second["Open"].file.name == "b.go"


def test_is_exported():
    assert is_exported("Open")
    assert not is_exported("open")
    assert not is_exported("_Open")
    assert not is_exported("")


def test_has_wrapper_prefix():
    assert has_wrapper_prefix("MustOpen")
    assert not has_wrapper_prefix("Mustache")
    assert not has_wrapper_prefix("Must")
    assert not has_wrapper_prefix("Open")
    assert has_wrapper_prefix("TryOpen", prefix="Try")


def test_candidate_doc_has_trailing_blank_line(parse_package):
    packages = parse_package({"a.go": (
        "package p\n\n"
        "// Open opens.\n"
        "// Twice.\n"
        "func Open() error { return nil }\n"
        "func Close() error { return nil }\n"
    )})
    candidates = select_candidates(packages)
    assert candidates["Open"].doc == "// Open opens.\n// Twice.\n"
    assert candidates["Close"].doc == ""
