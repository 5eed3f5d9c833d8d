"""Tests for qualifier reference collection."""

from gomust.analysis import build_import_needs, collect_func_references, select_candidates


def references_of(parse_go, source):
    source_file = parse_go(source)
    return collect_func_references(source_file.functions[0], source_file)


class TestCollectFuncReferences:
    def test_params_and_results(self, parse_go):
        refs = references_of(parse_go, (
            "package p\n\n"
            "func Copy(dst io.Writer, src *os.File) (int64, error) { return 0, nil }\n"
        ))
        assert refs == {"io", "os"}

    def test_nested_types(self, parse_go):
        refs = references_of(parse_go, (
            "package p\n\n"
            "func Load(m map[string]*bytes.Buffer, fn func(io.Reader) error, "
            "xs ...strings.Builder) ([]json.RawMessage, chan<- time.Time, error) "
            "{ return nil, nil, nil }\n"
        ))
        assert refs == {"bytes", "io", "strings", "json", "time"}

    def test_array_length_selector(self, parse_go):
        refs = references_of(parse_go, (
            "package p\n\n"
            "func Sum(data []byte) ([sha256.Size]byte, error) { return [sha256.Size]byte{}, nil }\n"
        ))
        assert refs == {"sha256"}

    def test_generic_function(self, parse_go):
        refs = references_of(parse_go, (
            "package p\n\n"
            "func Decode[T any](r io.Reader) (T, error) { var v T; return v, nil }\n"
        ))
        assert refs == {"io"}

    def test_body_is_not_scanned(self, parse_go):
        refs = references_of(parse_go, (
            "package p\n\n"
            "func Open(name string) error {\n"
            "\t_, err := os.Open(name)\n"
            "\treturn fmt.Errorf(\"open: %w\", err)\n"
            "}\n"
        ))
        assert refs == set()


class TestBuildImportNeeds:
    def test_merges_per_file(self, parse_package):
        packages = parse_package({
            "a.go": (
                "package p\n\n"
                "func Write(w io.Writer) error { return nil }\n"
                "func Read(r *bufio.Reader) error { return nil }\n"
            ),
            "b.go": "package p\n\nfunc Stat(fi os.FileInfo) error { return nil }\n",
        })
        needs = build_import_needs(select_candidates(packages))

        assert sorted(needs) == ["a.go", "b.go"]
        assert needs["a.go"].aliases == {"io", "bufio"}
        assert needs["b.go"].aliases == {"os"}

    def test_representative_is_first_by_name(self, parse_package):
        packages = parse_package({"a.go": (
            "package p\n\n"
            "func Write(w io.Writer) error { return nil }\n"
            "func Read(r io.Reader) error { return nil }\n"
        )})
        needs = build_import_needs(select_candidates(packages))
        assert needs["a.go"].source.name == "Read"
        assert needs["a.go"].file.name == "a.go"

    def test_file_without_references_has_empty_need(self, parse_package):
        packages = parse_package({"a.go": "package p\n\nfunc Open() error { return nil }\n"})
        needs = build_import_needs(select_candidates(packages))
        assert needs["a.go"].aliases == set()
