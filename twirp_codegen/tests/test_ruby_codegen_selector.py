import pytest

from twirp_codegen.ruby_codegen.selector import select_files
from twirp_codegen.shared.descriptors import SchemaFile
from twirp_codegen.shared.errors import ConfigurationError


@pytest.fixture
def files():
    return {
        name: SchemaFile(name=name, package=name.split(".")[0])
        for name in ("a.proto", "b.proto", "c.proto", "dep.proto")
    }


class TestSelectFiles:
    def test_preserves_request_order(self, files):
        selected = select_files(["c.proto", "a.proto"], files)
        assert [f.name for f in selected] == ["c.proto", "a.proto"]

    def test_deduplicates(self, files):
        selected = select_files(["b.proto", "a.proto", "b.proto"], files)
        assert [f.name for f in selected] == ["b.proto", "a.proto"]

    def test_imports_are_not_added(self, files):
        files["a.proto"] = SchemaFile(name="a.proto", dependencies=("dep.proto",))
        selected = select_files(["a.proto"], files)
        assert [f.name for f in selected] == ["a.proto"]

    def test_returns_loaded_objects(self, files):
        (selected,) = select_files(["a.proto"], files)
        assert selected is files["a.proto"]

    def test_empty_request(self, files):
        assert select_files([], files) == []

    def test_idempotent(self, files):
        assert select_files(["b.proto", "a.proto"], files) == select_files(["b.proto", "a.proto"], files)

    def test_missing_file(self, files):
        with pytest.raises(ConfigurationError, match="File\\(s\\) not found in request: missing.proto"):
            select_files(["a.proto", "missing.proto"], files)

    def test_reports_every_missing_file(self, files):
        with pytest.raises(ConfigurationError) as exc_info:
            select_files(["x.proto", "a.proto", "y.proto"], files)
        assert "x.proto, y.proto" in str(exc_info.value)
