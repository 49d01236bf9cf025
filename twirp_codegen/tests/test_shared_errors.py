from twirp_codegen.shared.errors import (
    CodegenError,
    ConfigurationError,
    DescriptorError,
    UnresolvableReferenceError,
)


class TestCodegenError:
    def test_init_no_file(self):
        error = CodegenError("test message")
        assert str(error) == "test message"
        assert error.file_name is None

    def test_init_with_file(self):
        error = CodegenError("test message", "foo/bar.proto")
        assert str(error) == "[foo/bar.proto] test message"
        assert error.file_name == "foo/bar.proto"


class TestConfigurationError:
    def test_is_codegen_error(self):
        error = ConfigurationError("File(s) not found in request: a.proto")
        assert isinstance(error, CodegenError)
        assert str(error) == "File(s) not found in request: a.proto"


class TestDescriptorError:
    def test_init_with_file(self):
        error = DescriptorError("Invalid descriptor set", "set.pb")
        assert str(error) == "[set.pb] Invalid descriptor set"
        assert isinstance(error, CodegenError)


class TestUnresolvableReferenceError:
    def test_init(self):
        error = UnresolvableReferenceError(".foo.Missing", "input of Svc.Call")
        assert str(error) == "Unable to resolve type '.foo.Missing' (input of Svc.Call)"
        assert error.type_name == ".foo.Missing"
        assert error.file_name is None

    def test_init_with_file(self):
        error = UnresolvableReferenceError(".foo.Missing", "input of Svc.Call", "svc.proto")
        assert str(error) == "[svc.proto] Unable to resolve type '.foo.Missing' (input of Svc.Call)"
        assert error.file_name == "svc.proto"
