from unittest.mock import patch

from twirp_codegen import __main__, __version__


class TestCmdFunctions:
    @patch("twirp_codegen.plugin.main")
    def test_cmd_plugin(self, mock_main):
        mock_main.return_value = 0
        assert __main__.cmd_plugin(["--version"]) == 0
        mock_main.assert_called_once_with(["--version"])

    @patch("twirp_codegen.ruby_codegen.main.main")
    def test_cmd_generate_success(self, mock_main):
        result = __main__.cmd_generate(["--descriptor-set", "set.pb"])
        assert result == 0
        mock_main.assert_called_once_with(["--descriptor-set", "set.pb"])

    @patch("twirp_codegen.ruby_codegen.main.main")
    def test_cmd_generate_failure(self, mock_main, capsys):
        mock_main.side_effect = SystemExit("Error: something broke")
        result = __main__.cmd_generate([])
        assert result == 1
        assert "Error: something broke" in capsys.readouterr().err

    @patch("twirp_codegen.ruby_codegen.main.main")
    def test_cmd_generate_exit_code(self, mock_main):
        mock_main.side_effect = SystemExit(2)
        assert __main__.cmd_generate(["--bogus"]) == 2

    def test_cmd_version(self, capsys):
        assert __main__.cmd_version([]) == 0
        assert capsys.readouterr().out == f"protoc-gen-twirp_ruby {__version__}\n"


class TestMain:
    @patch("sys.argv", ["twirp_codegen"])
    def test_main_no_args(self, capsys):
        assert __main__.main() == 0
        captured = capsys.readouterr()
        assert "Available commands:" in captured.out

    @patch("sys.argv", ["twirp_codegen", "--help"])
    def test_main_help(self, capsys):
        assert __main__.main() == 0
        assert "generate" in capsys.readouterr().out

    @patch("sys.argv", ["twirp_codegen", "unknown"])
    def test_main_unknown_command(self, capsys):
        assert __main__.main() == 1
        assert "Unknown command: unknown" in capsys.readouterr().out

    @patch("sys.argv", ["twirp_codegen", "version"])
    def test_main_dispatches(self, capsys):
        assert __main__.main() == 0
        assert __version__ in capsys.readouterr().out
