"""Tests for unified_cli module."""

import sys
from unittest.mock import Mock, patch

import pytest

from ascii_studio.unified_cli import COMMANDS, DESCRIPTIONS, _call_entry, main, usage

# --- Fixtures ---


@pytest.fixture
def mock_module_with_main():
    """Create a mock module with a main function."""
    module = Mock()
    module.main = Mock(return_value=0)
    return module


@pytest.fixture
def import_module():
    with patch("ascii_studio.unified_cli.importlib.import_module") as mock_import:
        yield mock_import


# --- Tests for usage() ---


class TestUsage:
    def test_usage_output(self, capsys):
        usage()
        out = capsys.readouterr().out
        assert "Usage: ascii-studio <command> [args...]" in out
        assert "Commands:" in out
        for cmd in COMMANDS:
            assert cmd in out
            assert DESCRIPTIONS[cmd] in out

    def test_usage_to_other_stream(self, capsys):
        usage(file=sys.stderr)
        assert "Usage: ascii-studio" in capsys.readouterr().err


# --- Tests for _call_entry() ---


class TestCallEntry:
    def test_call_entry_with_argv_param(self):
        mock_entry = Mock(return_value=0)
        with patch("ascii_studio.unified_cli.inspect.signature") as mock_sig:
            mock_sig.return_value.parameters = {"argv": None}
            result = _call_entry(mock_entry, ["arg1", "arg2"])

        assert result == 0
        mock_entry.assert_called_once_with(["arg1", "arg2"])

    def test_call_entry_without_argv_param(self):
        seen = {}

        def entry():
            seen["argv"] = list(sys.argv)
            return 0

        original_argv = sys.argv[:]
        result = _call_entry(entry, ["arg1", "arg2"], module_prog="test-prog")

        assert result == 0
        assert seen["argv"] == ["test-prog", "arg1", "arg2"]
        assert sys.argv == original_argv

    def test_none_return_means_success(self):
        with patch("ascii_studio.unified_cli.inspect.signature") as mock_sig:
            mock_sig.return_value.parameters = {"argv": None}
            assert _call_entry(Mock(return_value=None), []) == 0

    @pytest.mark.parametrize("code,expected", [(5, 5), (None, 0), ("boom", 1)])
    def test_call_entry_with_system_exit(self, code, expected):
        mock_entry = Mock(side_effect=SystemExit(code))
        with patch("ascii_studio.unified_cli.inspect.signature") as mock_sig:
            mock_sig.return_value.parameters = {"argv": None}
            assert _call_entry(mock_entry, []) == expected

    def test_call_entry_with_exception(self, capsys):
        mock_entry = Mock(side_effect=RuntimeError("Test error"))
        with patch("ascii_studio.unified_cli.inspect.signature") as mock_sig:
            mock_sig.return_value.parameters = {"argv": None}
            result = _call_entry(mock_entry, [])

        assert result == 1
        assert "Error running command: Test error" in capsys.readouterr().err


# --- Tests for main() ---


class TestMain:
    @pytest.mark.parametrize("argv", [[], ["-h"], ["--help"]])
    def test_help(self, argv, capsys):
        assert main(argv) == 0
        assert "Usage: ascii-studio" in capsys.readouterr().out

    def test_version(self, capsys):
        from ascii_studio import __version__

        assert main(["--version"]) == 0
        assert capsys.readouterr().out.strip() == f"ascii-studio {__version__}"

    @pytest.mark.parametrize("cmd", ["unknown", ""])
    def test_unknown_command(self, cmd, capsys):
        assert main([cmd]) == 2
        captured = capsys.readouterr()
        assert f"Unknown command: {cmd}" in captured.err
        assert "Usage: ascii-studio" in captured.out

    @pytest.mark.parametrize("cmd", sorted(COMMANDS))
    def test_dispatches_to_module(self, cmd, import_module, mock_module_with_main):
        import_module.return_value = mock_module_with_main
        assert main([cmd, "arg1"]) == 0
        import_module.assert_called_once_with(COMMANDS[cmd])

    def test_main_import_error(self, import_module, capsys):
        import_module.side_effect = ImportError("Module not found")
        assert main(["image"]) == 3
        err = capsys.readouterr().err
        assert "Failed to import command 'image'" in err
        assert "Module not found" in err

    def test_main_no_main_function(self, import_module, capsys):
        import_module.return_value = Mock(spec=[])
        assert main(["image"]) == 4
        assert "has no callable 'main'" in capsys.readouterr().err

    def test_main_non_callable_main(self, import_module, capsys):
        module = Mock()
        module.main = "not callable"
        import_module.return_value = module
        assert main(["text"]) == 4
        assert "has no callable 'main'" in capsys.readouterr().err

    def test_main_none_argv_uses_sys_argv(self, import_module, mock_module_with_main):
        original_argv = sys.argv[:]
        try:
            sys.argv = ["ascii-studio", "image", "test.png"]
            import_module.return_value = mock_module_with_main
            assert main(None) == 0
        finally:
            sys.argv = original_argv

    def test_main_subcommand_returns_error_code(self, import_module):
        module = Mock()
        module.main = Mock(return_value=42)
        import_module.return_value = module
        with patch("ascii_studio.unified_cli.inspect.signature") as mock_sig:
            mock_sig.return_value.parameters = {"argv": None}
            assert main(["image", "test"]) == 42
        module.main.assert_called_once_with(["test"])

    def test_main_with_sequence_type(self, import_module, mock_module_with_main):
        import_module.return_value = mock_module_with_main
        assert main(("text", "arg")) == 0
        assert main(["text", "arg"]) == 0


# --- Integration-style Tests ---


class TestCommandsIntegration:
    def test_commands_dict_has_expected_entries(self):
        assert COMMANDS == {
            "charsets": "ascii_studio.palettes",
            "image": "ascii_studio.image_to_ascii",
            "text": "ascii_studio.text_to_ascii",
        }
        assert set(DESCRIPTIONS) == set(COMMANDS)

    def test_all_commands_are_importable(self):
        import importlib

        for module_path in COMMANDS.values():
            module = importlib.import_module(module_path)
            assert callable(getattr(module, "main", None))

    def test_charsets_end_to_end(self, capsys):
        assert main(["charsets", "--names-only"]) == 0
        assert "braille" in capsys.readouterr().out.split()

    def test_bad_subcommand_args_exit_code(self, capsys):
        assert main(["image", "--charset", "nope", "x.png"]) == 2
