"""Tests for the administrative CLI."""

import pytest

from patient_service.cli import build_parser, main


class TestCli:
    """Test argument parsing and exit codes."""

    def test_version_command_exits_zero(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["version"])
        assert exc_info.value.code == 0
        assert "Version:" in capsys.readouterr().out

    def test_no_command_prints_help(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "commands" in capsys.readouterr().out

    def test_list_patients_rejects_unknown_status(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["list-patients", "--status", "archived"])
        assert exc_info.value.code == 1
        assert "Invalid patient status" in capsys.readouterr().err

    def test_parser_knows_all_commands(self):
        parser = build_parser()
        for command in ["version", "check-db", "init-db", "seed-demo", "list-patients"]:
            args = parser.parse_args([command])
            assert args.command == command
