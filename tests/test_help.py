import pytest

from scrambleverse.paseto import UnknownCommandError
from scrambleverse.paseto.cli import command_help, general_help


class TestGeneralHelp:
    def test_banner_has_version(self):
        assert "PASETO CLI (9.9.9)" in general_help("9.9.9")

    def test_lists_commands(self):
        text = general_help("dev")
        for command in ("encrypt", "decrypt", "sign", "verify"):
            assert f"  {command}" in text

    def test_lists_every_flag(self):
        text = general_help("dev")
        for flags in (
            "-v, --version",
            "-h, --help",
            "-c, --command",
            "-k, --key",
            "-p, --payload",
            "-f, --file",
            "-t, --token",
            "-F, --footer",
            "-a, --assertion",
            "-g, --generateKey",
            "-j, --json",
        ):
            assert flags in text

    def test_examples_are_unindented_shell_lines(self):
        text = general_help("dev")
        assert "\nPASETO CLI" in text
        assert "  paseto-cli -c encrypt -k k4.local.xxx -p '{\"data\":\"test\"}'" in text


class TestCommandHelp:
    @pytest.mark.parametrize(
        "command, key_type",
        [
            ("encrypt", "k4.local"),
            ("decrypt", "k4.local"),
            ("sign", "k4.secret"),
            ("verify", "k4.public"),
        ],
    )
    def test_command_help(self, command, key_type):
        text = command_help(command)
        assert f"Command: {command}" in text
        assert f"({key_type}.*)" in text
        assert f"paseto-cli -c {command} -k {key_type}.xxx" in text

    def test_payload_commands_document_footer(self):
        assert "--footer" in command_help("encrypt")
        assert "--footer" in command_help("sign")
        assert "--footer" not in command_help("verify")

    def test_unknown_command(self):
        with pytest.raises(UnknownCommandError, match="Unknown command: nope"):
            command_help("nope")
