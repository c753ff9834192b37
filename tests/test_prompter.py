"""
Unit tests for the console prompter.

Rich and prompt_toolkit input functions are patched; output is captured
from a Rich console writing to a buffer.
"""

from unittest.mock import patch

import pytest

from db_console.cli.prompter import ConsolePrompter, Prompter


OPTIONS = ("Local file", "Network File System (NFS)", "Samba (SMB)", "Cancel")


class TestPrompterInterface:
    """Test the abstract Prompter interface."""

    def test_cannot_instantiate(self):
        with pytest.raises(TypeError):
            Prompter()

    def test_console_prompter_is_prompter(self, console_prompter):
        assert isinstance(console_prompter, Prompter)


class TestSelectFromMenu:
    """Test numbered menu selection."""

    @patch('db_console.cli.prompter.Prompt.ask')
    def test_displays_menu(self, mock_ask, console_prompter, output):
        mock_ask.return_value = "1"

        console_prompter.select_from_menu("Restore Database File", OPTIONS, "Local file")

        text = output.getvalue()
        assert "Restore Database File" in text
        assert "1) Local file" in text
        assert "2) Network File System (NFS)" in text
        assert "3) Samba (SMB)" in text
        assert "4) Cancel" in text
        assert "Choose the restore database file" in mock_ask.call_args.args[0]
        assert mock_ask.call_args.kwargs["default"] == "1"

    @patch('db_console.cli.prompter.Prompt.ask')
    def test_empty_input_uses_default(self, mock_ask, console_prompter):
        mock_ask.return_value = ""

        assert console_prompter.select_from_menu("Restore Database File", OPTIONS, "Local file") == "Local file"

    @patch('db_console.cli.prompter.Prompt.ask')
    def test_rich_default_passthrough(self, mock_ask, console_prompter):
        mock_ask.side_effect = lambda *args, **kwargs: kwargs["default"]

        assert console_prompter.select_from_menu("Restore Database File", OPTIONS, "Local file") == "Local file"

    @pytest.mark.parametrize("answer,expected", [
        ("1", "Local file"),
        ("2", "Network File System (NFS)"),
        ("3", "Samba (SMB)"),
        ("4", "Cancel"),
        ("samba (smb)", "Samba (SMB)"),
        (" 2 ", "Network File System (NFS)"),
    ])
    @patch('db_console.cli.prompter.Prompt.ask')
    def test_choices(self, mock_ask, console_prompter, answer, expected):
        mock_ask.return_value = answer

        assert console_prompter.select_from_menu("Backup File Location", OPTIONS, "Local file") == expected

    @patch('db_console.cli.prompter.Prompt.ask')
    def test_invalid_then_valid(self, mock_ask, console_prompter, output):
        mock_ask.side_effect = ["9", "abc", "0", "3"]

        result = console_prompter.select_from_menu("Backup File Location", OPTIONS, "Local file")

        assert result == "Samba (SMB)"
        assert mock_ask.call_count == 4
        assert output.getvalue().count("Invalid selection") == 3

    @patch('db_console.cli.prompter.Prompt.ask')
    def test_no_default(self, mock_ask, console_prompter, output):
        mock_ask.side_effect = ["", "2"]

        result = console_prompter.select_from_menu("Backup File Location", OPTIONS)

        assert result == "Network File System (NFS)"
        assert "default" not in mock_ask.call_args.kwargs
        assert output.getvalue().count("Invalid selection") == 1


class TestAskText:
    """Test free-text prompts with validation."""

    @patch('db_console.cli.prompter.Prompt.ask')
    def test_plain_answer(self, mock_ask, console_prompter):
        mock_ask.return_value = " example.com/admin "

        assert console_prompter.ask_text("username with access to this file.") == "example.com/admin"
        assert mock_ask.call_args.args[0] == "Enter the username with access to this file."
        assert "default" not in mock_ask.call_args.kwargs

    @patch('db_console.cli.prompter.Prompt.ask')
    def test_default(self, mock_ask, console_prompter):
        mock_ask.return_value = ""

        result = console_prompter.ask_text("location of the local restore file", default="/tmp/evm_db.backup")

        assert result == "/tmp/evm_db.backup"
        assert mock_ask.call_args.kwargs["default"] == "/tmp/evm_db.backup"

    @patch('db_console.cli.prompter.Prompt.ask')
    def test_reprompts_until_valid(self, mock_ask, console_prompter, output):
        mock_ask.side_effect = ["/missing.backup", "/also/missing", "/exists.backup"]

        result = console_prompter.ask_text(
            "location of the local restore file",
            validator=lambda path: path == "/exists.backup",
            error_label="file that exists"
        )

        assert result == "/exists.backup"
        assert mock_ask.call_count == 3
        assert output.getvalue().count("Please provide file that exists") == 2

    @patch('db_console.cli.prompter.Prompt.ask')
    def test_single_error_message(self, mock_ask, console_prompter, output):
        mock_ask.side_effect = ["bad", "good"]

        console_prompter.ask_text("value", validator=lambda v: v == "good", error_label="a valid URI")

        assert output.getvalue().count("Please provide a valid URI") == 1

    @patch('db_console.cli.prompter.Prompt.ask')
    def test_validator_sees_default(self, mock_ask, console_prompter):
        seen = []
        mock_ask.return_value = ""

        console_prompter.ask_text(
            "location of the local restore file",
            default="/tmp/evm_db.backup",
            validator=lambda path: seen.append(path) or True
        )

        assert seen == ["/tmp/evm_db.backup"]

    @patch('db_console.cli.prompter.Prompt.ask')
    def test_markup_in_prompt_is_escaped(self, mock_ask, console_prompter):
        mock_ask.return_value = "x"

        console_prompter.ask_text("value [bold]")

        assert mock_ask.call_args.args[0] == "Enter the value \\[bold]"


class TestOtherPrompts:
    """Test passwords, yes/no, output and the acknowledgment wait."""

    @patch('db_console.cli.prompter.pt_prompt')
    def test_ask_password_masks_input(self, mock_pt_prompt, console_prompter):
        mock_pt_prompt.return_value = "supersecret"

        result = console_prompter.ask_password("password for example.com/admin")

        assert result == "supersecret"
        mock_pt_prompt.assert_called_once_with(
            "Enter the password for example.com/admin: ", is_password=True
        )

    @pytest.mark.parametrize("answer", [True, False])
    @patch('db_console.cli.prompter.Confirm.ask')
    def test_ask_yes_no(self, mock_confirm, console_prompter, answer):
        mock_confirm.return_value = answer

        assert console_prompter.ask_yes_no("Are you sure you would like to restore the database?") is answer
        assert mock_confirm.call_args.args[0] == "Are you sure you would like to restore the database?"

    def test_say_prints_literally(self, console_prompter, output):
        console_prompter.say("Restore [bold]Database[/bold] From Backup")

        assert output.getvalue() == "Restore [bold]Database[/bold] From Backup\n"

    @patch('db_console.cli.prompter.click.getchar')
    def test_wait_for_key(self, mock_getchar, console_prompter, output):
        console_prompter.wait_for_key()

        assert output.getvalue() == "\nPress any key to continue.\n"
        mock_getchar.assert_called_once_with()

    def test_clear_screen(self, console_prompter):
        with patch.object(console_prompter.console, "clear") as mock_clear:
            console_prompter.clear_screen()

        mock_clear.assert_called_once_with()
