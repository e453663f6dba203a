import pytest

from immutable_collections.stdout import Terminal, stdout


class TestTerminal:
    def test_message_with_prefix(self):
        message = Terminal.message("Hello", prefix="Warning", level="warning")
        assert "Warning:" in message
        assert Terminal.YELLOW + "Hello" in message
        assert message.endswith(Terminal.END)

    def test_message_without_styles(self):
        assert Terminal.message("Hello") == "Hello" + Terminal.END

    def test_invalid_style(self):
        with pytest.raises(ValueError, match="italic"):
            Terminal.get_styles(style="italic")

    def test_invalid_level(self):
        with pytest.raises(LookupError):
            Terminal.get_color(level="verbose")


class TestMessageFn:
    def test_format_does_not_display(self, capsys):
        formatted = stdout.warning.format("Duplicate key 1.")
        assert "Duplicate key 1." in formatted
        assert capsys.readouterr().err == ""

    def test_log_writes_to_stderr(self, capsys):
        stdout.log("Duplicate key 1.")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Warning: Duplicate key 1." in captured.err

    def test_reconfigured(self, capsys):
        stdout.info(prefix="Note")("Hello")
        assert "Note: Hello" in capsys.readouterr().err

    def test_requires_single_string(self):
        with pytest.raises(TypeError):
            stdout.info("Hello", "World")
