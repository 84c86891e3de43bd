"""
Tests for the input sources and numeric parsing.
"""
import io

import pytest

from matrixadapter.exceptions import InputExhaustedError
from matrixadapter.io.inputs import ConsoleInput, ScriptedInput, parse_float, read_float


class TestParseFloat:
    @pytest.mark.parametrize("text, expected", [
        ("3.5", 3.5),
        ("  -2  ", -2.0),
        ("0", 0.0),
        ("1e2", 100.0),
        ("3,5", 3.5),
    ])
    def test_valid_tokens(self, text, expected):
        assert parse_float(text) == expected

    @pytest.mark.parametrize("text", ["", "   ", "abc", "1.2.3", "nan", "inf", "-inf", None])
    def test_invalid_tokens(self, text):
        assert parse_float(text) is None


class TestReadFloat:
    def test_rejects_then_accepts(self, scripted):
        """'abc' is rejected and re-prompted, '3.5' is accepted."""
        source = scripted("abc", "3.5")

        value = read_float(source, "Value: ", "Invalid number.")

        assert value == 3.5
        assert source.prompts == ["Value: ", "Value: "]
        assert source.messages == ["Invalid number."]

    def test_no_retry_limit(self, scripted):
        source = scripted(*(["x"] * 50), "7")

        assert read_float(source, "> ", "bad") == 7.0
        assert len(source.messages) == 50

    def test_end_of_input_raises(self, scripted):
        source = scripted("abc")

        with pytest.raises(InputExhaustedError):
            read_float(source, "Value: ", "Invalid number.")


class TestScriptedInput:
    def test_returns_none_when_exhausted(self):
        source = ScriptedInput(["a"])
        assert source.read("1") == "a"
        assert source.read("2") is None
        assert source.remaining == 0
        assert source.prompts == ["1", "2"]


class TestConsoleInput:
    def test_reads_from_stdin(self, monkeypatch):
        monkeypatch.setattr("builtins.input", lambda: "4.2")
        assert ConsoleInput(io.StringIO()).read("> ") == "4.2"

    def test_prompt_and_notice_share_stream(self, monkeypatch):
        monkeypatch.setattr("builtins.input", lambda: "abc")
        stream = io.StringIO()
        source = ConsoleInput(stream)

        source.read("Value: ")
        source.notify("Invalid number.")

        assert stream.getvalue() == "Value: Invalid number.\n"

    def test_eof_maps_to_none(self, monkeypatch):
        def _raise():
            raise EOFError

        monkeypatch.setattr("builtins.input", _raise)
        assert ConsoleInput(io.StringIO()).read("> ") is None

    def test_notify_writes_to_stream(self, capsys):
        ConsoleInput().notify("Invalid number.")
        assert capsys.readouterr().out == "Invalid number.\n"
