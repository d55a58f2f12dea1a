import json
import os

from click.testing import CliRunner

from hexloom.cli import main


def test_digits_default_txt():
    result = CliRunner().invoke(main, ["digits", "--count", "8"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "0x3.243f6a88"


def test_digits_label_upper():
    result = CliRunner().invoke(main, ["digits", "--count", "4", "--upper", "--label"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "pi = 0x3.243F"


def test_digits_json_at_offset():
    result = CliRunner().invoke(main, ["digits", "--start", "1000", "--count", "5", "--format", "json"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {"start": 1000, "count": 5, "value": "49f1c"}


def test_digits_negative_start():
    result = CliRunner().invoke(main, ["digits", "--start", "-1"])
    assert result.exit_code == 2
    assert "--start" in result.output


def test_digits_negative_count():
    result = CliRunner().invoke(main, ["digits", "--count", "-5"])
    assert result.exit_code == 2
    assert "--count" in result.output


def test_digits_env_var():
    result = CliRunner().invoke(main, ["digits"], env={"HEXLOOM_DIGITS_COUNT": "3"})
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "0x3.243"


def test_digits_packed_file():
    runner = CliRunner()
    with runner.isolated_filesystem():
        result = runner.invoke(
            main, ["digits", "--count", "4", "--format", "bin", "--binary-mode", "packed", "--out", "pi"]
        )
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "pi.bin"
        with open("pi.bin", "rb") as f:
            assert f.read() == bytes([0x24, 0x3F])


def test_stream_then_check():
    runner = CliRunner()
    with runner.isolated_filesystem():
        result = runner.invoke(
            main,
            ["digits", "--start", "990", "--count", "30", "--stream", "--chunk-size", "7", "--verify", "--out", "tail.txt"],
        )
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "tail.txt"
        with open("tail.txt", encoding="utf-8") as f:
            assert f.read() == "0x3.…48db0fead349f1c09b075372c98099"
        result = runner.invoke(main, ["check", "tail.txt", "--start", "990"])
        assert result.exit_code == 0, result.output
        assert result.output.startswith("ok: 30 digits")
        result = runner.invoke(main, ["check", "tail.txt", "--start", "991"])
        assert result.exit_code == 1
        assert os.path.exists("tail.txt")


def test_stream_requires_out():
    result = CliRunner().invoke(main, ["digits", "--stream"])
    assert result.exit_code == 1
    assert "--out" in result.output


def test_digit_command():
    runner = CliRunner()
    result = runner.invoke(main, ["digit", "3"])
    assert result.exit_code == 0
    assert result.output.strip() == "f"
    result = runner.invoke(main, ["digit", "--", "-1"])
    assert result.exit_code == 2
