"""Tests for the command line entry point"""

import pytest
from sandcave.main import main, build_parser


@pytest.fixture
def input_file(tmp_path, sample_text):
    path = tmp_path / "cave.txt"
    path.write_text(sample_text + "\n")
    return path


def test_prints_count(input_file, capsys):
    assert main([str(input_file)]) == 0
    assert capsys.readouterr().out == "93\n"


def test_no_floor(input_file, capsys):
    assert main([str(input_file), "--no-floor"]) == 0
    assert capsys.readouterr().out == "24\n"


def test_render_precedes_count(input_file, capsys):
    assert main([str(input_file), "--render"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 12
    assert lines[0] == "." * 10 + "o" + "." * 10
    assert lines[-1] == "93"


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error:")


def test_invalid_cave(tmp_path, capsys):
    path = tmp_path / "diagonal.txt"
    path.write_text("0,0 -> 1,1\n")

    assert main([str(path)]) == 1
    assert "invalid cave description" in capsys.readouterr().err


def test_parser_defaults():
    args = build_parser().parse_args(["cave.txt"])
    assert args.input == "cave.txt"
    assert args.floor is True
    assert args.render is False
    assert args.log_level == "WARNING"


def test_undecodable_file(tmp_path, capsys):
    """Bytes that are not valid text are reported like any unreadable file"""
    path = tmp_path / "binary.txt"
    path.write_bytes(b"498,4 -> 498,6\xff\xfe\n")

    assert main([str(path)]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error:")
