#!/usr/bin/env python3
#-*- coding: utf-8 -*-
#
# Radix Codec: Arbitrary-Base Byte Encoding
# Copyright (C) 2025 Peter J. Marko
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
#
# Filename: tests/test_radix_tool.py

"""
Unit tests for the command-line front end (src/radix_tool.py).

The tests drive `main()` with explicit argument lists and check what lands on
stdout, stderr and the exit code.
"""

import io
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

import radix_tool


def test_encode_hex_input(capsys):
    assert radix_tool.main(["encode", "-b", "16", "--hex", "ff"]) == 0
    assert capsys.readouterr().out == "ff\n"


def test_encode_binary_base(capsys):
    assert radix_tool.main(["encode", "-b", "2", "--hex", "0100"]) == 0
    assert capsys.readouterr().out == "100000000\n"


def test_encode_from_file(tmp_path: Path, capsys):
    input_path = tmp_path / "payload.bin"
    input_path.write_bytes(b"\xff\xff")
    assert radix_tool.main(["encode", "-b", "62", "-i", str(input_path)]) == 0
    assert capsys.readouterr().out == "h31\n"


def test_encode_from_stdin(capsys):
    fake_stdin = io.TextIOWrapper(io.BytesIO(b"\x01\x00"))
    with patch.object(sys, "stdin", fake_stdin):
        assert radix_tool.main(["encode", "-b", "2"]) == 0
    assert capsys.readouterr().out == "100000000\n"


def test_encode_uses_configured_default_base(capsys, monkeypatch):
    monkeypatch.setenv("RADIX_DEFAULT_BASE", "16")
    assert radix_tool.main(["encode", "--hex", "deadbeef"]) == 0
    assert capsys.readouterr().out == "deadbeef\n"


def test_decode_to_hex(capsys):
    assert radix_tool.main(["decode", "-b", "62", "h31"]) == 0
    assert capsys.readouterr().out == "ffff\n"


def test_decode_zero_prints_empty_line(capsys):
    assert radix_tool.main(["decode", "-b", "10", "0"]) == 0
    assert capsys.readouterr().out == "\n"


def test_decode_raw_output(capsysbinary):
    assert radix_tool.main(["decode", "-b", "16", "--raw", "DEADBEEF"]) == 0
    assert capsysbinary.readouterr().out == b"\xde\xad\xbe\xef"


def test_decode_hex_out_is_explicit_default(capsys):
    assert radix_tool.main(["decode", "-b", "16", "--hex-out", "ff"]) == 0
    assert capsys.readouterr().out == "ff\n"


def test_decode_raw_and_hex_out_conflict():
    with pytest.raises(SystemExit) as excinfo:
        radix_tool.main(["decode", "-b", "16", "--raw", "--hex-out", "ff"])
    assert excinfo.value.code == 2


def test_decode_from_file_strips_whitespace(tmp_path: Path, capsys):
    input_path = tmp_path / "digits.txt"
    input_path.write_text("  100000000\n")
    assert radix_tool.main(["decode", "-b", "2", "-i", str(input_path)]) == 0
    assert capsys.readouterr().out == "0100\n"


def test_decode_file_reports_non_ascii_byte(tmp_path: Path, capsys):
    input_path = tmp_path / "digits.txt"
    input_path.write_bytes(b"1\xff2")
    assert radix_tool.main(["decode", "-b", "16", "-i", str(input_path)]) == 1
    err = capsys.readouterr().err
    assert "Illegal character '\xff' at position 1 for base 16" in err
    assert "\ufffd" not in err


def test_verbose_prints_success_note_on_stderr(capsys):
    assert radix_tool.main(["-v", "decode", "-b", "62", "h31"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "ffff\n"
    assert "Decoded 2 byte(s) from base 62." in captured.err


def test_quiet_run_leaves_stderr_empty(capsys):
    assert radix_tool.main(["encode", "-b", "16", "--hex", "ff"]) == 0
    assert capsys.readouterr().err == ""


def test_decode_from_stdin(capsys):
    with patch.object(sys, "stdin", io.StringIO("ff\n")):
        assert radix_tool.main(["decode", "-b", "16"]) == 0
    assert capsys.readouterr().out == "ff\n"


def test_invalid_digit_exits_with_error(capsys):
    assert radix_tool.main(["decode", "-b", "10", "z"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Illegal character 'z' at position 0 for base 10" in captured.err


@pytest.mark.parametrize("command", [
    ["encode", "-b", "63", "--hex", "ff"],
    ["encode", "-b", "1", "--hex", "ff"],
    ["decode", "-b", "63", "ff"],
    ["decode", "-b", "1", "ff"],
])
def test_invalid_base_exits_with_error(command, capsys):
    assert radix_tool.main(command) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Illegal base" in captured.err


def test_invalid_hex_exits_with_error(capsys):
    assert radix_tool.main(["encode", "-b", "16", "--hex", "xyz"]) == 1
    assert "Invalid hex input" in capsys.readouterr().err


def test_missing_input_file_exits_with_error(tmp_path: Path, capsys):
    missing = tmp_path / "nope.bin"
    assert radix_tool.main(["encode", "-b", "16", "-i", str(missing)]) == 1
    assert "ERROR" in capsys.readouterr().err


def test_decode_text_and_file_conflict(tmp_path: Path):
    input_path = tmp_path / "digits.txt"
    input_path.write_text("ff")
    with pytest.raises(SystemExit) as excinfo:
        radix_tool.main(["decode", "-b", "16", "-i", str(input_path), "ff"])
    assert excinfo.value.code == 2


def test_missing_command_is_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        radix_tool.main([])
    assert excinfo.value.code == 2

# === End of tests/test_radix_tool.py ===
