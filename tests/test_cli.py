"""Tests for the mimeguess command line entry point."""

import pytest

from mimeguess import cli
from mimeguess.validation import validate_table


def run(capsys, *argv):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(list(argv))
    out, err = capsys.readouterr()
    return exc_info.value.code, out, err


def test_guess_paths(capsys):
    code, out, err = run(capsys, "index.html", "IMAGE.JPG")
    assert code == 0
    assert out.splitlines() == ["index.html: text/html", "IMAGE.JPG: image/jpeg"]
    assert err == ""


def test_guess_all_types(capsys):
    code, out, _ = run(capsys, "-a", "sound.wav")
    assert code == 0
    assert out.strip() == "sound.wav: audio/wav, audio/wave, audio/x-wav"


def test_unknown_input_sets_exit_status(capsys):
    code, out, err = run(capsys, "README", "file.gif")
    assert code == 1
    assert out.strip() == "file.gif: image/gif"
    assert "README" in err


def test_bare_extensions(capsys):
    code, out, _ = run(capsys, "--ext", "css", "GZ")
    assert code == 0
    assert out.splitlines() == ["css: text/css", "GZ: application/gzip"]


def test_reverse(capsys):
    code, out, err = run(capsys, "--reverse", "image/jpeg", "foo/bar")
    assert code == 1
    assert out.strip() == "image/jpeg: jfif jpe jpeg jpg"
    assert "foo/bar" in err


def test_check_table(capsys):
    code, out, _ = run(capsys, "--check")
    assert code == 0
    assert "Extension table OK" in out


def test_check_table_reports_invalid_table(capsys, monkeypatch):
    bad_table = (("B", ("a/b",)),)
    monkeypatch.setattr(cli, "validate_table", lambda: validate_table(bad_table))
    code, _, err = run(capsys, "--check")
    assert code == 1
    assert "Invalid table entry 0" in err


def test_no_inputs(capsys):
    code, _, err = run(capsys)
    assert code == 2
    assert "No inputs" in err


def test_exclusive_modes(capsys):
    code, _, _ = run(capsys, "--ext", "--reverse", "html")
    assert code == 2
