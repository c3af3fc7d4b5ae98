from pathlib import Path

import pytest
from biotokenizer.main import main

ASSETS = Path(__file__).parent / "assets"


def test_main_symbolic(tmp_path):
    output = tmp_path / "out.txt"

    assert main(["-i", str(ASSETS / "abstracts.trec"), "-o", str(output), "-t", "S"]) == 0
    assert output.read_text(encoding="utf-8") == (
        ASSETS / "abstracts_symbolic.txt"
    ).read_text(encoding="utf-8")


def test_main_explicit_options(tmp_path):
    source = tmp_path / "in.txt"
    source.write_text("NFkappaB binds\n", encoding="utf-8")
    output = tmp_path / "out.txt"

    args = ["-i", str(source), "-o", str(output), "-b", "3", "-n", "h", "-g", "-s", "s"]
    assert main(args) == 0
    assert output.read_text(encoding="utf-8") == "nf-k-b bind\n"


def test_main_invalid_option(tmp_path, capsys):
    source = tmp_path / "in.txt"
    source.write_text("IL-6\n", encoding="utf-8")

    assert main(["-i", str(source), "-o", str(tmp_path / "out.txt"), "-b", "1"]) == 2
    assert "a normalization method must be specified" in capsys.readouterr().err


def test_main_requires_files():
    with pytest.raises(SystemExit):
        main(["-t", "S"])


def test_main_rejects_unknown_log_level(tmp_path, capsys):
    source = tmp_path / "in.txt"
    source.write_text("IL-6\n", encoding="utf-8")

    with pytest.raises(SystemExit):
        main(["-i", str(source), "-o", str(tmp_path / "out.txt"), "--log-level", "foo"])
    assert "--log-level" in capsys.readouterr().err


def test_main_log_level_is_case_insensitive(tmp_path):
    source = tmp_path / "in.txt"
    source.write_text("IL-6\n", encoding="utf-8")
    output = tmp_path / "out.txt"

    assert main(["-i", str(source), "-o", str(output), "-t", "S", "--log-level", "debug"]) == 0
    assert output.read_text(encoding="utf-8") == "il6\n"
