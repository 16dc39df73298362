import json
import textwrap

import pytest

import bipartite_matching.cli as cli
from bipartite_matching.__about__ import __version__

PROBLEM = textwrap.dedent(
    """\
    left = [
        {name = "build", tags = ["linux"]},
        {name = "flash", tags = ["linux", "usb"]},
        {name = "test", tags = ["windows"]},
    ]
    right = [
        {name = "host-1", tags = ["linux", "usb"]},
        {name = "host-2", tags = ["linux"]},
    ]
    """
)


@pytest.fixture(autouse=True)
def no_config(tmp_path, monkeypatch):
    monkeypatch.setenv("BIPARTITE_MATCHING_CONFIG", str(tmp_path / "missing.toml"))


@pytest.fixture
def problem_file(tmp_path):
    path = tmp_path / "problem.toml"
    path.write_text(PROBLEM)
    return path


def test_match(problem_file, capsys):
    cli.main(["match", str(problem_file)])

    lines = [line.split() for line in capsys.readouterr().out.splitlines()]
    assert lines == [["Left", "Right"], ["build", "host-2"], ["flash", "host-1"]]


def test_match_no_header(problem_file, capsys):
    cli.main(["match", "-n", str(problem_file)])

    lines = [line.split() for line in capsys.readouterr().out.splitlines()]
    assert lines == [["build", "host-2"], ["flash", "host-1"]]


def test_match_json(problem_file, capsys):
    cli.main(["match", "--json", str(problem_file)])

    assert json.loads(capsys.readouterr().out) == [
        {"left": "build", "right": "host-2"},
        {"left": "flash", "right": "host-1"},
    ]


def test_size(problem_file, capsys):
    cli.main(["size", str(problem_file)])
    assert capsys.readouterr().out == "2\n"


def test_strict(problem_file, capsys):
    with pytest.raises(SystemExit) as execinfo:
        cli.main(["size", "--strict", str(problem_file)])

    assert execinfo.value.code == 1
    assert "mismatched lengths: 3 and 2" in capsys.readouterr().err


def test_missing_problem_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as execinfo:
        cli.main(["match", str(tmp_path / "nope.toml")])

    assert execinfo.value.code == 1
    assert "Error:" in capsys.readouterr().err


def test_version(capsys):
    with pytest.raises(SystemExit) as execinfo:
        cli.main(["--version"])

    assert execinfo.value.code == 0
    assert __version__ in capsys.readouterr().out
