"""
Tests for csob_gateway.cli.
"""
from __future__ import annotations

import json

import pytest

from csob_gateway import CONFIG_MISSING_WARNING
from csob_gateway.cli import build_parser, run_cli


@pytest.fixture
def env_file(tmp_path, env_values):
    path = tmp_path / ".env"
    path.write_text(
        "".join(f"{key}={value}\n" for key, value in env_values.items()),
        encoding="utf-8",
    )
    return path


@pytest.fixture(autouse=True)
def clean_environ(monkeypatch, env_values):
    for key in env_values:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def calls_file(tmp_path):
    path = tmp_path / "calls.json"
    path.write_text(
        json.dumps(
            [
                {"id": 1, "request": {"amount": 100}, "response": {"status": "ok"}},
                {"id": 2, "request": {"amount": 200}, "response": None},
            ]
        ),
        encoding="utf-8",
    )
    return path


class TestParser:
    def test_rejects_malformed_override(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--set", "NOPE"])

    def test_collects_overrides(self):
        args = build_parser().parse_args(["--set", "A=1", "--set", "B=x=y"])
        assert args.set == [("A", "1"), ("B", "x=y")]


class TestRunCli:
    def test_detail_report(self, env_file, calls_file, capsys):
        code = run_cli(["--env-file", str(env_file), "--calls", str(calls_file)])
        out = capsys.readouterr().out
        assert code == 0
        assert "| 2 requests</h1>" in out
        assert "M123" in out
        assert "ERROR" in out

    def test_summary(self, env_file, calls_file, capsys):
        code = run_cli(
            ["--env-file", str(env_file), "--calls", str(calls_file), "--summary"]
        )
        out = capsys.readouterr().out
        assert code == 0
        assert "2 req" in out
        assert "1 error" in out

    def test_override_applied(self, env_file, capsys):
        code = run_cli(["--env-file", str(env_file), "--set", "CSOB_SHOP_NAME=Overridden"])
        assert code == 0
        assert "Overridden" in capsys.readouterr().out

    def test_no_config(self, tmp_path, capsys):
        code = run_cli(["--env-file", str(tmp_path / "missing.env"), "--no-config"])
        assert code == 0
        assert CONFIG_MISSING_WARNING in capsys.readouterr().out

    def test_invalid_config(self, tmp_path):
        assert run_cli(["--env-file", str(tmp_path / "missing.env")]) == 1

    def test_invalid_calls_file(self, tmp_path):
        bad = tmp_path / "calls.json"
        bad.write_text('{"id": 1}', encoding="utf-8")
        assert run_cli(["--no-config", "--calls", str(bad)]) == 1

    def test_missing_calls_file(self, tmp_path):
        assert run_cli(["--no-config", "--calls", str(tmp_path / "nope.json")]) == 1
