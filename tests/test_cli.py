"""Tests for the command-line interface."""

import sys

import pytest
import sqlalchemy as sa

from skillstats import cli


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    monkeypatch.delenv("SKILLSTATS_DB_URL", raising=False)
    path = tmp_path / "config.yaml"
    path.write_text(
        f"database:\n"
        f"  url: sqlite:///{tmp_path / 'game.db'}\n"
        f"logging:\n"
        f"  level: WARNING\n"
        f"skills:\n"
        f"  visibility:\n"
        f"    cooking: false\n"
    )
    return path


def _run(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["skillstats", *argv])
    return cli.main()


class TestCLI:
    def test_no_command_prints_help(self, monkeypatch, capsys):
        assert _run(monkeypatch) == 0
        assert "init-db" in capsys.readouterr().out

    def test_init_db(self, monkeypatch, capsys, config_file, tmp_path):
        assert _run(monkeypatch, "--config", str(config_file), "init-db") == 0
        assert "Skills table ready." in capsys.readouterr().out
        engine = sa.create_engine(f"sqlite:///{tmp_path / 'game.db'}")
        assert sa.inspect(engine).has_table("skills")
        engine.dispose()

    def test_show(self, monkeypatch, capsys, config_file):
        _run(monkeypatch, "--config", str(config_file), "init-db")
        capsys.readouterr()
        assert _run(monkeypatch, "--config", str(config_file), "show", "4") == 0
        out = capsys.readouterr().out
        assert "Construction" in out
        assert "Level 1 (0 XP)" in out
        assert "Cooking" not in out

    def test_bad_config(self, monkeypatch, capsys, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("database:\n  hostname: x\n")
        assert _run(monkeypatch, "--config", str(path), "show", "4") == 1
        assert "Configuration error" in capsys.readouterr().out

    def test_bad_port_env(self, monkeypatch, capsys, config_file):
        monkeypatch.setenv("SKILLSTATS_DB_PORT", "not-a-port")
        assert _run(monkeypatch, "--config", str(config_file), "show", "4") == 1
        assert "Configuration error" in capsys.readouterr().out
