"""
Tests for the entry point
"""
import builtins

import pytest

from carbon_tracker.config import AppConfig
from carbon_tracker.main import main


class TestMain:
    """Test startup and shutdown"""

    def test_end_of_input_exits_cleanly(self, tmp_path, monkeypatch, capsys):
        def no_input(prompt=""):
            raise EOFError

        monkeypatch.setattr(builtins, "input", no_input)

        with pytest.raises(SystemExit) as exc:
            main(AppConfig(data_dir=tmp_path))

        assert exc.value.code == 0
        assert "Application terminated." in capsys.readouterr().out

    def test_full_user_session(self, tmp_path, monkeypatch):
        answers = iter(["root", "secret", "alice", "pw", "alice", "pw", "1", "6", "8", "3"])
        monkeypatch.setattr(builtins, "input", lambda prompt="": next(answers))

        main(AppConfig(data_dir=tmp_path))

        assert (tmp_path / "UserLogs.txt").read_text(encoding="utf-8") == "alice,0,0,0,0,0,8,0\n"
        assert (tmp_path / "AdminAccounts.txt").read_text(encoding="utf-8") == "root,secret\n"

    def test_log_file(self, tmp_path, monkeypatch):
        answers = iter(["root", "secret", "alice", "pw", "root", "secret", "5"])
        monkeypatch.setattr(builtins, "input", lambda prompt="": next(answers))
        log_file = tmp_path / "tracker.log"

        main(AppConfig(data_dir=tmp_path, log_level="INFO", log_file=log_file))

        assert "Admin root logged in" in log_file.read_text(encoding="utf-8")
