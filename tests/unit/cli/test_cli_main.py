"""Tests for the atomex CLI entry point."""

from pathlib import Path
from unittest.mock import patch

import pytest

from atomex.cli.main import create_parser, main
from atomex.core.exceptions import FetchError


class TestParser:
    def test_parses_in_and_out(self):
        args = create_parser().parse_args(["--in", "https://x.test/onto", "--out", "o.json"])
        assert args.input_url == "https://x.test/onto"
        assert args.output == "o.json"
        assert args.verbose is False

    def test_help_exits_zero(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0
        assert "AtomicServer" in capsys.readouterr().out


class TestMain:
    """Exit codes for the export command."""

    def test_missing_in(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--out", "o.json"])
        assert exc_info.value.code == 1
        assert "input URL" in capsys.readouterr().err

    def test_missing_out(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--in", "https://x.test/onto"])
        assert exc_info.value.code == 1
        assert "output file" in capsys.readouterr().err

    def test_success(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with patch("atomex.cli.commands.handle_export") as handle:
            with pytest.raises(SystemExit) as exc_info:
                main(["--in", "https://x.test/onto", "--out", "o.json"])

        assert exc_info.value.code == 0
        handle.assert_called_once()

    def test_failure_reports_error(self, tmp_path: Path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        with patch(
            "atomex.cli.commands.handle_export",
            side_effect=FetchError("https://x.test/onto", "HTTP 404: gone"),
        ):
            with pytest.raises(SystemExit) as exc_info:
                main(["--in", "https://x.test/onto", "--out", "o.json"])

        assert exc_info.value.code == 1
        assert "HTTP 404: gone" in capsys.readouterr().err

    def test_relative_url_rejected(self, tmp_path: Path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(SystemExit) as exc_info:
            main(["--in", "onto", "--out", "o.json"])

        assert exc_info.value.code == 1
        assert "absolute" in capsys.readouterr().err
        assert not (tmp_path / "o.json").exists()
