"""Unit tests for the whatsnew_check entry script."""

from __future__ import annotations

from pathlib import Path

import pytest

import whatsnew_check
from whatsnew.config.config_manager import ConfigManager


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Working directory without a system config file."""
    monkeypatch.chdir(tmp_path)
    ConfigManager().system_config = str(tmp_path / "no-system-config")
    return tmp_path


class TestMain:
    """Tests for whatsnew_check.main."""

    def test_reports_release_notes_due(self, workdir: Path, caplog: pytest.LogCaptureFixture) -> None:
        """A newer current version is reported as due."""
        (workdir / ".env").write_text(
            "WHATSNEW_SHORT_VERSION=1.3\n"
            "WHATSNEW_BUILD_NUMBER=2\n"
            "WHATSNEW_LAST_SEEN_VERSION=1.2\n"
        )
        with caplog.at_level("INFO"):
            assert whatsnew_check.main() == 0
        assert "Current version: 1.3.0.2" in caplog.text
        assert "Release notes should be presented" in caplog.text

    def test_reports_up_to_date(self, workdir: Path, caplog: pytest.LogCaptureFixture) -> None:
        """An already seen version is reported as up to date."""
        (workdir / ".env").write_text(
            "WHATSNEW_SHORT_VERSION=1.3\nWHATSNEW_LAST_SEEN_VERSION=1.3\n"
        )
        with caplog.at_level("INFO"):
            assert whatsnew_check.main() == 0
        assert "Release notes are up to date" in caplog.text

    def test_reraises_unexpected_errors(
        self, workdir: Path, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Unexpected errors are logged and re-raised."""
        def broken(self, path=None):
            raise RuntimeError("boom")

        monkeypatch.setattr(ConfigManager, "load_configuration", broken)
        with pytest.raises(RuntimeError):
            whatsnew_check.main()
        assert "Critical error during version check: boom" in caplog.text
