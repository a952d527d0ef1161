"""Unit tests for browser launch settings and the failure screenshot hook."""

from unittest.mock import MagicMock

from automation_exercise.config import E2EConfig
from tests.conftest import _save_failure_screenshot


class TestLaunchArgs:
    """Tests for E2EConfig.launch_args."""

    def test_headed_flag_wins(self, monkeypatch):
        monkeypatch.setattr(E2EConfig, "HEADLESS", True)
        assert E2EConfig.launch_args({"headless": False})["headless"] is False

    def test_slowmo_flag_wins(self, monkeypatch):
        monkeypatch.setattr(E2EConfig, "SLOW_MO", 0)
        assert E2EConfig.launch_args({"slow_mo": 250})["slow_mo"] == 250

    def test_settings_fill_missing_args(self, monkeypatch):
        monkeypatch.setattr(E2EConfig, "HEADLESS", False)
        monkeypatch.setattr(E2EConfig, "SLOW_MO", 100)

        args = E2EConfig.launch_args({"channel": "chrome"})

        assert args == {"channel": "chrome", "headless": False, "slow_mo": 100}

    def test_cli_args_not_mutated(self):
        cli_args = {}
        E2EConfig.launch_args(cli_args)
        assert cli_args == {}

    def test_fixture_follows_headed_option(self, browser_type_launch_args, pytestconfig):
        """Test the suite fixture keeps whatever --headed asked for."""
        if pytestconfig.getoption("--headed"):
            assert browser_type_launch_args["headless"] is False
        else:
            assert browser_type_launch_args["headless"] is E2EConfig.HEADLESS


class TestFailureScreenshot:
    """Tests for the failure screenshot hook helper."""

    def test_mock_page_is_ignored(self, monkeypatch, tmp_path):
        artifacts = tmp_path / "artifacts"
        monkeypatch.setattr(E2EConfig, "ARTIFACTS_DIR", artifacts)
        page = MagicMock()
        item = MagicMock(funcargs={"page": page})

        _save_failure_screenshot(item)

        page.screenshot.assert_not_called()
        assert not artifacts.exists()

    def test_no_page_fixture(self, monkeypatch, tmp_path):
        artifacts = tmp_path / "artifacts"
        monkeypatch.setattr(E2EConfig, "ARTIFACTS_DIR", artifacts)

        _save_failure_screenshot(MagicMock(funcargs={}))

        assert not artifacts.exists()
