"""
Suite configuration.

Every setting comes from an environment variable with a default that
targets the public Automation Exercise site.
"""
import os
from pathlib import Path
from typing import Any, Dict


def _env_bool(name: str, default: str) -> bool:
    return os.environ.get(name, default).lower() == "true"


class E2EConfig:
    """E2E test configuration."""

    # Site under test
    BASE_URL = os.environ.get("AE_BASE_URL", "https://automationexercise.com").rstrip("/")
    API_URL = os.environ.get("AE_API_URL", f"{BASE_URL}/api").rstrip("/")
    SITE_TITLE = "Automation Exercise"

    # Timeouts (milliseconds)
    DEFAULT_TIMEOUT = int(os.environ.get("AE_DEFAULT_TIMEOUT", 30000))
    NAVIGATION_TIMEOUT = int(os.environ.get("AE_NAVIGATION_TIMEOUT", 60000))
    PROBE_TIMEOUT_SECONDS = 10

    # Browser settings
    HEADLESS = _env_bool("AE_HEADLESS", "true")
    SLOW_MO = int(os.environ.get("AE_SLOW_MO", 0))

    # Live runs hit the remote site; off by default so offline runs stay green
    RUN_LIVE = _env_bool("AE_RUN_LIVE", "false")

    # Downloads, screenshots and traces
    DOWNLOADS_DIR = Path(os.environ.get("AE_DOWNLOADS_DIR", "./playwright-downloads"))
    ARTIFACTS_DIR = Path(os.environ.get("AE_ARTIFACTS_DIR", "./test-artifacts"))
    SCREENSHOT_ON_FAILURE = _env_bool("AE_SCREENSHOT_ON_FAILURE", "true")

    @classmethod
    def to_dict(cls) -> Dict[str, Any]:
        return {
            "base_url": cls.BASE_URL,
            "api_url": cls.API_URL,
            "headless": cls.HEADLESS,
            "slow_mo": cls.SLOW_MO,
            "default_timeout": cls.DEFAULT_TIMEOUT,
            "run_live": cls.RUN_LIVE,
            "downloads_dir": str(cls.DOWNLOADS_DIR),
        }

    @classmethod
    def launch_args(cls, cli_args: Dict[str, Any]) -> Dict[str, Any]:
        """Merge suite settings under pytest-playwright's --headed/--slowmo args."""
        args = dict(cli_args)
        args.setdefault("headless", cls.HEADLESS)
        args.setdefault("slow_mo", cls.SLOW_MO)
        return args
