"""
Download Cleanup

Manages the scratch directory used to verify file downloads. Cleanup never
raises: a failed delete is logged and the test outcome is left alone.
"""
import logging
from pathlib import Path
from typing import Union

from ..config import E2EConfig

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class DownloadCleanup:
    """Scratch directory for downloaded files (files only, no subdirectories)."""

    def __init__(self, downloads_dir: PathLike = E2EConfig.DOWNLOADS_DIR):
        self.downloads_dir = Path(downloads_dir)

    def ensure_downloads_dir(self) -> Path:
        """Create the downloads directory if it is missing."""
        try:
            self.downloads_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning(f"Could not create downloads directory {self.downloads_dir}: {e}")
        return self.downloads_dir

    def path_for(self, file_name: str) -> Path:
        return self.downloads_dir / file_name

    def cleanup_file(self, file_path: PathLike) -> bool:
        """Delete one downloaded file; return whether something was removed."""
        path = Path(file_path)
        try:
            if path.exists():
                path.unlink()
                logger.info(f"Cleaned up downloaded file: {path}")
                return True
        except OSError as e:
            logger.warning(f"Could not delete file {path}: {e}")
        return False

    def cleanup_all_downloads(self) -> int:
        """Delete every file in the downloads directory; return how many went."""
        removed = 0
        try:
            if not self.downloads_dir.exists():
                return 0
            for entry in self.downloads_dir.iterdir():
                if entry.is_file():
                    entry.unlink()
                    removed += 1
        except OSError as e:
            logger.warning(f"Could not clean up downloads directory {self.downloads_dir}: {e}")

        if removed:
            logger.info(f"Cleaned up {removed} files from downloads directory")
        return removed

    def verify_download(self, file_path: PathLike) -> bool:
        """True when the file exists and is non-empty."""
        path = Path(file_path)
        try:
            return path.is_file() and path.stat().st_size > 0
        except OSError as e:
            logger.warning(f"Error verifying download {path}: {e}")
            return False
