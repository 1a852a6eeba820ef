"""Session cookie persistence."""

from __future__ import annotations

import logging
import stat
from pathlib import Path

from aocfetch.errors import CredentialNotSetError, OutputWriteError

COOKIE_FILENAME = "cookie"

logger = logging.getLogger(__name__)


class CredentialStore:
    """Reads and writes the session cookie at an injected file path."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    @classmethod
    def in_dir(cls, config_dir: Path, filename: str = COOKIE_FILENAME) -> "CredentialStore":
        return cls(Path(config_dir) / filename)

    def save(self, cookie: str) -> Path:
        """Store the trimmed cookie, creating the config directory if needed."""
        value = cookie.strip()
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(value, encoding="utf-8")
            self.path.chmod(stat.S_IRUSR | stat.S_IWUSR)
        except OSError as exc:
            raise OutputWriteError(f"Unable to store cookie in {self.path}: {exc}") from exc
        logger.info("Stored session cookie in %s", self.path)
        return self.path

    def load(self) -> str:
        """Return the stored cookie or raise `CredentialNotSetError`."""
        try:
            value = self.path.read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError) as exc:
            raise CredentialNotSetError(f"Unable to load cookie.  Use -c to set it. [{exc}]") from exc
        if not value:
            raise CredentialNotSetError(f"Unable to load cookie.  Use -c to set it. [{self.path} is empty]")
        return value


__all__ = ["COOKIE_FILENAME", "CredentialStore"]
