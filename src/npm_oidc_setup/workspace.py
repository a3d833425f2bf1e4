"""Temporary directory lifecycle for the placeholder package."""

from __future__ import annotations

import logging
import secrets
import shutil
import sys
import tempfile
from pathlib import Path
from types import TracebackType
from typing import Callable, Optional, TextIO, Type

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "npm-oidc-setup-"


def _random_token() -> str:
    return secrets.token_hex(8)


def generate_directory_name(prefix: str = DEFAULT_PREFIX, token_factory: Callable[[], str] | None = None) -> str:
    """Return a directory name made of the prefix and a random hex suffix."""
    token = (token_factory or _random_token)()
    return f"{prefix}{token}"


class PlaceholderWorkspace:
    """Context manager owning a uniquely named directory under the temp root.

    The directory is created on enter and removed on exit unless ``keep`` is
    set. Removal failures are reported as warnings and never replace the
    outcome of the body.
    """

    def __init__(
        self,
        temp_root: str | Path | None = None,
        prefix: str = DEFAULT_PREFIX,
        token_factory: Callable[[], str] | None = None,
        keep: bool = False,
        warn_stream: TextIO | None = None,
        info_stream: TextIO | None = None,
    ) -> None:
        self.temp_root = Path(temp_root) if temp_root is not None else Path(tempfile.gettempdir())
        self.prefix = prefix
        self.token_factory = token_factory
        self.keep = keep
        self.warn_stream = warn_stream or sys.stderr
        self.info_stream = info_stream or sys.stdout
        self.path: Optional[Path] = None

    def create(self) -> Path:
        path = self.temp_root / generate_directory_name(self.prefix, self.token_factory)
        path.mkdir(parents=True, exist_ok=False)
        self.path = path
        logger.debug("Created temp directory %s", path)
        return path

    def cleanup(self) -> bool:
        """Remove the directory; return False when removal failed."""
        if self.path is None:
            return True
        try:
            shutil.rmtree(self.path)
        except FileNotFoundError:
            logger.debug("Temp directory %s was already removed", self.path)
        except OSError as exc:
            print(f"⚠️  Could not clean up temp directory: {exc}", file=self.warn_stream)
            return False
        logger.debug("Removed temp directory %s", self.path)
        print("\n🧹 Cleaned up temp directory", file=self.info_stream)
        return True

    def __enter__(self) -> Path:
        if self.path is not None:
            return self.path
        return self.create()

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        if not self.keep:
            self.cleanup()
