"""Publish capability used to push the placeholder package to the registry."""

from __future__ import annotations

import logging
import os
import shlex
import shutil
import subprocess
from pathlib import Path
from typing import List, Optional, Protocol, Tuple

from npm_oidc_setup.naming import is_scoped

logger = logging.getLogger(__name__)


class PublishError(RuntimeError):
    """Raised when the publish command fails."""

    def __init__(self, message: str, returncode: Optional[int] = None) -> None:
        self.returncode = returncode
        super().__init__(message)


class Publisher(Protocol):
    """Publisher interface."""

    def publish(self, directory: Path, package_name: str, access: str) -> None: ...


def build_publish_command(package_name: str, access: str, executable: str = "npm") -> List[str]:
    """Build the publish argv; only scoped packages get an explicit access level."""
    command = [executable, "publish"]
    if is_scoped(package_name):
        command.extend(["--access", access])
    return command


def format_publish_command(package_name: str, access: str, executable: str = "npm") -> str:
    return " ".join(shlex.quote(part) for part in build_publish_command(package_name, access, executable))


def _resolve_argv(argv: List[str]) -> List[str]:
    """Resolve argv[0] on PATH so Windows .cmd shims such as npm.cmd can run."""
    resolved = shutil.which(argv[0])
    if resolved is None:
        return argv
    if os.name == "nt" and Path(resolved).suffix.lower() in {".cmd", ".bat"}:
        comspec = os.environ.get("ComSpec", "cmd.exe")
        return [comspec, "/d", "/c", resolved, *argv[1:]]
    return [resolved, *argv[1:]]


class NpmPublisher:
    """Publisher that shells out to ``npm publish`` with inherited stdio."""

    def __init__(self, executable: str = "npm") -> None:
        self.executable = executable

    def publish(self, directory: Path, package_name: str, access: str) -> None:
        argv = build_publish_command(package_name, access, self.executable)
        resolved = _resolve_argv(argv)
        logger.debug("Running %s in %s", resolved, directory)
        try:
            subprocess.run(resolved, cwd=str(directory), check=True)
        except subprocess.CalledProcessError as exc:
            raise PublishError(f"Command failed: {' '.join(argv)}", exc.returncode) from exc
        except FileNotFoundError as exc:
            raise PublishError(f"Command not found: {self.executable}") from exc


class DryRunPublisher:
    """Publisher that records commands instead of running them."""

    def __init__(self, executable: str = "npm") -> None:
        self.executable = executable
        self.calls: List[Tuple[Path, List[str]]] = []

    def publish(self, directory: Path, package_name: str, access: str) -> None:
        command = build_publish_command(package_name, access, self.executable)
        self.calls.append((Path(directory), command))
        logger.debug("Recorded %s in %s", command, directory)
