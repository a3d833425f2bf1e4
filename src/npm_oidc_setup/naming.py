"""Validation of npm package names."""

from __future__ import annotations

import re
from typing import Optional, Tuple

PACKAGE_NAME_PATTERN = re.compile(r"^(?:@[a-z0-9-~][a-z0-9-._~]*/)?[a-z0-9-~][a-z0-9-._~]*$")


class InvalidPackageNameError(ValueError):
    """Raised when a package name does not follow the registry naming rules."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Invalid package name: {name}")


def validate_package_name(name: str) -> str:
    """Return the name unchanged if it is a valid npm package name."""
    if not PACKAGE_NAME_PATTERN.fullmatch(name):
        raise InvalidPackageNameError(name)
    return name


def is_scoped(name: str) -> bool:
    return name.startswith("@")


def split_scope(name: str) -> Tuple[Optional[str], str]:
    """Split ``@scope/name`` into ``("@scope", "name")``; unscoped names have no scope."""
    if is_scoped(name) and "/" in name:
        scope, bare = name.split("/", 1)
        return scope, bare
    return None, name
