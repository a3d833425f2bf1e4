"""Generation of the placeholder package files."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List

logger = logging.getLogger(__name__)

MANIFEST_VERSION = "0.0.1"
MANIFEST_KEYWORDS: List[str] = ["oidc", "trusted-publishing", "setup"]

_README_TEMPLATE = """\
# {name}

## ⚠️ IMPORTANT NOTICE ⚠️

**This package is created solely for the purpose of setting up OIDC (OpenID Connect) trusted publishing with npm.**

This is **NOT** a functional package and contains **NO** code or functionality beyond the OIDC setup configuration.

## Purpose

This package exists to:
1. Configure OIDC trusted publishing for the package name `{name}`
2. Enable secure, token-less publishing from CI/CD workflows
3. Establish provenance for packages published under this name

## What is OIDC Trusted Publishing?

OIDC trusted publishing allows package maintainers to publish packages directly from their CI/CD workflows \
without needing to manage npm access tokens. Instead, it uses OpenID Connect to establish trust between the \
CI/CD provider (like GitHub Actions) and npm.

## Setup Instructions

To properly configure OIDC trusted publishing for this package:

1. Go to [npmjs.com](https://www.npmjs.com/) and navigate to your package settings
2. Configure the trusted publisher (e.g., GitHub Actions)
3. Specify the repository and workflow that should be allowed to publish
4. Use the configured workflow to publish your actual package

## DO NOT USE THIS PACKAGE

This package is a placeholder for OIDC configuration only. It:
- Contains no executable code
- Provides no functionality
- Should not be installed as a dependency
- Exists only for administrative purposes

## More Information

For more details about npm's trusted publishing feature, see:
- [npm Trusted Publishing Documentation](https://docs.npmjs.com/generating-provenance-statements)
- [GitHub Actions OIDC Documentation](https://docs.github.com/en/actions/deployment/security-hardening-your-deployments/about-security-hardening-with-openid-connect)

---

**Maintained for OIDC setup purposes only**
"""


@dataclass(frozen=True)
class PlaceholderPackage:
    """Files written for one placeholder package."""

    directory: Path
    manifest_path: Path
    readme_path: Path


def build_manifest(name: str) -> Dict[str, Any]:
    """Build the package.json content for a placeholder package."""
    return {
        "name": name,
        "version": MANIFEST_VERSION,
        "description": f"OIDC trusted publishing setup package for {name}",
        "keywords": list(MANIFEST_KEYWORDS),
    }


def render_readme(name: str) -> str:
    """Render the README notice for a placeholder package."""
    return _README_TEMPLATE.format(name=name)


def write_placeholder_package(directory: str | Path, name: str) -> PlaceholderPackage:
    """Write package.json and README.md into an existing directory."""
    destination = Path(directory)
    manifest_path = destination / "package.json"
    readme_path = destination / "README.md"

    with manifest_path.open("w", encoding="utf-8") as handle:
        json.dump(build_manifest(name), handle, ensure_ascii=False, indent=2)
        handle.write("\n")
    readme_path.write_text(render_readme(name), encoding="utf-8")

    logger.debug("Wrote %s and %s", manifest_path, readme_path)
    return PlaceholderPackage(directory=destination, manifest_path=manifest_path, readme_path=readme_path)
