"""
Pytest configuration for the npm-oidc-setup project.

This file makes sure the src/ layout is importable as `npm_oidc_setup`
when running tests.
"""

import sys
from pathlib import Path

# Project root directory (one level above tests/)
ROOT_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT_DIR / "src"

# Add src/ to sys.path so `import npm_oidc_setup` works
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))
