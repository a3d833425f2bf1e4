"""Tests for temp directory lifecycle."""

from __future__ import annotations

import io
import re
import shutil
from pathlib import Path

import pytest

from npm_oidc_setup import workspace as workspace_module
from npm_oidc_setup.workspace import PlaceholderWorkspace, generate_directory_name


def test_generate_directory_name_default_token() -> None:
    name = generate_directory_name()
    assert re.fullmatch(r"npm-oidc-setup-[0-9a-f]{16}", name)


def test_generate_directory_name_uses_factory() -> None:
    assert generate_directory_name("pfx-", lambda: "abc") == "pfx-abc"


def test_workspace_creates_and_removes(tmp_path: Path) -> None:
    info = io.StringIO()
    workspace = PlaceholderWorkspace(temp_root=tmp_path, token_factory=lambda: "0" * 16, info_stream=info)

    with workspace as path:
        assert path == tmp_path / ("npm-oidc-setup-" + "0" * 16)
        assert path.is_dir()
        (path / "file.txt").write_text("x", encoding="utf-8")

    assert not path.exists()
    assert "Cleaned up temp directory" in info.getvalue()


def test_workspace_creates_missing_parents(tmp_path: Path) -> None:
    root = tmp_path / "nested" / "root"
    with PlaceholderWorkspace(temp_root=root, info_stream=io.StringIO()) as path:
        assert path.parent == root
        assert path.is_dir()


def test_workspace_keep_leaves_directory(tmp_path: Path) -> None:
    with PlaceholderWorkspace(temp_root=tmp_path, keep=True) as path:
        pass

    assert path.is_dir()


def test_workspace_rejects_existing_directory(tmp_path: Path) -> None:
    (tmp_path / "npm-oidc-setup-dup").mkdir()
    workspace = PlaceholderWorkspace(temp_root=tmp_path, token_factory=lambda: "dup")

    with pytest.raises(FileExistsError):
        workspace.create()


def test_workspace_removes_on_exception(tmp_path: Path) -> None:
    with pytest.raises(RuntimeError):
        with PlaceholderWorkspace(temp_root=tmp_path, info_stream=io.StringIO()) as path:
            raise RuntimeError("boom")

    assert not path.exists()


def test_cleanup_tolerates_missing_directory(tmp_path: Path) -> None:
    warn = io.StringIO()
    workspace = PlaceholderWorkspace(temp_root=tmp_path, warn_stream=warn, info_stream=io.StringIO())
    path = workspace.create()
    shutil.rmtree(path)

    assert workspace.cleanup() is True
    assert warn.getvalue() == ""


def test_cleanup_failure_is_warning(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    warn = io.StringIO()
    workspace = PlaceholderWorkspace(temp_root=tmp_path, warn_stream=warn, info_stream=io.StringIO())

    def fake_rmtree(path: Path) -> None:
        raise PermissionError("denied")

    monkeypatch.setattr(workspace_module.shutil, "rmtree", fake_rmtree)

    with workspace as path:
        pass

    assert path.exists()
    assert "Could not clean up temp directory: denied" in warn.getvalue()
