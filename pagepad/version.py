"""Build identification for ``pagepad --version``."""

from __future__ import annotations

import importlib.metadata
import json
import subprocess
from pathlib import Path
from typing import NamedTuple, Optional

DISTRIBUTION = "pagepad"


class BuildInfo(NamedTuple):
    commit: Optional[str]
    date: Optional[str]
    dirty: bool


def _git(args: list[str], cwd: Path) -> Optional[str]:
    try:
        out = subprocess.check_output(["git", *args], cwd=str(cwd), stderr=subprocess.DEVNULL)
    except (subprocess.CalledProcessError, FileNotFoundError, OSError):
        return None
    return out.decode().strip() or None


def _from_git_repo() -> Optional[BuildInfo]:
    here = Path(__file__).resolve().parent
    top = _git(["rev-parse", "--show-toplevel"], here)
    if not top:
        return None
    root = Path(top)
    status = _git(["status", "--porcelain"], root)
    return BuildInfo(
        commit=_git(["rev-parse", "HEAD"], root),
        date=_git(["show", "-s", "--format=%cI", "HEAD"], root),
        dirty=bool(status),
    )


def _from_embedded_file() -> Optional[BuildInfo]:
    # Written by the hatch build hook
    try:
        from . import _build_info  # type: ignore
    except ImportError:
        return None
    return BuildInfo(
        commit=getattr(_build_info, "COMMIT", None),
        date=getattr(_build_info, "DATE", None),
        dirty=False,
    )


def _from_direct_url() -> Optional[BuildInfo]:
    # PEP 610: pip records the VCS commit when installing from a repository
    try:
        dist = importlib.metadata.distribution(DISTRIBUTION)
    except importlib.metadata.PackageNotFoundError:
        return None
    text = dist.read_text("direct_url.json")
    if not text:
        return None
    try:
        commit = (json.loads(text).get("vcs_info") or {}).get("commit_id")
    except (json.JSONDecodeError, AttributeError):
        return None
    return BuildInfo(commit=commit, date=None, dirty=False) if commit else None


def get_build_info() -> BuildInfo:
    for getter in (_from_git_repo, _from_embedded_file, _from_direct_url):
        info = getter()
        if info and (info.commit or info.date):
            return info
    return BuildInfo(commit=None, date=None, dirty=False)


def get_version_string() -> str:
    info = get_build_info()
    commit = info.commit[:7] if info.commit else "unknown"
    if info.dirty:
        commit += "-dirty"
    return f"{commit} {info.date or 'unknown'}"
