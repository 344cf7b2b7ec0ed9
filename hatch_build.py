"""Custom build hook for Hatchling to generate build info."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Any

from hatchling.builders.hooks.plugin.interface import BuildHookInterface


class CustomBuildHook(BuildHookInterface):
    """Embed the git commit of the build in pagepad/_build_info.py."""

    def initialize(self, version: str, build_data: dict[str, Any]) -> None:
        target = Path(self.root) / "pagepad" / "_build_info.py"
        commit = self._git("rev-parse", "HEAD")
        date = self._git("show", "-s", "--format=%cI", "HEAD")
        target.write_text(
            "# Auto-generated at build time.\n"
            f"COMMIT = {commit!r}\n"
            f"DATE = {date!r}\n",
            encoding="utf-8",
        )
        build_data.setdefault("artifacts", []).append("pagepad/_build_info.py")

    def _git(self, *args: str) -> str | None:
        try:
            out = subprocess.check_output(["git", *args], cwd=self.root, stderr=subprocess.DEVNULL)
        except (subprocess.CalledProcessError, FileNotFoundError, OSError):
            # Building outside a checkout is fine
            return None
        return out.decode().strip() or None
