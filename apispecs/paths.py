"""Project layout discovery and working-directory resolution."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .errors import OutputDirectoryError, ProjectRootError

DOCS_DIR_NAME = "api-docs"
SCRIPTS_DIR_NAME = "scripts"
OUTPUT_DIR_MODE = 0o755


@dataclass(frozen=True)
class ProjectLayout:
    """Well-known locations relative to the project root."""

    root: Path

    @property
    def docs_dir(self) -> Path:
        return self.root / DOCS_DIR_NAME

    @property
    def config_path(self) -> Path:
        return self.docs_dir / "config" / "sources.json"

    @property
    def output_dir(self) -> Path:
        return self.docs_dir / "public" / "api-specs"


def resolve_working_dir(local_path: str | Path, service_path: str | Path | None = None) -> Path:
    """Return the directory a generator runs in. Performs no I/O."""
    base = Path(local_path)
    if service_path:
        return base / service_path
    return base


def find_project_root(cwd: Path) -> Path:
    """Locate the project root from the current working directory.

    Checked in order: running from ``api-docs/scripts``, running from
    ``api-docs``, running from the root itself (an ``api-docs`` child exists).
    """
    cwd = Path(cwd)
    if cwd.name == SCRIPTS_DIR_NAME and cwd.parent.name == DOCS_DIR_NAME:
        return cwd.parent.parent
    if cwd.name == DOCS_DIR_NAME:
        return cwd.parent
    if (cwd / DOCS_DIR_NAME).exists():
        return cwd
    raise ProjectRootError(f"unable to determine project root from directory: {cwd}")


def ensure_output_dir(path: Path) -> Path:
    """Create the output directory (and parents) if it does not exist yet."""
    try:
        path.mkdir(mode=OUTPUT_DIR_MODE, parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputDirectoryError(f"Error creating output directory {path}: {exc}") from exc
    if not path.is_dir():
        raise OutputDirectoryError(f"Output path is not a directory: {path}")
    return path


__all__ = [
    "ProjectLayout",
    "ensure_output_dir",
    "find_project_root",
    "resolve_working_dir",
]
