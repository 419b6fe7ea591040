"""Publishing of discovered spec artifacts into the output directory."""

from __future__ import annotations

import json
import os
import shutil
from pathlib import Path

from .errors import PublishError


def publish_spec(source: Path, destination: Path) -> Path:
    """Copy ``source`` to ``destination``, fsync it, and check it parses as JSON.

    A destination that fails the JSON check is left on disk; the caller only
    learns about it through the raised :class:`PublishError`.
    """
    source = Path(source)
    destination = Path(destination)

    # ValueError covers paths the OS rejects outright, such as an embedded NUL.
    try:
        src = source.open("rb")
    except (OSError, ValueError) as exc:
        raise PublishError(f"error reading spec file {source}: {exc}") from exc
    with src:
        try:
            with destination.open("wb") as dst:
                shutil.copyfileobj(src, dst)
                dst.flush()
                os.fsync(dst.fileno())
        except (OSError, ValueError) as exc:
            raise PublishError(f"error copying spec file to {destination}: {exc}") from exc

    _validate_json(destination)
    return destination


def _validate_json(path: Path) -> None:
    try:
        with path.open("rb") as handle:
            json.load(handle)
    except OSError as exc:
        raise PublishError(f"error reading published spec {path}: {exc}") from exc
    except ValueError as exc:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors.
        raise PublishError(f"invalid JSON in spec file: {exc}") from exc


__all__ = ["publish_spec"]
