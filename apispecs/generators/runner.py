"""Execution of per-service spec generator commands."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Callable, Sequence

from ..errors import GeneratorFailedError, MissingWorkingDirectoryError
from ..logging import get_logger

# (args, cwd) -> exit status
ProcessRunner = Callable[[Sequence[str], Path], int]


class GeneratorRunner:
    """Runs a generator in a service tree, passing its output straight through."""

    def __init__(self, runner: ProcessRunner | None = None) -> None:
        self._runner = runner or self._default_runner
        self.logger = get_logger("generators.runner")

    def run(self, args: Sequence[str], cwd: Path) -> None:
        """Execute ``args`` in ``cwd``; raise unless the child exits with status zero."""
        cwd = Path(cwd)
        if not cwd.is_dir():
            raise MissingWorkingDirectoryError(cwd)
        if not args:
            raise GeneratorFailedError("empty generator command")

        self.logger.debug("Running %s in %s", " ".join(args), cwd)
        try:
            returncode = self._runner(list(args), cwd)
        except (OSError, ValueError) as exc:
            # ValueError: arguments the OS cannot accept, e.g. an embedded NUL.
            raise GeneratorFailedError(str(exc)) from exc
        if returncode != 0:
            raise GeneratorFailedError(f"exit status {returncode}", returncode=returncode)

    @staticmethod
    def _default_runner(args: Sequence[str], cwd: Path) -> int:
        # stdout/stderr are inherited, not captured, so progress streams live.
        completed = subprocess.run(
            list(args),
            cwd=str(cwd),
            stdin=subprocess.DEVNULL,
            check=False,
        )
        return completed.returncode


__all__ = ["GeneratorRunner", "ProcessRunner"]
