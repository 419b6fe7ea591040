"""Exception hierarchy for spec collection."""

from __future__ import annotations


class BootstrapError(RuntimeError):
    """Raised when the run cannot start; always fatal."""


class ConfigError(BootstrapError):
    """Raised when the sources catalog cannot be read or parsed."""


class ProjectRootError(BootstrapError):
    """Raised when the project root cannot be located from the working directory."""


class OutputDirectoryError(BootstrapError):
    """Raised when the output directory cannot be created."""


class CollectionError(RuntimeError):
    """Base class for failures scoped to a single service."""


class MissingWorkingDirectoryError(CollectionError):
    """Raised when a service's working directory does not exist."""

    def __init__(self, path: object) -> None:
        super().__init__(f"local path does not exist: {path}")
        self.path = path


class GeneratorFailedError(CollectionError):
    """Raised when a generator cannot be spawned or exits non-zero."""

    def __init__(self, message: str, *, returncode: int | None = None) -> None:
        super().__init__(f"generator command failed: {message}")
        self.returncode = returncode


class UnsupportedGeneratorError(CollectionError):
    """Raised for generator types without an artifact search policy."""

    def __init__(self, generator_type: str) -> None:
        super().__init__(f"unsupported generator type: {generator_type}")
        self.generator_type = generator_type


class ArtifactNotFoundError(CollectionError):
    """Raised when none of the candidate artifact paths exist."""


class PublishError(CollectionError):
    """Raised when copying or validating a published spec fails."""


__all__ = [
    "ArtifactNotFoundError",
    "BootstrapError",
    "CollectionError",
    "ConfigError",
    "GeneratorFailedError",
    "MissingWorkingDirectoryError",
    "OutputDirectoryError",
    "ProjectRootError",
    "PublishError",
    "UnsupportedGeneratorError",
]
