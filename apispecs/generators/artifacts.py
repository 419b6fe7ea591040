"""Discovery of generated spec artifacts inside a service tree."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Tuple

from ..errors import ArtifactNotFoundError, UnsupportedGeneratorError
from ..logging import get_logger
from ..models import GeneratorType

# Ordered by priority; the first existing file wins.
CANDIDATE_PATHS: Dict[GeneratorType, Tuple[str, ...]] = {
    GeneratorType.TYPESCRIPT: (
        "dist/swagger.json",
        "dist/openapi.json",
        "build/swagger.json",
        "build/openapi.json",
    ),
    GeneratorType.KOTLIN: (
        "build/openapi/openapi.json",
        "build/swagger/swagger.json",
        "build/resources/main/openapi.json",
    ),
}

_logger = get_logger("generators.artifacts")


def candidate_paths(generator_type: str) -> Tuple[str, ...]:
    """Return the ordered candidate paths for ``generator_type``."""
    try:
        return CANDIDATE_PATHS[GeneratorType(generator_type)]
    except ValueError:
        raise UnsupportedGeneratorError(generator_type) from None


def find_artifact(generator_type: str, working_dir: Path, service_id: str = "") -> Path:
    """Return the first candidate artifact that exists as a regular file."""
    candidates = candidate_paths(generator_type)
    for relative in candidates:
        candidate = Path(working_dir) / relative
        if candidate.is_file():
            _logger.debug("Found spec artifact for %s at %s", service_id, candidate)
            return candidate
    _logger.debug(
        "No spec artifact for %s under %s (checked %s)",
        service_id,
        working_dir,
        ", ".join(candidates),
    )
    raise ArtifactNotFoundError(f"could not find generated spec file for {service_id}")


__all__ = ["CANDIDATE_PATHS", "candidate_paths", "find_artifact"]
