"""Generator execution and artifact discovery."""

from .artifacts import CANDIDATE_PATHS, candidate_paths, find_artifact
from .runner import GeneratorRunner, ProcessRunner

__all__ = [
    "CANDIDATE_PATHS",
    "GeneratorRunner",
    "ProcessRunner",
    "candidate_paths",
    "find_artifact",
]
