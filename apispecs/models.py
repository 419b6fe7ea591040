"""Core data models shared across the collector components."""

from __future__ import annotations

import ntpath
import posixpath
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple


class GeneratorType(str, Enum):
    """Generator toolchains with a known artifact layout."""

    TYPESCRIPT = "typescript"
    KOTLIN = "kotlin"


@dataclass(frozen=True)
class ServiceDescriptor:
    """One entry of the sources catalog describing how to obtain a spec."""

    id: str = ""
    name: str = ""
    spec_path: str = ""
    local_path: str = ""
    service_path: str = ""
    generator_type: str = ""
    generator_command: str = ""
    version: str = ""
    source_repo: str = ""

    @property
    def is_skippable(self) -> bool:
        return not self.local_path or not self.generator_command

    @property
    def output_filename(self) -> str:
        """Final path segment of ``spec_path``, whatever separator it uses."""
        return ntpath.basename(posixpath.basename(self.spec_path))

    def command_args(self) -> List[str]:
        # Plain whitespace split; quoting and shell syntax are not interpreted.
        return self.generator_command.split()


ServiceCatalog = Tuple[ServiceDescriptor, ...]


class ServiceStatus(str, Enum):
    PUBLISHED = "published"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class ServiceResult:
    """Outcome of processing one descriptor."""

    service_id: str
    status: ServiceStatus
    output_path: Optional[Path] = None
    message: Optional[str] = None


@dataclass
class CollectionReport:
    """Per-service outcomes of a collection run, in processing order."""

    results: List[ServiceResult] = field(default_factory=list)

    def add(self, result: ServiceResult) -> None:
        self.results.append(result)

    def _with_status(self, status: ServiceStatus) -> List[ServiceResult]:
        return [result for result in self.results if result.status is status]

    @property
    def published(self) -> List[ServiceResult]:
        return self._with_status(ServiceStatus.PUBLISHED)

    @property
    def skipped(self) -> List[ServiceResult]:
        return self._with_status(ServiceStatus.SKIPPED)

    @property
    def failed(self) -> List[ServiceResult]:
        return self._with_status(ServiceStatus.FAILED)

    def summary(self) -> str:
        return (
            f"{len(self.published)} published, {len(self.skipped)} skipped, "
            f"{len(self.failed)} failed"
        )
