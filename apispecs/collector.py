"""Sequential collection of spec artifacts across the service catalog."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, Iterable

from .errors import CollectionError
from .generators.artifacts import find_artifact
from .generators.runner import GeneratorRunner
from .logging import get_logger
from .models import CollectionReport, ServiceDescriptor, ServiceResult, ServiceStatus
from .paths import resolve_working_dir
from .publisher import publish_spec

ArtifactFinder = Callable[[str, Path, str], Path]
SpecPublisher = Callable[[Path, Path], Path]


class SpecCollector:
    """Runs generators and publishes their specs, one service at a time."""

    def __init__(
        self,
        runner: GeneratorRunner | None = None,
        finder: ArtifactFinder | None = None,
        publisher: SpecPublisher | None = None,
    ) -> None:
        self.runner = runner or GeneratorRunner()
        self.finder = finder or find_artifact
        self.publisher = publisher or publish_spec
        self.logger = get_logger("collector")

    def collect(self, catalog: Iterable[ServiceDescriptor], output_dir: Path) -> CollectionReport:
        """Process every descriptor in order; per-service failures are logged, not raised."""
        output_dir = Path(output_dir)
        report = CollectionReport()
        written: Dict[str, str] = {}

        for descriptor in catalog:
            self.logger.info("Processing API: %s", descriptor.name)

            if descriptor.is_skippable:
                self.logger.info(
                    "Skipping %s - no local path or generator command specified",
                    descriptor.id,
                )
                report.add(ServiceResult(descriptor.id, ServiceStatus.SKIPPED))
                continue

            try:
                target = self.process(descriptor, output_dir)
            except CollectionError as exc:
                self.logger.error("Error processing API %s: %s", descriptor.id, exc)
                report.add(ServiceResult(descriptor.id, ServiceStatus.FAILED, message=str(exc)))
                continue

            previous = written.get(target.name)
            if previous is not None:
                self.logger.warning(
                    "%s overwrote %s published earlier by %s",
                    descriptor.id,
                    target.name,
                    previous,
                )
            written[target.name] = descriptor.id
            self.logger.info("Successfully processed %s API", descriptor.id)
            report.add(ServiceResult(descriptor.id, ServiceStatus.PUBLISHED, output_path=target))

        return report

    def process(self, descriptor: ServiceDescriptor, output_dir: Path) -> Path:
        """Run the generator for one service and publish its artifact."""
        working_dir = resolve_working_dir(descriptor.local_path, descriptor.service_path)

        self.logger.info(
            "Executing generator command for %s in %s", descriptor.id, working_dir
        )
        self.runner.run(descriptor.command_args(), working_dir)

        artifact = self.finder(descriptor.generator_type, working_dir, descriptor.id)
        target = output_dir / descriptor.output_filename
        self.logger.debug("Publishing %s to %s", artifact, target)
        return self.publisher(artifact, target)


__all__ = ["SpecCollector"]
