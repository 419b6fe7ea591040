"""CLI entrypoint for collecting API specs."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Tuple

from .collector import SpecCollector
from .config import load_catalog
from .errors import BootstrapError
from .logging import configure_logging, get_logger
from .models import ServiceCatalog
from .paths import ProjectLayout, ensure_output_dir, find_project_root


def _build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="collect-specs",
        description=(
            "Run each configured service's spec generator and publish the "
            "resulting OpenAPI documents to api-docs/public/api-specs."
        ),
    )


def bootstrap(cwd: Path) -> Tuple[ProjectLayout, ServiceCatalog]:
    """Locate the project, load the catalog and prepare the output directory."""
    layout = ProjectLayout(find_project_root(cwd))
    catalog = load_catalog(layout.config_path)
    ensure_output_dir(layout.output_dir)
    return layout, catalog


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for collect-specs."""
    parser = _build_parser()
    parser.parse_args(argv)

    configure_logging()
    logger = get_logger("cli")
    logger.info("Starting API specification collection process...")

    try:
        layout, catalog = bootstrap(Path.cwd())
    except BootstrapError as exc:
        logger.error("%s", exc)
        parser.exit(1)

    report = SpecCollector().collect(catalog, layout.output_dir)

    logger.info("Collection summary: %s", report.summary())
    logger.info("API specification collection completed")


if __name__ == "__main__":
    main(sys.argv[1:])
