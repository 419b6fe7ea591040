"""Placeholder OpenAPI documents for developing the docs site without generators.

Every catalog entry with an id, name and spec path gets a small OpenAPI 3.0
document at the same location the collector would publish to.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, Iterable, List

from .cli import bootstrap
from .config import descriptor_to_entry
from .errors import BootstrapError
from .logging import configure_logging, get_logger
from .models import ServiceDescriptor

_logger = get_logger("samples")


def build_sample_spec(descriptor: ServiceDescriptor) -> Dict[str, Any]:
    """Return a sample OpenAPI document for ``descriptor``."""
    api_id = descriptor.id
    name = descriptor.name
    operation_suffix = api_id[:1].upper() + api_id[1:]

    def _json_response(schema: str) -> Dict[str, Any]:
        return {
            "200": {
                "description": "Successful response",
                "content": {
                    "application/json": {
                        "schema": {"$ref": f"#/components/schemas/{schema}"}
                    }
                },
            }
        }

    return {
        "openapi": "3.0.0",
        "info": {
            "title": f"{name} (Sample)",
            "description": f"Sample API specification for {name}",
            "version": "1.0.0",
        },
        "servers": [
            {"url": "https://api.example.com/v1", "description": "Production server"}
        ],
        "paths": {
            "/hello": {
                "get": {
                    "summary": "Hello World endpoint",
                    "description": "Returns a simple greeting message",
                    "operationId": "getHello",
                    "responses": _json_response("HelloResponse"),
                }
            },
            f"/{api_id}/example": {
                "get": {
                    "summary": f"Example {name} endpoint",
                    "description": f"Demonstrates a sample endpoint for {name}",
                    "operationId": f"get{operation_suffix}Example",
                    "responses": _json_response("ExampleResponse"),
                }
            },
        },
        "components": {
            "schemas": {
                "HelloResponse": {
                    "type": "object",
                    "properties": {
                        "message": {"type": "string", "example": "Hello, world!"},
                        "timestamp": {"type": "string", "format": "date-time"},
                    },
                },
                "ExampleResponse": {
                    "type": "object",
                    "properties": {
                        "id": {"type": "string", "format": "uuid"},
                        "name": {"type": "string", "example": "Example resource"},
                        "createdAt": {"type": "string", "format": "date-time"},
                    },
                },
            }
        },
    }


def write_sample_specs(catalog: Iterable[ServiceDescriptor], output_dir: Path) -> List[Path]:
    """Write a sample spec for every complete catalog entry; return the written paths."""
    written: List[Path] = []
    for descriptor in catalog:
        if not (descriptor.id and descriptor.name and descriptor.spec_path):
            entry = json.dumps(descriptor_to_entry(descriptor))
            _logger.error("Skipping invalid API entry: %s", entry)
            continue
        target = Path(output_dir) / descriptor.output_filename
        payload = json.dumps(build_sample_spec(descriptor), indent=2)
        target.write_text(payload, encoding="utf-8")
        _logger.info("Created sample API spec: %s", target)
        written.append(target)
    return written


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for create-sample-specs."""
    parser = argparse.ArgumentParser(
        prog="create-sample-specs",
        description="Write placeholder OpenAPI specs for every API in sources.json.",
    )
    parser.parse_args(argv)

    configure_logging()
    _logger.info("Creating sample API specifications...")

    try:
        layout, catalog = bootstrap(Path.cwd())
        if not catalog:
            _logger.error("No APIs found in %s", layout.config_path.name)
        write_sample_specs(catalog, layout.output_dir)
    except (BootstrapError, OSError) as exc:
        _logger.error("Error creating sample API specifications: %s", exc)
        parser.exit(1)

    _logger.info("Sample API specifications created successfully")


if __name__ == "__main__":
    main(sys.argv[1:])
