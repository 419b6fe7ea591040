"""Loading of the sources catalog (api-docs/config/sources.json)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from .errors import ConfigError
from .models import ServiceCatalog, ServiceDescriptor

# JSON key -> ServiceDescriptor attribute.
_DESCRIPTOR_FIELDS = {
    "id": "id",
    "name": "name",
    "specPath": "spec_path",
    "localPath": "local_path",
    "servicePath": "service_path",
    "generatorType": "generator_type",
    "generatorCommand": "generator_command",
    "version": "version",
    "sourceRepo": "source_repo",
}


def load_catalog(config_path: Path) -> ServiceCatalog:
    """Load the ordered service catalog from disk."""
    config_path = Path(config_path)
    data = _read_config(config_path)
    if not isinstance(data, dict):
        raise ConfigError(f"{config_path.name} must contain a JSON object at the root")

    entries = data.get("apis")
    if not isinstance(entries, list):
        raise ConfigError(f"{config_path.name} must define an 'apis' array")

    descriptors: List[ServiceDescriptor] = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ConfigError(f"apis[{index}] in {config_path.name} must be an object")
        descriptors.append(parse_descriptor(entry))
    return tuple(descriptors)


def parse_descriptor(entry: Dict[str, Any]) -> ServiceDescriptor:
    """Build a descriptor from one catalog entry, ignoring unknown keys."""
    values = {
        attribute: _as_str(entry.get(key)) or ""
        for key, attribute in _DESCRIPTOR_FIELDS.items()
    }
    return ServiceDescriptor(**values)


def descriptor_to_entry(descriptor: ServiceDescriptor) -> Dict[str, str]:
    """Inverse of :func:`parse_descriptor`, omitting empty fields."""
    entry = {}
    for key, attribute in _DESCRIPTOR_FIELDS.items():
        value = getattr(descriptor, attribute)
        if value:
            entry[key] = value
    return entry


def _read_config(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value) if isinstance(value, (str, int, float)) else None


__all__ = ["descriptor_to_entry", "load_catalog", "parse_descriptor"]
