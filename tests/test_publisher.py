"""Tests for publishing spec artifacts."""

from __future__ import annotations

from pathlib import Path

import pytest

from apispecs.errors import PublishError
from apispecs.publisher import publish_spec


def test_publish_copies_bytes_exactly(tmp_path: Path) -> None:
    source = tmp_path / "openapi.json"
    payload = b'{"openapi": "3.0.0",\r\n "paths": {"/caf\xc3\xa9": {}}}'
    source.write_bytes(payload)
    destination = tmp_path / "out" / "orders.json"
    destination.parent.mkdir()

    assert publish_spec(source, destination) == destination
    assert destination.read_bytes() == payload


def test_publish_overwrites_existing_destination(tmp_path: Path) -> None:
    source = tmp_path / "openapi.json"
    source.write_text('{"x":1}', encoding="utf-8")
    destination = tmp_path / "orders.json"
    destination.write_text('{"old": "content that is longer than the new one"}', encoding="utf-8")

    publish_spec(source, destination)

    assert destination.read_text(encoding="utf-8") == '{"x":1}'


def test_publish_fsyncs_destination(tmp_path: Path, monkeypatch) -> None:
    synced = []
    import apispecs.publisher as publisher_module

    monkeypatch.setattr(publisher_module.os, "fsync", lambda fd: synced.append(fd))
    source = tmp_path / "openapi.json"
    source.write_text("{}", encoding="utf-8")

    publish_spec(source, tmp_path / "out.json")

    assert len(synced) == 1


def test_publish_leaves_invalid_json_in_place(tmp_path: Path) -> None:
    source = tmp_path / "openapi.json"
    source.write_text("not json", encoding="utf-8")
    destination = tmp_path / "orders.json"

    with pytest.raises(PublishError, match="invalid JSON in spec file"):
        publish_spec(source, destination)

    assert destination.read_text(encoding="utf-8") == "not json"


def test_publish_reports_unreadable_source(tmp_path: Path) -> None:
    destination = tmp_path / "orders.json"

    with pytest.raises(PublishError, match="error reading spec file"):
        publish_spec(tmp_path / "missing.json", destination)

    assert not destination.exists()


def test_publish_reports_unwritable_destination(tmp_path: Path) -> None:
    source = tmp_path / "openapi.json"
    source.write_text("{}", encoding="utf-8")

    with pytest.raises(PublishError, match="error copying spec file"):
        publish_spec(source, tmp_path / "missing-dir" / "orders.json")


def test_publish_reports_destination_with_nul_byte(tmp_path: Path) -> None:
    source = tmp_path / "openapi.json"
    source.write_text("{}", encoding="utf-8")

    with pytest.raises(PublishError, match="error copying spec file"):
        publish_spec(source, tmp_path / "orders\u0000.json")


def test_publish_rejects_trailing_data(tmp_path: Path) -> None:
    source = tmp_path / "openapi.json"
    source.write_text("{} garbage", encoding="utf-8")

    with pytest.raises(PublishError, match="invalid JSON in spec file"):
        publish_spec(source, tmp_path / "orders.json")
