"""Tests for the time-ordered identifier helpers."""

from __future__ import annotations

import pytest

from forum_service.core.database import (
    generate_object_id,
    is_object_id,
    normalize_object_id,
)


def test_generated_ids_are_24_lowercase_hex():
    value = generate_object_id()

    assert is_object_id(value)
    assert value == value.lower()


def test_ids_sort_by_embedded_time():
    earlier = generate_object_id(1_700_000_000)
    later = generate_object_id(1_700_000_001)

    assert earlier < later


def test_same_second_ids_follow_creation_order():
    ids = [generate_object_id(1_700_000_000) for _ in range(500)]

    assert ids == sorted(ids)
    assert len(set(ids)) == len(ids)


def test_counter_is_shared_across_timestamps():
    first = generate_object_id(1_700_000_005)
    generate_object_id(1_700_000_009)
    again = generate_object_id(1_700_000_005)

    assert first < again


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("65a1b2c3d4e5f60718293a4b", True),
        ("65A1B2C3D4E5F60718293A4B", True),
        ("65a1b2c3d4e5f60718293a4", False),
        ("65a1b2c3d4e5f60718293a4bb", False),
        ("zza1b2c3d4e5f60718293a4b", False),
        ("", False),
        (None, False),
        (12345, False),
    ],
)
def test_is_object_id(value, expected):
    assert is_object_id(value) is expected


def test_normalize_lowercases():
    assert normalize_object_id("65A1B2C3D4E5F60718293A4B") == "65a1b2c3d4e5f60718293a4b"

