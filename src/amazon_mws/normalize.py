"""Normalization of decoded XML values."""

from typing import Any, Mapping


def is_positional(value: Mapping) -> bool:
    """True for mappings keyed 0..n-1, as produced by list-shaped decoders."""
    keys = list(value)
    if not keys:
        return False
    try:
        return [int(key) for key in keys] == list(range(len(keys)))
    except (TypeError, ValueError):
        return False


def as_sequence(value: Any) -> list:
    """Return ``value`` as a list of items.

    Decoding collapses a single repeated element into the element itself, so
    every field that may repeat has to pass through here before iteration.
    Lists come back unchanged, mappings keyed ``0..n-1`` become the list of
    their values, ``None`` becomes an empty list and anything else is wrapped.
    """
    if value is None:
        return []
    if isinstance(value, list):
        return value
    if isinstance(value, tuple):
        return list(value)
    if isinstance(value, Mapping) and is_positional(value):
        return list(value.values())
    return [value]


def dig(value: Any, *path: str) -> Any:
    """Walk nested mappings, returning None as soon as a step is missing."""
    for key in path:
        if not isinstance(value, Mapping):
            return None
        value = value.get(key)
    return value


def text_of(value: Any) -> Any:
    """Text content of a decoded element that may carry attributes."""
    if isinstance(value, Mapping):
        return value.get("#text")
    return value
