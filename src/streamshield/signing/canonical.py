"""Canonical payload serialization for request signing.

The remote verifier re-serializes the payload the same way before checking
the signature, so the output must stay byte-identical across releases:

  - top-level keys in ascending code-point order
  - nested objects keep the order they were given in (never re-sorted)
  - compact separators, non-ASCII characters emitted as-is, UTF-8 bytes
"""
from __future__ import annotations

import json
from typing import Any, Dict, Mapping


def sort_top_level(payload: Mapping[str, Any]) -> Dict[str, Any]:
    for key in payload:
        if not isinstance(key, str):
            raise TypeError(f"Payload keys must be strings, got {type(key).__name__}")
    return {key: payload[key] for key in sorted(payload)}


def canonical_json(payload: Mapping[str, Any]) -> str:
    return json.dumps(
        sort_top_level(payload),
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    )


def canonicalize(payload: Mapping[str, Any]) -> bytes:
    """Deterministic byte string for a payload: ``{}`` for an empty mapping."""
    return canonical_json(payload).encode("utf-8")
