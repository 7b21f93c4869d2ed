"""Normalization helpers for inline node inputs."""

from __future__ import annotations

from typing import Iterable

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from ..models.inline import InlineNode

_inline_nodes_adapter = TypeAdapter(list[InlineNode])


def parse_inline_nodes(payload: Iterable[object]) -> list[InlineNode]:
    """Validate an inline node payload (dicts or node models).

    Raises ``pydantic.ValidationError`` on malformed payloads.
    """
    return _inline_nodes_adapter.validate_python(list(payload))


def coerce_inline_nodes(nodes: Iterable[object] | None) -> list[InlineNode] | None:
    """Normalize caller inline node inputs, returning ``None`` when unusable."""
    if nodes is None:
        return None
    if isinstance(nodes, (str, bytes, dict)):
        logger.warning("Unsupported inline nodes payload type ignored")
        return None
    try:
        return parse_inline_nodes(nodes)
    except ValidationError as exc:
        logger.warning(f"Invalid inline nodes ignored: {exc}")
        return None
    except TypeError:
        logger.warning("Unsupported inline nodes payload type ignored")
        return None
