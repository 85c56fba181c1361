"""
Vector math for embedding comparison.

Cosine similarity plus the codec for the opaque stored embedding form
(a JSON array of floats in a text column).

Dependencies: json, math (stdlib)
System role: Pure numeric helpers for similarity ranking
"""

import json
import math
from typing import Sequence

from newsbot.core.exceptions import DataIntegrityError


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Compute cosine similarity between two equal-length vectors.

    Args:
        a: First vector
        b: Second vector

    Returns:
        float: Similarity in [-1, 1], or NaN when either vector has zero magnitude

    Raises:
        DataIntegrityError: If the vectors differ in length or are empty
    """
    if len(a) != len(b) or not a:
        raise DataIntegrityError(
            "Vector dimension mismatch",
            details={"left_dim": len(a), "right_dim": len(b)},
        )

    dot = math.fsum(x * y for x, y in zip(a, b))
    magnitude_a = math.sqrt(math.fsum(x * x for x in a))
    magnitude_b = math.sqrt(math.fsum(y * y for y in b))
    if magnitude_a == 0.0 or magnitude_b == 0.0:
        return math.nan

    # Clamp rounding drift so identical vectors stay at exactly 1.0
    return max(-1.0, min(1.0, dot / (magnitude_a * magnitude_b)))


def encode_embedding(vector: Sequence[float]) -> str:
    """Serialize an embedding for storage."""
    return json.dumps([float(x) for x in vector])


def decode_embedding(raw: str) -> list[float]:
    """
    Parse a stored embedding.

    Args:
        raw: JSON-encoded float array

    Returns:
        list[float]: Decoded vector

    Raises:
        DataIntegrityError: If the payload is not a non-empty numeric array
    """
    try:
        values = json.loads(raw)
    except (TypeError, ValueError) as e:
        raise DataIntegrityError(f"Stored embedding is not valid JSON: {e}") from e

    if not isinstance(values, list) or not values:
        raise DataIntegrityError("Stored embedding is not a non-empty array")
    if not all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in values):
        raise DataIntegrityError("Stored embedding contains non-numeric values")

    return [float(v) for v in values]
