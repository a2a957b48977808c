"""Roadmap — the ordered sequence of open issues, kept by fractional keys."""

from .order_keys import (
    generate_batch_order_keys,
    generate_key_between,
    generate_n_keys_between,
    is_valid_order_key,
)
from .positions import Position, assign_missing_order_keys, compute_order_key, has_valid_order_key

__all__: list[str] = [
    "Position",
    "assign_missing_order_keys",
    "compute_order_key",
    "generate_batch_order_keys",
    "generate_key_between",
    "generate_n_keys_between",
    "has_valid_order_key",
    "is_valid_order_key",
]
