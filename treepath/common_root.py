"""Longest shared segment prefix of two paths."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class CommonRoot:
    """Shared prefix plus the index where each input diverges."""

    prefix: tuple[str, ...]
    local_divergence: int
    other_divergence: int


def find_common_root(local: Sequence[str], other: Sequence[str]) -> CommonRoot:
    """Walk both sequences in lock-step until the first mismatch."""
    matched = 0
    for local_part, other_part in zip(local, other):
        if local_part != other_part:
            break
        matched += 1
    return CommonRoot(
        prefix=tuple(local[:matched]),
        local_divergence=matched,
        other_divergence=matched,
    )


__all__ = ["CommonRoot", "find_common_root"]
