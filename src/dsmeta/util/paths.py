"""Path utilities for resource roots."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable


def resolve_roots(roots: Iterable[str | Path]) -> list[Path]:
    """Return the expanded, resolved search roots, dropping duplicates."""
    resolved: list[Path] = []
    for root in roots:
        candidate = Path(root).expanduser().resolve()
        if candidate not in resolved:
            resolved.append(candidate)
    return resolved


__all__ = ["resolve_roots"]
