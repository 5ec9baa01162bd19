"""Ray hit post-processing — length filtering and per-wall deduplication."""

from __future__ import annotations
from typing import Iterable

from penetration.models import RayHit


def filter_hits(hits: Iterable[RayHit], max_proximity: float) -> list[RayHit]:
    """Keep hits that lie on the conduit itself: 0 <= proximity <= max_proximity."""
    return [h for h in hits if 0.0 <= h.proximity <= max_proximity]


def dedupe_hits(hits: Iterable[RayHit]) -> list[RayHit]:
    """
    Collapse hits on the same wall into one.

    A ray crossing a solid wall registers at least an entry and an exit
    face. Hits are grouped by wall id only and the first hit of each group,
    in input order, is kept. Input order of the surviving hits is preserved.
    """
    seen: set[str] = set()
    unique: list[RayHit] = []
    for hit in hits:
        if hit.wall_id in seen:
            continue
        seen.add(hit.wall_id)
        unique.append(hit)
    return unique
