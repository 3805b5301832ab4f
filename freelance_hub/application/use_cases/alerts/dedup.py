"""Dedup filter enforcing at-most-once emission per alert triple."""

from collections.abc import Iterable, Set

from freelance_hub.domain.entities import AlertCandidate, AlertKey


def filter_new_candidates(
    candidates: Iterable[AlertCandidate], emitted_keys: Set[AlertKey]
) -> list[AlertCandidate]:
    """Keep candidates whose triple was never emitted, preserving order.

    Repeated triples inside ``candidates`` are collapsed to the first one.
    """

    seen: set[AlertKey] = set(emitted_keys)
    fresh: list[AlertCandidate] = []
    for candidate in candidates:
        key = candidate.key
        if key in seen:
            continue
        seen.add(key)
        fresh.append(candidate)
    return fresh
