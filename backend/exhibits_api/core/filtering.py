"""Key Filtering — parse comma-separated key lists and filter records by natural key.

Invariants:
    - Output preserves source order; each record appears at most once
    - Requested keys that match nothing are not errors
    - Integer tokens that fail to parse are dropped silently
    - A present, non-empty parameter with no usable keys yields an empty result

Design Decisions:
    - One generic filter parameterized over the key extractor: exhibits use int
      ids, artefacts use string object numbers
    - Targets collected into a set: request order and duplicates are irrelevant
"""

import re
from collections.abc import Callable, Hashable, Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)

_INT_TOKEN = re.compile(r"[+-]?[0-9]+")


def split_param(param: str) -> list[str]:
    """Split on commas and trim surrounding whitespace from every token."""
    return [token.strip() for token in param.split(",")]


def parse_int_keys(param: str) -> list[int]:
    """Parse comma-separated integer ids, skipping malformed tokens."""
    keys = []
    for token in split_param(param):
        if _INT_TOKEN.fullmatch(token):
            keys.append(int(token))
    return keys


def parse_str_keys(param: str) -> list[str]:
    return split_param(param)


def filter_by_keys(
    records: Sequence[T], targets: Iterable[K], key: Callable[[T], K],
) -> list[T]:
    """Keep records whose key is in targets, in source order."""
    wanted = set(targets)
    if not wanted:
        return []
    return [record for record in records if key(record) in wanted]


def apply_filter(
    records: Sequence[T],
    param: str | None,
    parse: Callable[[str], list[K]],
    key: Callable[[T], K],
) -> list[T]:
    """Filter records by a raw query parameter.

    Absent or empty parameter returns every record unchanged.
    """
    if not param:
        return list(records)
    return filter_by_keys(records, parse(param), key)
