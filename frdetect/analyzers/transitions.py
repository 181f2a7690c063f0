"""French discourse connector detection."""

from __future__ import annotations

from typing import Sequence

COMMON_TRANSITIONS: tuple[str, ...] = (
    "premièrement", "deuxièmement", "ensuite", "puis", "enfin",
    "cependant", "néanmoins", "toutefois", "mais", "or",
    "donc", "ainsi", "par conséquent", "en effet", "car",
    "de plus", "en outre", "également", "aussi", "par ailleurs",
)


def find_transitions(
    text: str,
    lexicon: Sequence[str] = COMMON_TRANSITIONS,
) -> list[str]:
    """
    Return the connectors of *lexicon* present anywhere in *text*.

    Matching is a case-insensitive substring test with no word boundary,
    so "or" also matches inside "alors". Results follow lexicon order and
    list each entry at most once.
    """
    lowered = text.lower()
    found: list[str] = []
    for transition in lexicon:
        if transition in found:
            continue
        if transition.lower() in lowered:
            found.append(transition)
    return found
