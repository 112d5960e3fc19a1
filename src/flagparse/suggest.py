"""Closest-match suggestions for misspelled flags."""

from typing import Iterable, Optional

from .flags import Flag


def edit_distance(a: str, b: str) -> int:
    """
    Levenshtein distance between two strings: the number of single-character
    insertions, deletions or substitutions needed to turn `a` into `b`.
    """
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i]
        for j, cb in enumerate(b, start=1):
            current.append(
                min(
                    previous[j] + 1,  # deletion
                    current[j - 1] + 1,  # insertion
                    previous[j - 1] + (ca != cb),  # substitution
                )
            )
        previous = current
    return previous[-1]


def suggest_flag(token: str, flags: Iterable[Flag]) -> Optional[Flag]:
    """
    Return the flag whose canonical long form is nearest to `token`.

    Ties go to the flag seen first. There is no cut-off: any flag is better
    than none, so this only returns None for an empty `flags`.
    """
    best: Optional[Flag] = None
    best_distance = None
    for flag in flags:
        distance = edit_distance(token, flag.canonical_name)
        if best_distance is None or distance < best_distance:
            best, best_distance = flag, distance
    return best
