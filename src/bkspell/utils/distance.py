"""
String distances used to key and search the BK-tree.

sift3_distance is a cheap single-pass approximation of edit distance. It
returns half-integers for strings of different parity and is not a true
metric, so BK-tree pruning with it is best-effort.
"""
from typing import Callable, Dict

from rapidfuzz.distance import Levenshtein

DistanceFunc = Callable[[str, str], float]

MAX_OFFSET = 5


def sift3_distance(s1: str, s2: str, max_offset: int = MAX_OFFSET) -> float:
    if not s1:
        return float(len(s2)) if s2 else 0.0
    if not s2:
        return float(len(s1))

    n1, n2 = len(s1), len(s2)
    c = offset1 = offset2 = lcs = 0
    while c + offset1 < n1 and c + offset2 < n2:
        if s1[c + offset1] == s2[c + offset2]:
            lcs += 1
        else:
            offset1 = offset2 = 0
            for i in range(max_offset):
                if c + i < n1 and s1[c + i] == s2[c]:
                    offset1 = i
                    break
                if c + i < n2 and s1[c] == s2[c + i]:
                    offset2 = i
                    break
        c += 1
    return (n1 + n2) / 2 - lcs


def levenshtein_distance(s1: str, s2: str) -> float:
    """Exact edit distance (a true metric)."""
    return float(Levenshtein.distance(s1, s2))


METRICS: Dict[str, DistanceFunc] = {
    "sift3": sift3_distance,
    "levenshtein": levenshtein_distance,
}


def get_metric(name: str) -> DistanceFunc:
    try:
        return METRICS[name]
    except KeyError:
        raise ValueError(f"Unknown distance metric '{name}', expected one of {sorted(METRICS)}") from None
