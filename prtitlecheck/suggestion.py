"""Did-you-mean suggestions for unknown types and scopes."""
from typing import List, Optional, Sequence, Union

MIN_SIMILARITY = 0.5


def levenshtein_distance(a: str, b: str) -> int:
    """Edit distance between two strings (insert, delete, substitute)."""
    if len(a) < len(b):
        a, b = b, a
    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, 1):
        current = [i]
        for j, cb in enumerate(b, 1):
            current.append(min(
                previous[j] + 1,
                current[j - 1] + 1,
                previous[j - 1] + (ca != cb),
            ))
        previous = current
    return previous[-1]


def similarity(a: str, b: str) -> float:
    """Normalised similarity in [0, 1]; 1 means identical."""
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1.0 - levenshtein_distance(a, b) / longest


def find_best_match(word: str, candidates: Sequence[str]) -> Optional[str]:
    """Closest candidate at or above MIN_SIMILARITY, ties broken alphabetically."""
    best = None
    best_score = MIN_SIMILARITY
    for candidate in sorted(set(candidates)):
        score = similarity(word, candidate)
        if score > best_score or (best is None and score >= best_score):
            best, best_score = candidate, score
    return best


def suggest_word(
    unknown: Union[str, Sequence[str], None],
    candidates: Optional[Sequence[str]] = None,
) -> str:
    """Build the ``Did you mean "..."? `` fragment for an error message.

    ``unknown`` may be a single word or a list of words; each word is
    matched on its own. Returns an empty string when nothing is close.
    """
    if not candidates or unknown is None:
        return ""

    words = [unknown] if isinstance(unknown, str) else list(unknown)
    matches: List[str] = []
    for word in words:
        match = find_best_match(word, candidates)
        if match is not None and match not in matches:
            matches.append(match)

    if not matches:
        return ""
    quoted = ", ".join(f'"{match}"' for match in matches)
    return f"Did you mean {quoted}? "
