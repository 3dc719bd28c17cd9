"""Levenshtein edit distance."""


def edit_distance(text_a: str, text_b: str) -> int:
    """
    Minimum number of single-character insertions, deletions and
    substitutions turning ``text_a`` into ``text_b``.

    Row-by-row evaluation of the usual (|A|+1) x (|B|+1) table; only the
    previous row is kept, the values are identical to the full table.
    """
    if not text_a:
        return len(text_b)
    if not text_b:
        return len(text_a)

    previous = list(range(len(text_b) + 1))
    for i, char_a in enumerate(text_a, start=1):
        current = [i] + [0] * len(text_b)
        for j, char_b in enumerate(text_b, start=1):
            if char_a == char_b:
                current[j] = previous[j - 1]
            else:
                current[j] = 1 + min(previous[j], current[j - 1], previous[j - 1])
        previous = current

    return previous[-1]
