from collections import Counter
from collections.abc import Iterable

from coders.abc import FrequencyTable, Symbol


def count_frequencies(data: Iterable[Symbol]) -> FrequencyTable:
    """Count occurrences of every symbol in `data`.

    Keys come out in ascending symbol order so that the table (and every
    tree built from it) does not depend on where a symbol first shows up.
    Symbols that cannot be compared with each other keep first-occurrence
    order instead.
    """
    counts = Counter(data)
    try:
        A = sorted(counts)
    except TypeError:
        A = list(counts)
    return {a: counts[a] for a in A}
