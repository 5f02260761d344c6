import math
from collections.abc import Sequence
from dataclasses import dataclass

from coders.abc import CodeMap, FrequencyTable, Symbol
from coders.frequency import count_frequencies

# Fixed width assumed for the uncompressed input
BITS_PER_SYMBOL = 8


@dataclass(frozen=True)
class CompressionStats:
    symbols: int
    original_bits: int
    encoded_bits: int
    bits_per_symbol: float | None
    ratio: float | None
    entropy: float


def expected_length(freqs: FrequencyTable, codes: CodeMap) -> int:
    """Total encoded length in bits: sum of frequency * code length."""
    return sum(f * len(codes[s]) for s, f in freqs.items())


def entropy(freqs: FrequencyTable) -> float:
    """Zero-order Shannon entropy of the distribution, in bits per symbol."""
    n = sum(freqs.values())
    if n == 0:
        return 0.0
    H = 0.0
    for c in freqs.values():
        p = c / n
        H -= p * math.log2(p)
    return H


def compression_stats(data: Sequence[Symbol], encoded: str,
                      freqs: FrequencyTable | None = None) -> CompressionStats:
    if freqs is None:
        freqs = count_frequencies(data)
    n = len(data)
    enc_bits = len(encoded)
    orig_bits = n * BITS_PER_SYMBOL
    return CompressionStats(
        symbols=n,
        original_bits=orig_bits,
        encoded_bits=enc_bits,
        bits_per_symbol=enc_bits / n if n > 0 else None,
        ratio=enc_bits / orig_bits if n > 0 else None,
        entropy=entropy(freqs),
    )
