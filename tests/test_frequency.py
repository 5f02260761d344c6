from coders.frequency import count_frequencies


def test_empty():
    assert count_frequencies("") == {}
    assert count_frequencies(b"") == {}


def test_counts_sum_to_length():
    text = "the quick brown fox jumps over the lazy dog"
    freqs = count_frequencies(text)
    assert sum(freqs.values()) == len(text)
    assert freqs["o"] == 4
    assert freqs[" "] == 8
    assert set(freqs) == set(text)


def test_keys_sorted():
    assert list(count_frequencies("cabbca")) == ["a", "b", "c"]
    assert count_frequencies(b"\x02\x01\x02") == {1: 1, 2: 2}


def test_incomparable_symbols_keep_first_occurrence():
    freqs = count_frequencies([3, "x", 3, None])
    assert list(freqs) == [3, "x", None]
    assert freqs[3] == 2
