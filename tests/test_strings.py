import pytest

from contestkit.strings import (
    can_replace,
    center_sign,
    even_substring_witness,
    reduce_weasel,
    weasels_equivalent,
)


def _distinct_substrings(s):
    return {s[i:j] for i in range(len(s)) for j in range(i + 1, len(s) + 1)}


@pytest.mark.parametrize("s", ["AA", "BB", "CC", "ABAB", "BCBC", ""])
def test_removable_blocks_reduce_to_nothing(s):
    assert reduce_weasel(s) == ""


def test_b_moves_past_neighbours():
    assert weasels_equivalent("AB", "BA")
    assert weasels_equivalent("BC", "CB")


@pytest.mark.parametrize("block", ["AA", "BB", "CC", "ABAB", "BCBC"])
@pytest.mark.parametrize("word", ["ACB", "CAB", "BBAC", "A"])
def test_inserting_block_keeps_equivalence(word, block):
    for pos in range(len(word) + 1):
        assert weasels_equivalent(word, word[:pos] + block + word[pos:])


def test_parity_of_letters_distinguishes():
    assert not weasels_equivalent("A", "C")
    assert not weasels_equivalent("AC", "CA")


@pytest.mark.parametrize("u,v", [("ACB", "BCA"), ("AAB", "B"), ("CAC", "ACA")])
def test_equivalence_is_symmetric(u, v):
    assert weasels_equivalent(u, v) == weasels_equivalent(v, u)


def test_reduction_is_idempotent():
    for s in ["ABCABC", "CBACBA", "BACCAB"]:
        once = reduce_weasel(s)
        assert reduce_weasel(once) == once


@pytest.mark.parametrize("s", ["aab", "abc", "xyzzy", "abcab", "aabb", "dcba"])
def test_witness_is_substring_with_even_count(s):
    witness = even_substring_witness(s)
    assert witness in s
    assert len(_distinct_substrings(witness)) % 2 == 0


def test_witness_prefers_last_pair():
    assert even_substring_witness("aabb") == "bb"


@pytest.mark.parametrize("s", ["a", "ab", "abab", "xyxyx"])
def test_alternating_strings_have_no_witness(s):
    assert even_substring_witness(s) is None


def test_center_sign_lines_fill_width():
    words = ["a", "bb", "ccc", "d"]
    lines = center_sign(words, 6)
    assert all(len(line) == 6 for line in lines)
    assert [line.strip(".") for line in lines] == words


def test_center_sign_alternates_uneven_padding():
    assert center_sign(["a", "b"], 4) == [".a..", "..b."]


def test_center_sign_rejects_wide_word():
    with pytest.raises(ValueError):
        center_sign(["toolong"], 3)


def test_can_replace_needs_both_digits():
    assert not can_replace("11", "0")
    assert can_replace("01", "1")


@pytest.mark.parametrize("given", ["0101", "0011", "1110"])
def test_can_replace_one_order_per_merge(given):
    zeros = given.count("0")
    ones = given.count("1")
    # Removing all ones but the last, then nothing is left to pair: always fine.
    orders = "0" * (ones - 1) + "1" * zeros if ones else ""
    if len(orders) == len(given) - 1:
        assert can_replace(given, orders)
    assert not can_replace(given, "0" * (len(given) - 1)) or ones > len(given) - 1 or zeros >= 1


def test_can_replace_length_mismatch():
    with pytest.raises(ValueError):
        can_replace("0101", "0")