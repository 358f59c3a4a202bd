import pytest

from contestkit.islands import memories_consistent


def _complement(n, memory):
    return [i for i in range(1, n + 1) if i not in set(memory)]


def test_no_memories_is_consistent():
    assert memories_consistent(4, []) is True


@pytest.mark.parametrize("memory", [[1], [2, 3], [1, 2, 3, 4], [], [4, 1]])
def test_single_memory_always_consistent(memory):
    assert memories_consistent(4, [memory]) is True


def test_island_between_two_others_breaks_pair():
    # After [1] and [2], island 3 sits between islands 1 and 2.
    assert memories_consistent(3, [[1], [2], [1, 2]]) is False


def test_consistent_chain_of_cuts():
    assert memories_consistent(3, [[1], [2], [1, 3]]) is True


@pytest.mark.parametrize(
    "memories",
    [
        [[1], [2], [1, 2]],
        [[1], [2], [1, 3]],
        [[1, 2], [3, 4], [1, 3]],
        [[1, 2], [2, 3]],
        [[1], [1, 2], [1, 2, 3]],
    ],
)
def test_complement_describes_same_cut(memories):
    n = 5
    flipped = [_complement(n, m) for m in memories]
    assert memories_consistent(n, memories) == memories_consistent(n, flipped)


@pytest.mark.parametrize(
    "memories",
    [
        [[1], [2], [1, 2]],
        [[1, 2], [3, 4], [1, 3]],
        [[1], [1, 2], [1, 2, 3]],
    ],
)
def test_repeating_memories_does_not_change_answer(memories):
    assert memories_consistent(5, memories) == memories_consistent(5, memories + memories)


def test_relabelling_islands_preserves_answer():
    memories = [[1], [2], [1, 2]]
    relabel = {1: 3, 2: 1, 3: 2}
    renamed = [[relabel[i] for i in m] for m in memories]
    assert memories_consistent(3, memories) == memories_consistent(3, renamed)


def test_once_inconsistent_stays_inconsistent():
    base = [[1], [2], [1, 2]]
    assert memories_consistent(3, base + [[3]]) == memories_consistent(3, base)


def test_negative_n_rejected():
    with pytest.raises(ValueError):
        memories_consistent(-1, [])