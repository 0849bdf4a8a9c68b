import random

import pytest

from algokit.segment_trees import (
    BracketSegmentTree,
    MaxPairSegmentTree,
    MinIndexSegmentTree,
    SumSegmentTree,
)


def test_sum_tree_worked_example():
    tree = SumSegmentTree([1, 2, 3, 4, 5])
    assert tree.query(1, 5) == 15
    tree.add(2, 5)
    assert tree.query(1, 5) == 20


def test_sum_tree_matches_slices_after_updates():
    rng = random.Random(7)
    values = [rng.randint(-50, 50) for _ in range(23)]
    tree = SumSegmentTree(values)
    for _ in range(200):
        if rng.random() < 0.4:
            index = rng.randint(1, len(values))
            delta = rng.randint(-20, 20)
            values[index - 1] += delta
            tree.add(index, delta)
        else:
            left = rng.randint(1, len(values))
            right = rng.randint(left, len(values))
            assert tree.query(left, right) == sum(values[left - 1 : right])


def test_sum_tree_rejects_bad_ranges():
    tree = SumSegmentTree([1, 2, 3])
    with pytest.raises(IndexError):
        tree.query(0, 2)
    with pytest.raises(IndexError):
        tree.add(4, 1)
    with pytest.raises(ValueError):
        tree.query(3, 2)


def test_max_pair_worked_example():
    tree = MaxPairSegmentTree([1, 2, 3, 4, 5])
    assert tree.max_pair_sum(2, 5) == 9
    assert tree.max_pair_sum(2, 4) == 7
    tree.assign(1, 8)
    assert tree.max_pair_sum(1, 5) == 13


def test_max_pair_matches_two_largest():
    rng = random.Random(11)
    values = [rng.randint(0, 100) for _ in range(17)]
    tree = MaxPairSegmentTree(values)
    for _ in range(200):
        if rng.random() < 0.4:
            index = rng.randint(1, len(values))
            value = rng.randint(0, 100)
            values[index - 1] = value
            tree.assign(index, value)
        else:
            left = rng.randint(1, len(values) - 1)
            right = rng.randint(left + 1, len(values))
            top = sorted(values[left - 1 : right], reverse=True)
            assert tree.max_pair_sum(left, right) == top[0] + top[1]


def test_max_pair_with_equal_maxima():
    tree = MaxPairSegmentTree([4, 4, 1])
    assert tree.max_pair_sum(1, 3) == 8


def test_max_pair_needs_two_elements():
    tree = MaxPairSegmentTree([1, 2, 3])
    with pytest.raises(ValueError):
        tree.max_pair_sum(2, 2)
    with pytest.raises(IndexError):
        tree.assign(0, 5)


BRACKETS = "(())((())()())("


@pytest.mark.parametrize(
    ("left", "right", "expected"),
    [(2, 2, 0), (2, 3, 2), (1, 6, 4), (2, 9, 6), (1, 13, 12)],
)
def test_bracket_worked_example(left, right, expected):
    tree = BracketSegmentTree(BRACKETS)
    assert tree.longest_balanced(left, right) == expected


def test_bracket_fully_balanced_string():
    text = "(()())"
    tree = BracketSegmentTree(text)
    assert tree.longest_balanced(1, len(text)) == len(text)


def test_bracket_answers_are_even_and_bounded():
    rng = random.Random(3)
    text = "".join(rng.choice("()") for _ in range(40))
    tree = BracketSegmentTree(text)
    for _ in range(100):
        left = rng.randint(1, len(text))
        right = rng.randint(left, len(text))
        segment = text[left - 1 : right]
        answer = tree.longest_balanced(left, right)
        assert answer % 2 == 0
        assert answer <= 2 * min(segment.count("("), segment.count(")"))


def test_bracket_rejects_out_of_range():
    tree = BracketSegmentTree("()")
    with pytest.raises(IndexError):
        tree.longest_balanced(1, 3)


def test_min_index_worked_example():
    tree = MinIndexSegmentTree([1, 2, 3, 4, 5])
    assert tree.query(2, 5) == 2
    tree.assign(3, 1)
    assert tree.query(1, 5) == 1
    assert tree.query(2, 5) == 3


def test_min_index_prefers_smallest_position():
    rng = random.Random(5)
    values = [rng.randint(-5, 5) for _ in range(19)]
    tree = MinIndexSegmentTree(values)
    for _ in range(200):
        if rng.random() < 0.4:
            index = rng.randint(1, len(values))
            value = rng.randint(-5, 5)
            values[index - 1] = value
            tree.assign(index, value)
        else:
            left = rng.randint(1, len(values))
            right = rng.randint(left, len(values))
            segment = values[left - 1 : right]
            assert tree.query(left, right) == left + segment.index(min(segment))


def test_min_index_rejects_reversed_range():
    tree = MinIndexSegmentTree([3, 1, 2])
    with pytest.raises(ValueError):
        tree.query(3, 1)