from collections import Counter
from itertools import combinations

import pytest

from algokit.collections_problems import (
    balloon_count,
    can_equate_multisets,
    digital_logarithm_ops,
    disjoint_pairs,
    diverse_matrix,
    double_strings,
    even_positions_cost,
    highway_exits,
    letter_string_pairs,
    longest_strike,
    max_candies_eaten,
    seating_inconvenience,
    subtraction_possible,
    task_durations,
    three_region_cells,
    train_queries,
    word_game_scores,
)


def test_seating_descending_has_no_inconvenience():
    assert seating_inconvenience([9, 7, 4, 2]) == 0


def test_seating_strictly_ascending_counts_every_pair():
    values = [1, 3, 5, 8, 10]
    assert seating_inconvenience(values) == len(list(combinations(values, 2)))


def test_seating_forward_and_reverse_cover_unequal_pairs():
    values = [4, 1, 4, 2, 7, 1]
    unequal = sum(1 for a, b in combinations(values, 2) if a != b)
    assert seating_inconvenience(values) + seating_inconvenience(values[::-1]) == unequal


def test_subtraction_possible_cases():
    assert subtraction_possible([5, 5 + 4], 4) is True
    assert subtraction_possible([3, 8], 0) is True
    assert subtraction_possible([1, 2], 10) is False
    assert subtraction_possible([], 0) is False


def test_letter_string_pairs_identical_strings_do_not_pair():
    assert letter_string_pairs(["ab", "ab", "ab"]) == 0


def test_letter_string_pairs_one_difference():
    assert letter_string_pairs(["ab", "ac"]) == 1


def test_letter_string_pairs_is_order_independent():
    strings = ["ab", "cb", "db", "aa", "cc", "ac"]
    assert letter_string_pairs(strings) == letter_string_pairs(strings[::-1])


def test_letter_string_pairs_rejects_bad_length():
    with pytest.raises(ValueError):
        letter_string_pairs(["abc"])


def test_max_candies_single_candy():
    assert max_candies_eaten([5]) == 0


def test_max_candies_equal_weights_even_count_eats_all():
    weights = [3] * 6
    assert max_candies_eaten(weights) == len(weights)


def test_max_candies_never_exceeds_total():
    weights = [2, 1, 4, 2, 4, 1, 3, 5]
    assert 0 <= max_candies_eaten(weights) <= len(weights)


def test_longest_strike_none_when_no_value_frequent():
    assert longest_strike([1, 2, 3], 2) is None


def test_longest_strike_single_value():
    assert longest_strike([6, 6, 6], 3) == (6, 6)


def test_longest_strike_picks_longer_run():
    assert longest_strike([1, 2, 5, 6, 7], 1) == (5, 7)


def test_longest_strike_respects_k():
    values = list(range(3, 8)) * 2 + [8]
    assert longest_strike(values, 2) == (3, 7)


def test_task_durations_contiguous_chain_sums_to_span():
    starts, finishes = [0, 2, 4], [2, 4, 7]
    result = task_durations(starts, finishes)
    assert len(result) == len(starts)
    assert sum(result) == finishes[-1] - starts[0]


def test_task_durations_length_mismatch():
    with pytest.raises(ValueError):
        task_durations([1, 2], [3])


def test_train_queries_example():
    stations = [3, 1, 3, 5, 9]
    assert train_queries(stations, [(3, 1), (1, 3), (9, 3), (4, 3)]) == [
        True,
        True,
        False,
        False,
    ]


def test_can_equate_multisets_identical():
    assert can_equate_multisets([4, 7, 9], [9, 4, 7]) is True


def test_can_equate_multisets_doubled_second():
    first = [3, 5, 12]
    assert can_equate_multisets(first, [2 * x for x in first]) is True


def test_can_equate_multisets_odd_larger():
    assert can_equate_multisets([3], [1]) is False


def test_can_equate_multisets_length_mismatch():
    with pytest.raises(ValueError):
        can_equate_multisets([1, 2], [1])


def test_balloon_count_distinct_and_repeated():
    assert balloon_count("ABCD") == 2 * len("ABCD")
    assert balloon_count("AAAAA") == len("AAAAA") + 1


def test_double_strings_properties():
    strings = ["a", "b", "ab", "ba"]
    result = double_strings(strings)
    assert len(result) == len(strings)
    assert result[0] == "0" and result[1] == "0"
    assert result[2] == "1" and result[3] == "1"


def test_word_game_scores_all_distinct_and_all_shared():
    assert word_game_scores(["a", "b"], ["c", "d"], ["e", "f"]) == (6, 6, 6)
    assert word_game_scores(["x"], ["x"], ["x"]) == (0, 0, 0)


def test_digital_logarithm_identical_arrays():
    assert digital_logarithm_ops([12, 345, 6], [6, 345, 12]) == 0


def test_digital_logarithm_single_operation():
    assert digital_logarithm_ops([10], [2]) == 1


def test_digital_logarithm_symmetric():
    a, b = [1, 1000, 55, 7], [4, 3, 2, 999]
    assert digital_logarithm_ops(a, b) == digital_logarithm_ops(b, a)


def test_diverse_matrix_single_cell_impossible():
    assert diverse_matrix([[1]]) is None


def test_diverse_matrix_moves_every_value():
    matrix = [[1, 2, 3], [4, 5, 6]]
    result = diverse_matrix(matrix)
    assert sorted(v for row in result for v in row) == sorted(
        v for row in matrix for v in row
    )
    assert all(
        a != b for ra, rb in zip(matrix, result) for a, b in zip(ra, rb)
    )


def test_diverse_matrix_rejects_ragged():
    with pytest.raises(ValueError):
        diverse_matrix([[1, 2], [3]])


def test_three_region_cells_open_grid():
    assert three_region_cells("......", "......") == 0


def test_three_region_cells_pattern_is_symmetric():
    assert three_region_cells("...", "x.x") == three_region_cells("x.x", "...") == 1


def test_three_region_cells_length_mismatch():
    with pytest.raises(ValueError):
        three_region_cells("...", "..")


def test_even_positions_cost_adjacent_pairs():
    k = 4
    assert even_positions_cost("()" * k) == k
    assert even_positions_cost("_)" * k) == k


def test_highway_exits():
    stations = ["s1", "s2", "s3", "s4", "s5"]
    result = highway_exits(
        stations, [("s1", "s5"), ("s2", "s3"), ("s4", "s4"), ("s5", "s1")]
    )
    assert result == [len(stations) - 2, 0, 0, len(stations) - 2]


def test_disjoint_pairs():
    distinct = [[1, 2], [3, 4], [5, 6], [7, 8]]
    assert disjoint_pairs(distinct) == len(list(combinations(distinct, 2)))
    assert disjoint_pairs([[1, 2], [1, 3], [1, 4]]) == 0


def test_disjoint_pairs_counts_complement_of_sharing():
    groups = [[1, 2, 3], [3, 4], [5], [5, 6], [7]]
    sharing = 2
    assert disjoint_pairs(groups) == len(list(combinations(groups, 2))) - sharing
    assert Counter(map(len, groups))[1] == 2