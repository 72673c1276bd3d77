import pytest

from puzzlekit.moderate import (
    build_pattern,
    diving_board_lengths,
    largest_contiguous_sum,
    master_mind_score,
    sub_sort,
    year_with_most_alive,
)


def test_year_counts_both_birth_and_death_year():
    assert year_with_most_alive([(1908, 1909), (1909, 1910)]) == (1909, 2)


def test_year_person_dying_before_birth_year_does_not_overlap():
    year, count = year_with_most_alive([(1900, 1904), (1905, 1910)])
    assert (year, count) == (1900, 1)


def test_year_same_year_death_and_birth_overlap():
    assert year_with_most_alive([(1900, 1905), (1905, 1910)]) == (1905, 2)


def test_year_count_never_exceeds_people():
    people = [(12, 15), (20, 90), (10, 98), (1, 72), (10, 98), (23, 82),
              (13, 98), (90, 98), (83, 99), (75, 94)]
    year, count = year_with_most_alive(people)
    alive = sum(1 for birth, death in people if birth <= year <= death)
    assert alive == count
    assert count <= len(people)


def test_year_errors():
    with pytest.raises(ValueError):
        year_with_most_alive([])
    with pytest.raises(ValueError):
        year_with_most_alive([(1950, 1940)])


def test_diving_board_bounds():
    lengths = diving_board_lengths(8, 3, 25)
    assert lengths == sorted(lengths)
    assert len(lengths) == 26
    assert lengths[0] == 25 * 3
    assert lengths[-1] == 25 * 8


def test_diving_board_equal_planks_single_length():
    assert diving_board_lengths(4, 4, 5) == [20]


def test_diving_board_zero_and_negative():
    assert diving_board_lengths(8, 3, 0) == []
    with pytest.raises(ValueError):
        diving_board_lengths(8, 3, -1)


def test_master_mind_documented_example():
    assert master_mind_score("RGBY", "GGRR") == (1, 1)


def test_master_mind_exact_and_all_misplaced():
    assert master_mind_score("RGBY", "RGBY") == (4, 0)
    assert master_mind_score("RGBY", "YBGR") == (0, 4)


def test_master_mind_hit_not_counted_as_pseudo():
    hits, pseudo = master_mind_score("RGBY", "RGGB")
    assert hits + pseudo <= 4
    assert hits == 2


def test_master_mind_length_mismatch():
    with pytest.raises(ValueError):
        master_mind_score("RGBY", "RGB")


def test_sub_sort_documented_example():
    assert sub_sort([1, 2, 4, 7, 10, 11, 8, 12, 5, 6, 16, 18, 19]) == (3, 9)


def test_sub_sort_already_sorted():
    assert sub_sort([1, 2, 3, 3, 4, 6, 7]) is None
    assert sub_sort([]) is None


@pytest.mark.parametrize(
    "values",
    [
        [1, 2, 4, 7, 10, 11, 8, 6, 12, 5, 6, 16, 18, 19],
        [3, 2, 1],
        [1, 3, 2, 4],
        [5, 1, 2, 3, 4],
    ],
)
def test_sub_sort_sorting_range_sorts_all(values):
    start, end = sub_sort(values)
    fixed = values[:start] + sorted(values[start:end + 1]) + values[end + 1:]
    assert fixed == sorted(values)
    assert sub_sort(fixed) is None


def test_largest_contiguous_sum_documented_example():
    assert largest_contiguous_sum([2, -8, 3, -2, 4, -10]) == 5


def test_largest_contiguous_sum_all_negative_is_max_element():
    values = [-7, -3, -9]
    assert largest_contiguous_sum(values) == max(values)


def test_largest_contiguous_sum_all_positive_is_total():
    values = [1, 2, 3, 4]
    assert largest_contiguous_sum(values) == sum(values)


def test_largest_contiguous_sum_empty():
    with pytest.raises(ValueError):
        largest_contiguous_sum([])


def test_build_pattern():
    assert build_pattern("cat", "go", "aabab") == "catcatgocatgo"
    assert build_pattern("cat", "go", "") == ""


def test_build_pattern_rejects_other_letters():
    with pytest.raises(ValueError):
        build_pattern("cat", "go", "abc")