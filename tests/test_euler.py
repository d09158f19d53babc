import math

import pytest

from tinkerkit.euler import (
    P13_NUMBERS,
    bsearch_lbound,
    column_sums,
    count_large_combinations,
    gen_log_facs,
    large_sum_prefix,
    log_choose,
    main,
)


def test_column_sums_small():
    assert column_sums(["12", "34"]) == [6, 4]


def test_column_sums_reconstruct_total():
    numbers = ["907", "123", "555", "999"]
    sums = column_sums(numbers)
    assert sum(s * 10**i for i, s in enumerate(sums)) == sum(int(x) for x in numbers)


def test_column_sums_rejects_empty_and_short():
    with pytest.raises(ValueError):
        column_sums([])
    with pytest.raises(ValueError):
        column_sums(["123", "4"])


def test_column_sums_rejects_non_digits():
    with pytest.raises(ValueError):
        column_sums(["1a"])


def test_large_sum_full_width_matches_total():
    width = len(P13_NUMBERS[0])
    carry, digits = large_sum_prefix(P13_NUMBERS, width)
    assert len(digits) == width
    assert int(f"{carry}{digits}") == sum(int(x) for x in P13_NUMBERS)


def test_large_sum_prefix_is_leading_digits():
    total = str(sum(int(x) for x in P13_NUMBERS))
    carry, digits = large_sum_prefix(P13_NUMBERS)
    assert f"{carry}{digits}" == total[: len(str(carry)) + 8]


def test_large_sum_prefix_too_many_digits():
    with pytest.raises(ValueError):
        large_sum_prefix(["12"], 3)


def test_p13_numbers_column_sums():
    assert len(P13_NUMBERS) == 100
    assert all(len(x) == 50 and x.isdigit() for x in P13_NUMBERS)
    sums = column_sums(P13_NUMBERS)
    assert len(sums) == 50
    assert all(0 <= s <= 900 for s in sums)


def test_gen_log_facs_matches_factorials():
    facs = gen_log_facs(10)
    assert len(facs) == 11
    assert facs[0] == 0.0
    for k, value in enumerate(facs):
        assert 10**value == pytest.approx(math.factorial(k))


def test_log_choose_matches_comb():
    facs = gen_log_facs(20)
    for k in range(21):
        assert 10 ** log_choose(facs, 20, k) == pytest.approx(math.comb(20, k))


def test_log_choose_k_equals_n_and_error():
    facs = gen_log_facs(5)
    assert log_choose(facs, 5, 5) == 0.0
    with pytest.raises(ValueError):
        log_choose(facs, 3, 4)


def test_bsearch_lbound_finds_boundary():
    values = [0, 1, 1, 2, 3, 5, 8, 13, 21, 34, 55]
    index = bsearch_lbound(0, len(values) - 1, lambda i: values[i], 6)
    assert values[index] <= 6 < values[index + 1]


def test_count_first_million():
    assert count_large_combinations(23, 6.0) == 4


@pytest.mark.parametrize("max_n", [22, 30, 100])
def test_count_matches_exact_binomials(max_n):
    exact = sum(
        1 for n in range(1, max_n + 1) for k in range(n + 1) if math.comb(n, k) > 10**6
    )
    assert count_large_combinations(max_n, 6.0) == exact


def test_main_prints_results(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    carry, digits = large_sum_prefix(P13_NUMBERS)
    assert lines[0] == f"{carry}{digits}"
    assert lines[1] == f"Finale: {count_large_combinations()}"