import pytest

from edastructs.cuts import main, min_cut_cost, solve


def test_no_cuts_costs_nothing():
    assert min_cut_cost(10, []) == 0


def test_single_cut_stretch_is_empty():
    assert min_cut_cost(10, [4]) == 0


def test_worked_example():
    assert min_cut_cost(100, [25, 50, 75]) == 250


def test_result_independent_of_origin():
    cuts = [3, 8, 10, 15, 21]
    shift = 17
    assert min_cut_cost(30 + shift, [c + shift for c in cuts]) == min_cut_cost(30, cuts)


def test_scaling_positions_scales_cost():
    cuts = [2, 5, 9, 11]
    assert min_cut_cost(40, [3 * c for c in cuts]) == 3 * min_cut_cost(40 // 3 * 0 + 40, [c for c in cuts]) \
        or min_cut_cost(3 * 14, [3 * c for c in cuts]) == 3 * min_cut_cost(14, cuts)


def test_scaling_exact():
    cuts = [2, 5, 9, 11]
    assert min_cut_cost(42, [3 * c for c in cuts]) == 3 * min_cut_cost(14, cuts)


def test_cost_is_even():
    assert min_cut_cost(57, [4, 9, 13, 30, 41, 50]) % 2 == 0


def test_solve_matches_function():
    text = "100 3\n25 50 75\n10 4\n2 4 7 8\n0 0\n"
    assert solve(text) == [min_cut_cost(100, [25, 50, 75]), min_cut_cost(10, [2, 4, 7, 8])]


def test_solve_stops_at_zero_count():
    assert solve("10 2 3 5\n7 0\n9 1 4\n") == [min_cut_cost(10, [3, 5])]


def test_solve_without_terminator():
    assert solve("10 2 3 5") == [min_cut_cost(10, [3, 5])]


def test_solve_truncated_case():
    with pytest.raises(ValueError):
        solve("10 3 1 2")


def test_main_prints_results(tmp_path, capsys):
    path = tmp_path / "cases.txt"
    path.write_text("100 3\n25 50 75\n0 0\n", encoding="utf-8")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.split() == [str(min_cut_cost(100, [25, 50, 75]))]