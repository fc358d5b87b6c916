import pytest

from unitcalc.combinatorics import arrangement, combination, factorial, main


def test_factorial_of_zero_is_one():
    assert factorial(0) == 1


def test_factorial_recurrence():
    for n in range(1, 15):
        assert factorial(n) == n * factorial(n - 1)


def test_factorial_negative_raises():
    with pytest.raises(ValueError):
        factorial(-1)


def test_combination_known_value():
    assert combination(5, 2) == 10


@pytest.mark.parametrize("n,k", [(5, 1), (6, 2), (10, 3), (12, 7)])
def test_combination_symmetry(n, k):
    assert combination(n, k) == combination(n, n - k)


@pytest.mark.parametrize("n,k", [(4, 2), (7, 3), (9, 5)])
def test_arrangement_relates_to_combination(n, k):
    assert arrangement(n, k) == combination(n, k) * factorial(k)


def test_arrangement_with_one_element_is_n():
    assert arrangement(8, 1) == 8


@pytest.mark.parametrize("n,k", [(1, 0), (3, 3), (3, 0), (2, 5), (0, 0), (5, -1)])
def test_invalid_arguments_raise(n, k):
    with pytest.raises(ValueError):
        combination(n, k)
    with pytest.raises(ValueError):
        arrangement(n, k)


def test_main_combination(capsys):
    assert main(["5", "2", "1"]) == 0
    assert "combination C(5, 2) = 10" in capsys.readouterr().out


def test_main_arrangement_matches_function(capsys):
    assert main(["6", "2", "2"]) == 0
    assert f"arrangement A(6, 2) = {arrangement(6, 2)}" in capsys.readouterr().out


def test_main_bad_option(capsys):
    assert main(["5", "2", "3"]) == 1
    assert "error!" in capsys.readouterr().out


def test_main_bad_arguments(capsys):
    assert main(["2", "2", "1"]) == 1
    assert "error" in capsys.readouterr().out


def test_main_prompts_for_missing_values(monkeypatch, capsys):
    answers = iter(["5", "2", "1"])
    monkeypatch.setattr("builtins.input", lambda *a: next(answers))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "entered n elements" in out
    assert "combination C(5, 2) = 10" in out