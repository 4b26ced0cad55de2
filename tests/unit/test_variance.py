import pytest

from src.app.utils.variance import calculate_variance


def test_empty_input():
    assert calculate_variance([]) == 0


def test_constant_values():
    assert calculate_variance([1, 1, 1]) == 0


def test_population_variance():
    assert calculate_variance([2, 4, 4, 4, 5, 5, 7, 9]) == pytest.approx(4.0)
