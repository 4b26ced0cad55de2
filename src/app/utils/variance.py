from typing import Sequence


def calculate_variance(data: Sequence[float]) -> float:
    """
    Population variance of a sequence of numbers.

    Args:
        data: Numbers to measure

    Returns:
        Mean of squared deviations from the mean, 0 for an empty sequence
    """
    if len(data) == 0:
        return 0

    mean = sum(data) / len(data)
    squared_differences = [(value - mean) ** 2 for value in data]
    return sum(squared_differences) / len(data)
