# -*- encoding: utf-8 -*-


def are_close(num1: float, num2: float, epsilon=1e-6) -> bool:
    """Return True if the two numbers differ by less than `epsilon`"""
    return abs(num1 - num2) < epsilon
