"""Quartile and outlier statistics over directory entry name lengths.

These helpers back the statistical truncation mode: names whose length is an
upper outlier (Tukey fences, ``Q3 + 1.5 * IQR``) are candidates for
shortening. All arithmetic happens in floats so the lower fence can go
negative without wrapping.
"""

from __future__ import annotations

from collections.abc import Sequence

IQR_FENCE_FACTOR = 1.5


def median(values: Sequence[int]) -> float | None:
    """Return the median of already-sorted ``values`` or ``None`` when empty."""
    count = len(values)
    if count == 0:
        return None
    half = count // 2
    if count % 2 == 0:
        return (float(values[half - 1]) + float(values[half])) / 2.0
    return float(values[half])


def quartiles(values: Sequence[int], is_sorted: bool = False) -> tuple[float, float, float] | None:
    """Return ``(Q1, Q2, Q3)`` for ``values``.

    Sequences shorter than two yield ``None``. For odd lengths the middle
    element belongs to neither half.
    """
    ordered = list(values) if is_sorted else sorted(values)
    count = len(ordered)
    if count < 2:
        return None

    half = count // 2
    upper_start = half if count % 2 == 0 else half + 1
    q1 = median(ordered[:half])
    q2 = median(ordered)
    q3 = median(ordered[upper_start:])
    if q1 is None or q2 is None or q3 is None:
        return None
    return q1, q2, q3


def _fences(ordered: Sequence[int]) -> tuple[float, float] | None:
    quartile_values = quartiles(ordered, is_sorted=True)
    if quartile_values is None:
        return None
    q1, _q2, q3 = quartile_values
    spread = IQR_FENCE_FACTOR * (q3 - q1)
    return q1 - spread, q3 + spread


def outliers(values: Sequence[int], is_sorted: bool = False) -> tuple[list[int], list[int]] | None:
    """Split ``values`` into ``(lower_outliers, upper_outliers)``.

    Returns ``None`` when ``values`` is empty, too short for quartiles, or
    contains no outlier on either side. Both lists keep ascending order.
    """
    if not values:
        return None
    ordered = list(values) if is_sorted else sorted(values)
    fences = _fences(ordered)
    if fences is None:
        return None
    lower_bound, upper_bound = fences

    lower: list[int] = []
    upper: list[int] = []
    for value in ordered:
        if value < lower_bound:
            lower.append(value)
        elif value > upper_bound:
            upper.append(value)

    if not lower and not upper:
        return None
    return lower, upper


def upper_fence(values: Sequence[int], is_sorted: bool = False) -> float | None:
    """Return the upper Tukey fence of ``values``, or ``None`` below two values."""
    ordered = list(values) if is_sorted else sorted(values)
    fences = _fences(ordered)
    return None if fences is None else fences[1]


def average(values: Sequence[int]) -> float:
    """Arithmetic mean of ``values``; ``0.0`` for an empty sequence."""
    if not values:
        return 0.0
    return sum(values) / len(values)


__all__ = [
    "IQR_FENCE_FACTOR",
    "median",
    "quartiles",
    "outliers",
    "upper_fence",
    "average",
]
