"""Set operations over sorted sequences of epoch-ms time points.

Inputs to :func:`intersect_arrays` and :func:`union_arrays` must already be
sorted ascending without duplicates; this is not checked. Inputs are never
modified.
"""

from collections.abc import Sequence
from functools import reduce


def intersect_arrays(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return the points present in both sorted sequences."""
    result: list[int] = []
    i = j = 0
    while i < len(a) and j < len(b):
        if a[i] < b[j]:
            i += 1
        elif a[i] > b[j]:
            j += 1
        else:
            result.append(a[i])
            i += 1
            j += 1
    return result


def union_arrays(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Merge two sorted sequences, emitting shared points once."""
    result: list[int] = []
    i = j = 0
    while i < len(a) and j < len(b):
        if a[i] < b[j]:
            result.append(a[i])
            i += 1
        elif a[i] > b[j]:
            result.append(b[j])
            j += 1
        else:
            result.append(a[i])
            i += 1
            j += 1
    result.extend(a[i:])
    result.extend(b[j:])
    return result


def sort_and_deduplicate(values: Sequence[int]) -> list[int]:
    """Return the distinct values in ascending order."""
    result: list[int] = []
    for value in sorted(values):
        if not result or value != result[-1]:
            result.append(value)
    return result


intersect = intersect_arrays
union = union_arrays
dedupe = sort_and_deduplicate


def intersection(*sequences: Sequence[int]) -> list[int]:
    """Intersect any number of sorted sequences (equivalent to chaining)."""

    if not sequences:
        raise ValueError(
            f"intersection() requires at least one sequence argument.\n"
            f"Example: intersection(layer_a_times, layer_b_times)"
        )
    return reduce(intersect_arrays, sequences[1:], list(sequences[0]))


def union_all(*sequences: Sequence[int]) -> list[int]:
    """Union any number of sorted sequences (equivalent to chaining)."""

    if not sequences:
        raise ValueError(
            f"union_all() requires at least one sequence argument.\n"
            f"Example: union_all(layer_a_times, layer_b_times, layer_c_times)"
        )
    return reduce(union_arrays, sequences[1:], list(sequences[0]))
