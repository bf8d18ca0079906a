#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Oct 17 2026
@author: ike
"""


# 1. Standard library imports
import warnings
from collections.abc import Mapping, Sized

# 2. Third-party library imports
import numpy as np
import pandas as pd

# 3. Local application / relative imports
from .classes.nullobject import NullObject


TEXT_TYPES = (str, bytes)
SEQUENCE_TYPES = (list, tuple)
PANDAS_TYPES = (pd.DataFrame, pd.Series, pd.Index)

# first matching type wins, ndarray precedes Sized since 0-d arrays have no len
EMPTY_RULES = {
    np.ndarray: lambda x: x.size == 0,
    PANDAS_TYPES: lambda x: x.empty,
    Sized: lambda x: len(x) == 0,
}


def is_null_value(
        value
):
    """Check if a value is None or a null object.

    Examples
    --------
    >>> from nestedobjects.classes.nullobject import null_object
    >>> is_null_value(None), is_null_value(null_object), is_null_value(0)
    (True, True, False)
    """
    return value is None or isinstance(value, NullObject)


def is_blank_value(
        value,
        stacklevel: int = 2
):
    """Check if a text value is null, empty, or whitespace only.

    Parameters
    ----------
    value : str | bytes | None
        Text to check.
    stacklevel : int, optional
        Stack level of the UserWarning raised for non-text values.
        Defaults to 2, in which case the warning points at the caller.

    Returns
    -------
    bool
        True if `value` is null or has no non-whitespace characters.
        Non-text values are never blank and raise a UserWarning.

    Examples
    --------
    >>> is_blank_value(None)
    True
    >>> is_blank_value("")
    True
    >>> is_blank_value(" \\t\\n")
    True
    >>> is_blank_value("bob")
    False
    >>> is_blank_value("  bob  ")
    False
    """
    if is_null_value(value):
        return True
    elif not isinstance(value, TEXT_TYPES):
        warnings.warn(
            f"Blank check on non-text {type(value).__name__} value",
            stacklevel=stacklevel)
        return False

    return len(value.strip()) == 0


def is_empty_value(
        value
):
    """Check if a value is null or a container with zero elements.

    Parameters
    ----------
    value
        Value to check. Arrays, pandas objects, text, and any sized
        container (sequence, mapping, set) are checked for elements.

    Returns
    -------
    bool
        True if `value` is null or an empty container. Scalars and other
        objects without a length are never empty.

    Examples
    --------
    >>> is_empty_value(None)
    True
    >>> is_empty_value([]), is_empty_value({}), is_empty_value("")
    (True, True, True)
    >>> is_empty_value(np.zeros((3, 0)))
    True
    >>> is_empty_value(pd.DataFrame(columns=["a", "b"]))
    True
    >>> is_empty_value((0,)), is_empty_value({"a": None})
    (False, False)
    >>> is_empty_value(0), is_empty_value(np.float64(0))
    (False, False)
    """
    if is_null_value(value):
        return True

    for types, rule in EMPTY_RULES.items():
        if isinstance(value, types):
            return bool(rule(value))

    return False


def null_safe_equals(
        one,
        two
):
    """Compare two values for equality, treating null as equal only to null.

    Parameters
    ----------
    one, two
        Values to compare. Arrays compare by shape and elements, pandas
        objects by index and values. Lists, tuples, and mappings holding
        arrays or pandas objects compare element by element.

    Returns
    -------
    bool
        True if `one` and `two` are equal.

    Examples
    --------
    >>> null_safe_equals(None, None), null_safe_equals(None, "a")
    (True, False)
    >>> null_safe_equals("a", "a"), null_safe_equals("a", "b")
    (True, False)
    >>> null_safe_equals(np.arange(3), np.arange(3))
    True
    >>> null_safe_equals(pd.Series([1, 2]), pd.Series([1, 3]))
    False
    >>> null_safe_equals([np.arange(3)], [np.arange(3)])
    True
    """
    if one is two:
        return True
    elif is_null_value(one) or is_null_value(two):
        return is_null_value(one) and is_null_value(two)
    elif isinstance(one, np.ndarray) or isinstance(two, np.ndarray):
        return bool(np.array_equal(one, two))
    elif isinstance(one, PANDAS_TYPES):
        return bool(one.equals(two))
    elif isinstance(two, PANDAS_TYPES):
        return bool(two.equals(one))

    try:
        return bool(one == two)
    except ValueError:
        # ambiguous truth value from arrays or frames held in a container
        if isinstance(one, Mapping) and isinstance(two, Mapping):
            return one.keys() == two.keys() and all(
                null_safe_equals(one[k], two[k]) for k in one)
        elif isinstance(one, SEQUENCE_TYPES) and isinstance(
                two, SEQUENCE_TYPES):
            return type(one) is type(two) and len(one) == len(two) and all(
                null_safe_equals(a, b) for a, b in zip(one, two))
        raise
