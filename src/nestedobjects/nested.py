#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Oct 17 2026
@author: ike

Null-safe evaluation of nested attribute chains.

Each function takes an accessor, a zero-argument callable such as
``lambda: order.customer.address.city``, and invokes it exactly once. A fault
caused by reading through None anywhere along the chain is converted to a
None result. Any other exception propagates to the caller unchanged.
"""


# 1. Standard library imports
from typing import Callable

# 3. Local application / relative imports
from .faults import NULL_FAULT_TYPES, is_null_dereference
from .values import (
    is_null_value, is_blank_value, is_empty_value, null_safe_equals)


def _check_accessor(
        accessor
):
    if not callable(accessor):
        raise TypeError(f"Accessor {accessor!r} is not callable")


def get_or_null(
        accessor: Callable
):
    """Evaluate a nested attribute chain, returning None if it breaks.

    Parameters
    ----------
    accessor : Callable
        Zero-argument callable returning the value of a nested attribute,
        e.g. ``lambda: user.address.city``.

    Returns
    -------
    object | None
        Value returned by `accessor`, or None if `accessor` returned a null
        object or read through None during evaluation.

    Raises
    ------
    TypeError
        If `accessor` is not callable.
    Exception
        Any exception raised by `accessor` that is not a null-dereference.

    Examples
    --------
    >>> from types import SimpleNamespace as NS
    >>> user = NS(address=NS(city="Lyon"))
    >>> get_or_null(lambda: user.address.city)
    'Lyon'

    Broken links evaluate to None.
    >>> user.address = None
    >>> get_or_null(lambda: user.address.city) is None
    True
    >>> get_or_null(lambda: user.address["zip"][0]) is None
    True

    Other faults propagate.
    >>> get_or_null(lambda: 1 / 0)
    Traceback (most recent call last):
        ...
    ZeroDivisionError: division by zero
    """
    _check_accessor(accessor)
    try:
        value = accessor()
    except NULL_FAULT_TYPES as e:
        if is_null_dereference(e):
            return None
        raise

    return None if is_null_value(value) else value


def get_or_else(
        accessor: Callable,
        default
):
    """Evaluate a nested attribute chain, returning a default if it is null.

    Parameters
    ----------
    accessor : Callable
        Zero-argument callable returning the value of a nested attribute.
    default
        Value to return if `accessor` evaluates to None.

    Returns
    -------
    object
        Non-null value returned by `accessor`, otherwise `default`.

    Examples
    --------
    >>> get_or_else(lambda: None, "X")
    'X'
    >>> get_or_else(lambda: "Y", "X")
    'Y'
    >>> get_or_else(lambda: 0, 7)
    0
    """
    value = get_or_null(accessor)
    return default if value is None else value


def get_or_blank(
        accessor: Callable
):
    """Evaluate a nested text attribute, returning "" if it is null.

    Examples
    --------
    >>> get_or_blank(lambda: None.name)
    ''
    """
    return get_or_else(accessor, "")


def is_null(
        accessor: Callable
):
    """Check if a nested attribute chain evaluates to None.

    True both for a genuinely None value and for a chain that read through
    None during evaluation.

    Examples
    --------
    >>> is_null(lambda: None), is_null(lambda: None.name), is_null(lambda: 0)
    (True, True, False)
    """
    return get_or_null(accessor) is None


def is_not_null(
        accessor: Callable
):
    return not is_null(accessor)


def is_blank(
        accessor: Callable
):
    """Check if a nested text attribute is null, empty, or whitespace only.

    Parameters
    ----------
    accessor : Callable
        Zero-argument callable returning a str value.

    Returns
    -------
    bool
        True if the value is null, empty, or whitespace only.

    Examples
    --------
    >>> is_blank(lambda: None)
    True
    >>> is_blank(lambda: "")
    True
    >>> is_blank(lambda: " ")
    True
    >>> is_blank(lambda: "bob")
    False
    >>> is_blank(lambda: "  bob  ")
    False
    """
    return is_blank_value(get_or_blank(accessor), stacklevel=3)


def is_not_blank(
        accessor: Callable
):
    return not is_blank(accessor)


def is_empty(
        accessor: Callable
):
    """Check if a nested attribute is null or an empty container.

    Parameters
    ----------
    accessor : Callable
        Zero-argument callable returning any value.

    Returns
    -------
    bool
        True if the value is null, a null object, or a text, sequence,
        mapping, set, array, or pandas object with zero elements. Other
        non-null values are never empty.

    Examples
    --------
    >>> is_empty(lambda: None), is_empty(lambda: []), is_empty(lambda: {})
    (True, True, True)
    >>> is_empty(lambda: [None]), is_empty(lambda: 0)
    (False, False)
    """
    return is_empty_value(get_or_null(accessor))


def is_not_empty(
        accessor: Callable
):
    return not is_empty(accessor)


def is_equals(
        accessor_one: Callable,
        accessor_two: Callable
):
    """Check if two nested attributes are equal, treating null as equal.

    Parameters
    ----------
    accessor_one : Callable
        Zero-argument callable returning the first value.
    accessor_two : Callable
        Zero-argument callable returning the second value.

    Returns
    -------
    bool
        True if both values are null or equal by value.

    Examples
    --------
    >>> is_equals(lambda: None, lambda: None)
    True
    >>> is_equals(lambda: "a", lambda: "a")
    True
    >>> is_equals(lambda: "a", lambda: "b")
    False
    >>> is_equals(lambda: None.name, lambda: "a")
    False
    """
    _check_accessor(accessor_one)
    _check_accessor(accessor_two)
    return null_safe_equals(
        get_or_null(accessor_one), get_or_null(accessor_two))


def is_not_equals(
        accessor_one: Callable,
        accessor_two: Callable
):
    return not is_equals(accessor_one, accessor_two)
