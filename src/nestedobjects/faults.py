#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Oct 17 2026
@author: ike
"""


# 1. Standard library imports
import re


NULL_FAULT_TYPES = (AttributeError, TypeError)
NULL_FAULT_MARKERS = ("NoneType", "NullObject")
NULL_FAULT_PATTERN = re.compile(
    r"\b(" + "|".join(NULL_FAULT_MARKERS) + r")\b")


def is_null_dereference(
        exc: BaseException
):
    """Check if an exception was raised by reading through a None reference.

    Parameters
    ----------
    exc : BaseException
        Exception raised while evaluating an accessor.

    Returns
    -------
    bool
        True if `exc` is an AttributeError or TypeError caused by None or a
        null object, such as ``None.name``, ``None[0]``, ``None()``,
        ``len(None)``, ``"a" + None`` or ``null_object > 3``.

    Notes
    -----
    An AttributeError raised on a real object (e.g. a misspelt attribute)
    carries that object in `obj` and is never a null-dereference.

    Examples
    --------
    Faults caused by None.
    >>> is_null_dereference(
    ...     AttributeError("'NoneType' object has no attribute 'name'"))
    True
    >>> is_null_dereference(
    ...     TypeError("'NoneType' object is not subscriptable"))
    True
    >>> is_null_dereference(
    ...     TypeError("list indices must be integers or slices, not NoneType"))
    True

    Faults unrelated to None.
    >>> is_null_dereference(TypeError("'int' object is not subscriptable"))
    False
    >>> is_null_dereference(ZeroDivisionError("division by zero"))
    False
    """
    if not isinstance(exc, NULL_FAULT_TYPES):
        return False
    elif isinstance(exc, AttributeError) and getattr(
            exc, "obj", None) is not None:
        return False

    return NULL_FAULT_PATTERN.search(str(exc)) is not None
