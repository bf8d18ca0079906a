#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Oct 17 2026
@author: ike
"""


class NullObject:
    """Null class where all attribute, item, and function calls return self.

    Evaluates as an empty, falsy value. Accessors that return a `NullObject`
    are treated as returning None.

    Examples
    --------
    >>> null_object.owner.address["city"].upper()
    Null
    >>> bool(null_object), len(null_object), list(null_object)
    (False, 0, [])
    """
    __slots__ = ()

    def __getattr__(self, name):
        return self

    def __getitem__(self, key):
        return self

    def __call__(self, *args, **kwargs):
        return self

    def __bool__(self):
        return False

    def __len__(self):
        return 0

    def __iter__(self):
        return iter(())

    def __repr__(self):
        return "Null"


null_object = NullObject()


def nullable(
        value
):
    """Start an attribute chain from a value that may be None.

    Parameters
    ----------
    value
        Head of the chain.

    Returns
    -------
    object
        `null_object` if `value` is None, otherwise `value` unchanged.

    Notes
    -----
    Only the head of the chain is guarded. A None met further down the
    chain still faults, which `get_or_null` recovers.

    Examples
    --------
    >>> nullable(None).address.city
    Null
    >>> nullable("bob").upper()
    'BOB'
    """
    return null_object if value is None else value
