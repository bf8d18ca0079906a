#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Oct 17 2026
@author: ike
"""


# 3. Local application / relative imports
from .nested import *
from .values import *
from .faults import *

from . import classes
from .classes import nullobject
from .classes.nullobject import NullObject, null_object, nullable
