#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Oct 17 2026
@author: ike
"""


# 3. Local application / relative imports
from .nullobject import *
