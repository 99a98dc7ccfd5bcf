#!/usr/bin/env python3

__version__ = '0.1.0'

from .vector import *
from .shapes import *
from .relations import *
from .envelopes import *
from .errors import *
