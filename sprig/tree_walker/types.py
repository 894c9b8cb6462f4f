"""
This module aims to express an interface agreement
between the evaluator and the values it traffics in.
"""

from abc import ABC
from typing import Sequence, Union

class SprigValue(ABC):
	""" Root for the three kinds of run-time value """
	__slots__ = ()

class NoValue:
	"""
	What you get from looking up a name with no binding.
	It is not a value of the language: using it as an operand or callee is an error.
	"""
	__slots__ = ()
	def __repr__(self): return "<no value>"
	def __bool__(self): return False

NO_VALUE = NoValue()

MAYBE_VALUE = Union[SprigValue, NoValue]
ARGS = Sequence[MAYBE_VALUE]
