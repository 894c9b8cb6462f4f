"""
Everything that can go wrong while a program runs.
Any of these aborts the statement in progress and, with it, the rest of the program.
"""
from typing import Optional, Sequence

class SprigError(Exception):
	"""
	Root of the evaluation failures.
	The evaluator fills in `site` (the node where trouble was noticed)
	and `trace` (the calls in progress at that moment, outermost first).
	"""
	site = None
	trace: Sequence = ()

	def locate(self, site, trace:Sequence) -> "SprigError":
		self.site = site
		self.trace = tuple(trace)
		return self

class SprigTypeError(SprigError, TypeError):
	""" A value of the wrong kind: calling a non-function, or doing arithmetic on a non-number. """

class UnboundVariableUse(SprigTypeError):
	""" Something tried to use the non-value you get from looking up an unbound name. """
	def __init__(self, message:str, name:Optional[str]=None):
		super().__init__(message if name is None else "%s (%r is unbound)"%(message, name))
		self.name = name

class EmptyBodyError(SprigError):
	def __init__(self, message="called a function with an empty body"):
		super().__init__(message)

class StackOverflow(SprigError):
	def __init__(self, message="recursion too deep"):
		super().__init__(message)
