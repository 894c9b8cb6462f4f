"""
The overall control for running a program:
Statements run in order, all against one shared top-level scope.
The first failure stops everything; whatever earlier statements bound stays bound.
"""
import sys
from contextlib import contextmanager
from typing import Iterator, Optional
from .. import syntax
from ..errors import StackOverflow
from .types import MAYBE_VALUE, NO_VALUE
from .scope import Scope
from .evaluator import Evaluator

def each_result(program: syntax.Program, scope: Scope, recursion_limit: Optional[int] = None) -> Iterator[MAYBE_VALUE]:
	""" Yield the value of each top-level statement in turn. """
	evaluator = Evaluator()
	for expr in program:
		# A limit below the current depth fails on the way in, which is also an overflow.
		try:
			with _recursion_limit(recursion_limit):
				result = evaluator.evaluate(expr, scope)
		except RecursionError:
			overflow = StackOverflow()
			overflow.locate(expr, ())
			raise overflow from None
		yield result

def run_program(program: syntax.Program, scope: Optional[Scope] = None, recursion_limit: Optional[int] = None) -> MAYBE_VALUE:
	""" Run every statement; answer the last one's value. """
	if scope is None: scope = Scope()
	result = NO_VALUE
	for result in each_result(program, scope, recursion_limit):
		pass
	return result

@contextmanager
def _recursion_limit(limit: Optional[int]):
	if limit is None:
		yield
		return
	prior = sys.getrecursionlimit()
	sys.setrecursionlimit(limit)
	try: yield
	finally: sys.setrecursionlimit(prior)
