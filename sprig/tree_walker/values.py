"""
This module defines the value-types that the tree-walker operates in terms of.
A value is exactly one of Number, Boolean, or Function. None of them ever changes.
"""
from typing import Optional
from .. import syntax
from ..errors import EmptyBodyError
from .types import SprigValue, ARGS, MAYBE_VALUE, NO_VALUE
from .scope import Scope

class Number(SprigValue):
	__slots__ = ("value",)
	value: float
	def __init__(self, value: float):
		object.__setattr__(self, "value", float(value))
	def __setattr__(self, key, value): raise AttributeError("values are immutable")
	def __eq__(self, other): return type(other) is Number and other.value == self.value
	def __hash__(self): return hash((Number, self.value))
	def __repr__(self): return "Number(%s)" % self
	def __str__(self):
		if self.value.is_integer(): return str(int(self.value))
		return repr(self.value)

class Boolean(SprigValue):
	__slots__ = ("value",)
	value: bool
	def __init__(self, value: bool):
		object.__setattr__(self, "value", bool(value))
	def __setattr__(self, key, value): raise AttributeError("values are immutable")
	def __eq__(self, other): return type(other) is Boolean and other.value == self.value
	def __hash__(self): return hash((Boolean, self.value))
	def __repr__(self): return "Boolean(%s)" % self
	def __str__(self): return "true" if self.value else "false"

TRUE, FALSE = Boolean(True), Boolean(False)

class Closure:
	"""
	The run-time manifestation of a Func node: parameter names and body,
	tied to a snapshot of the scope as it stood when the Func was evaluated.
	Later changes to that scope are not seen here.

	The one exception is the function's own name, when the Func is
	the immediate right-hand side of a NewVariable. That binding goes
	into the snapshot as the closure is made, so recursion works.
	Each closure makes its one Function value at the same time.
	"""
	def __init__(self, func: syntax.Func, captured: Scope, own_name: Optional[str] = None):
		self._func = func
		self._captured = captured.snapshot()
		self.function = Function(self)
		if own_name is not None:
			self._captured.bind_in_place(own_name, self.function)

	def __str__(self):
		return "fn(%s)" % ", ".join(self.param_names)

	@property
	def param_names(self) -> tuple[str, ...]: return self._func.param_names

	@property
	def body(self) -> tuple[syntax.Expression, ...]: return self._func.body

	def bind_parameters(self, args: ARGS) -> dict[str, MAYBE_VALUE]:
		""" Missing arguments bind to NO_VALUE; extra arguments are ignored. """
		return {
			name: args[i] if i < len(args) else NO_VALUE
			for i, name in enumerate(self.param_names)
		}

	def call_scope_for(self, statement_index: int, args: ARGS) -> Scope:
		"""
		Each body expression runs in its own fresh merge of
		the captured snapshot and the parameters, so a binding made by
		one body expression is not visible to the next.
		"""
		assert 0 <= statement_index < len(self.body), statement_index
		return self._captured.overlay(self.bind_parameters(args))

	def apply(self, evaluator, args: ARGS) -> MAYBE_VALUE:
		if not self.body: raise EmptyBodyError()
		result = NO_VALUE
		for index, expr in enumerate(self.body):
			result = evaluator.visit(expr, self.call_scope_for(index, args))
		return result

class Function(SprigValue):
	""" A callable value. The interesting part is the closure inside. """
	__slots__ = ("closure",)
	closure: Closure
	def __init__(self, closure: Closure):
		object.__setattr__(self, "closure", closure)
	def __setattr__(self, key, value): raise AttributeError("values are immutable")
	def __repr__(self): return "Function(%s)" % self.closure
	def __str__(self): return str(self.closure)

	@staticmethod
	def over(func: syntax.Func, scope: Scope, own_name: Optional[str] = None) -> "Function":
		return Closure(func, scope, own_name).function

	def apply(self, evaluator, args: ARGS) -> MAYBE_VALUE:
		return self.closure.apply(evaluator, args)
