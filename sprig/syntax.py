"""
The set of expression nodes.
There is no parser: callers build programs by calling these constructors
directly, children first, in a bottom-up tree construction.
Nodes are immutable once built, and each one owns its children.
"""
import operator
from typing import Sequence

class Expression:
	""" Root of the seven node kinds. """
	__slots__ = ()

	def _fill(self, **fields):
		for key, value in fields.items():
			object.__setattr__(self, key, value)

	def __setattr__(self, key, value):
		raise AttributeError("%s nodes are immutable" % type(self).__name__)

	def __delattr__(self, key):
		raise AttributeError("%s nodes are immutable" % type(self).__name__)

class Literal(Expression):
	__slots__ = ("value",)
	value: float
	def __init__(self, value: float):
		assert isinstance(value, (int, float)) and not isinstance(value, bool), value
		self._fill(value=float(value))
	def __repr__(self): return "<Literal %r>" % self.value

class GetVariable(Expression):
	__slots__ = ("name",)
	name: str
	def __init__(self, name: str):
		assert isinstance(name, str), name
		self._fill(name=name)
	def __repr__(self): return "<Get %s>" % self.name

class NewVariable(Expression):
	__slots__ = ("name", "expr")
	name: str
	expr: Expression
	def __init__(self, name: str, expr: Expression):
		assert isinstance(name, str), name
		self._fill(name=name, expr=expr)
	def __repr__(self): return "<New %s>" % self.name

# Glyph -> (implementation, name of the result kind)
OPS = {
	"+": (operator.add, "Number"),
	"-": (operator.sub, "Number"),
	">": (operator.gt, "Boolean"),
}

class BinOp(Expression):
	__slots__ = ("op", "left", "right")
	op: str
	left: Expression
	right: Expression
	def __init__(self, op: str, left: Expression, right: Expression):
		assert op in OPS, op
		self._fill(op=op, left=left, right=right)
	def __repr__(self): return "<BinOp %s>" % self.op

class If(Expression):
	"""
	Single-branch conditional. When the condition is anything but
	Boolean true, the result is Number(1) and the branch is not evaluated.
	"""
	__slots__ = ("condition", "true_expr")
	condition: Expression
	true_expr: Expression
	def __init__(self, condition: Expression, true_expr: Expression):
		self._fill(condition=condition, true_expr=true_expr)
	def __repr__(self): return "<If>"

class Func(Expression):
	""" Evaluates to a closure over a snapshot of the scope where it's evaluated. """
	__slots__ = ("body", "param_names")
	body: tuple[Expression, ...]
	param_names: tuple[str, ...]
	def __init__(self, body: Sequence[Expression], param_names: Sequence[str]):
		assert all(isinstance(n, str) for n in param_names), param_names
		self._fill(body=tuple(body), param_names=tuple(param_names))
	def __repr__(self): return "<Func (%s)>" % ", ".join(self.param_names)

class Call(Expression):
	__slots__ = ("expr", "args")
	expr: Expression
	args: tuple[Expression, ...]
	def __init__(self, expr: Expression, args: Sequence[Expression]):
		self._fill(expr=expr, args=tuple(args))
	def __repr__(self): return "<Call %r/%d>" % (self.expr, len(self.args))

Program = Sequence[Expression]
