"""
The evaluator proper: one visit-method per kind of expression node.

Each visit takes the node and the scope to evaluate it in, and returns a value.
Only NewVariable changes the scope it is given. Whether that scope is the
shared top-level one or a private call-time one is up to whoever passed it in.
"""
from boozetools.support.foundation import Visitor
from .. import syntax
from ..errors import SprigError, SprigTypeError, UnboundVariableUse
from .types import MAYBE_VALUE, NO_VALUE
from .scope import Scope
from .values import Number, Boolean, Function, TRUE

_KINDS = {"Number": Number, "Boolean": Boolean}

class Evaluator(Visitor):
	"""
	Keeps track of which calls are in progress, so that a failure can say how it got there.
	Otherwise stateless: evaluating the same node in the same scope gives the same result.
	"""

	def __init__(self):
		self.call_stack: list[syntax.Call] = []

	def fail(self, error: SprigError, site: syntax.Expression):
		raise error.locate(site, self.call_stack)

	def evaluate(self, expr: syntax.Expression, scope: Scope) -> MAYBE_VALUE:
		assert isinstance(scope, Scope), scope
		return self.visit(expr, scope)

	@staticmethod
	def visit_Literal(expr: syntax.Literal, scope: Scope):
		return Number(expr.value)

	@staticmethod
	def visit_GetVariable(expr: syntax.GetVariable, scope: Scope):
		return scope.lookup(expr.name)

	def visit_NewVariable(self, expr: syntax.NewVariable, scope: Scope):
		if isinstance(expr.expr, syntax.Func):
			# A function defined this way can call itself by name.
			value = self.visit(expr.expr, scope, own_name=expr.name)
		else:
			value = self.visit(expr.expr, scope)
		return scope.bind_in_place(expr.name, value)

	def visit_BinOp(self, expr: syntax.BinOp, scope: Scope):
		# Both sides, left first. No short-cuts.
		a = self.visit(expr.left, scope)
		b = self.visit(expr.right, scope)
		self._check_numeric(expr.left, a)
		self._check_numeric(expr.right, b)
		fn, kind = syntax.OPS[expr.op]
		return _KINDS[kind](fn(a.value, b.value))

	def _check_numeric(self, operand: syntax.Expression, value: MAYBE_VALUE):
		if value is NO_VALUE:
			self.fail(UnboundVariableUse("non-numeric operand", _name_of(operand)), operand)
		if not isinstance(value, Number):
			self.fail(SprigTypeError("non-numeric operand"), operand)

	def visit_If(self, expr: syntax.If, scope: Scope):
		if self.visit(expr.condition, scope) == TRUE:
			return self.visit(expr.true_expr, scope)
		# There is no else-branch. Base cases of recursions lean on this.
		return Number(1)

	@staticmethod
	def visit_Func(expr: syntax.Func, scope: Scope, own_name=None):
		return Function.over(expr, scope, own_name)

	def visit_Call(self, expr: syntax.Call, scope: Scope):
		callee = self.visit(expr.expr, scope)
		if callee is NO_VALUE:
			self.fail(UnboundVariableUse("cannot call a non-function value", _name_of(expr.expr)), expr)
		if not isinstance(callee, Function):
			self.fail(SprigTypeError("cannot call a non-function value"), expr)
		args = [self.visit(a, scope) for a in expr.args]
		self.call_stack.append(expr)
		try:
			return callee.apply(self, args)
		except SprigError as ex:
			if ex.site is None: ex.locate(expr, self.call_stack)
			raise
		finally:
			self.call_stack.pop()

def _name_of(expr: syntax.Expression):
	if isinstance(expr, syntax.GetVariable): return expr.name
