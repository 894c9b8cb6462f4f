"""
There is no surface syntax to read, but it is still nice to see what a program says.
A Listing renders a program as text, one line per top-level statement,
and remembers where each node landed so that diagnostics can point at it.
"""
from typing import Optional
from boozetools.support.foundation import Visitor
from boozetools.support.failureprone import SourceText, illustration
from . import syntax

class Listing(Visitor):
	text: str

	def __init__(self, program: syntax.Program, filename: str = "<program>"):
		self._program = tuple(program)  # Keeps ids in _spans meaningful.
		self._pieces = []
		self._offset = 0
		self._spans = {}
		for expr in self._program:
			self.visit(expr)
			self._emit("\n")
		self.text = "".join(self._pieces)
		self._source = SourceText(self.text, filename=filename)
		del self._pieces

	def __str__(self): return self.text

	def span(self, node: syntax.Expression) -> Optional[slice]:
		return self._spans.get(id(node))

	def illustrate(self, node: syntax.Expression, caption: str = "") -> str:
		where = self.span(node)
		if where is None: return caption
		row, col = self._source.find_row_col(where.start)
		single_line = self._source.line_of_text(row)
		width = where.stop - where.start
		return illustration(single_line, col, width, prefix='% 6d |' % row, caption=caption)

	def _emit(self, text: str):
		self._pieces.append(text)
		self._offset += len(text)

	def _each(self, items, sep: str):
		for i, item in enumerate(items):
			if i: self._emit(sep)
			self.visit(item)

	def visit(self, host, *args, **kwargs):
		start = self._offset
		super().visit(host, *args, **kwargs)
		self._spans[id(host)] = slice(start, self._offset)

	def visit_Literal(self, expr: syntax.Literal):
		v = expr.value
		self._emit(str(int(v)) if v.is_integer() else repr(v))

	def visit_GetVariable(self, expr: syntax.GetVariable):
		self._emit(expr.name)

	def visit_NewVariable(self, expr: syntax.NewVariable):
		self._emit(expr.name + " := ")
		self.visit(expr.expr)

	def visit_BinOp(self, expr: syntax.BinOp):
		self._emit("(")
		self.visit(expr.left)
		self._emit(" %s " % expr.op)
		self.visit(expr.right)
		self._emit(")")

	def visit_If(self, expr: syntax.If):
		self._emit("if ")
		self.visit(expr.condition)
		self._emit(" then ")
		self.visit(expr.true_expr)

	def visit_Func(self, expr: syntax.Func):
		self._emit("fn(%s) { " % ", ".join(expr.param_names))
		self._each(expr.body, "; ")
		self._emit(" }")

	def visit_Call(self, expr: syntax.Call):
		self.visit(expr.expr)
		self._emit("(")
		self._each(expr.args, ", ")
		self._emit(")")
