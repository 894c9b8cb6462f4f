"""
A few ready-made programs, since there is no parser to write them with.
Each builder takes a few numbers and answers a list of top-level statements.
"""
from .syntax import Literal, GetVariable, NewVariable, BinOp, If, Func, Call, Program

def fibonacci(n=10) -> Program:
	""" fib(n), with the base cases left to the if-without-else. """
	def fib_of(delta):
		return Call(GetVariable("fib"), [BinOp("-", GetVariable("n"), Literal(delta))])
	return [
		NewVariable("fib", Func([
			If(
				BinOp(">", GetVariable("n"), Literal(1)),
				BinOp("+", fib_of(1), fib_of(2)),
			),
		], ["n"])),
		Call(GetVariable("fib"), [Literal(n)]),
	]

def triangle(n=10) -> Program:
	""" 1 + 2 + ... + n, by recursion. """
	return [
		NewVariable("tri", Func([
			If(
				BinOp(">", GetVariable("n"), Literal(1)),
				BinOp("+", GetVariable("n"), Call(GetVariable("tri"), [
					BinOp("-", GetVariable("n"), Literal(1)),
				])),
			),
		], ["n"])),
		Call(GetVariable("tri"), [Literal(n)]),
	]

def adder(a=3, b=4) -> Program:
	""" A function that makes functions: make_adder(a)(b). """
	return [
		NewVariable("make_adder", Func([
			Func([BinOp("+", GetVariable("x"), GetVariable("y"))], ["y"]),
		], ["x"])),
		NewVariable("add", Call(GetVariable("make_adder"), [Literal(a)])),
		Call(GetVariable("add"), [Literal(b)]),
	]

def snapshot(v=5) -> Program:
	""" Closures see the scope as it was when they were made, not as it is later. """
	return [
		NewVariable("x", Literal(v)),
		NewVariable("get", Func([GetVariable("x")], [])),
		NewVariable("x", BinOp("+", GetVariable("x"), Literal(100))),
		Call(GetVariable("get"), []),
	]

def forgetful(v=7) -> Program:
	""" Inside a function, one body expression's bindings are gone by the next. """
	return [
		NewVariable("f", Func([
			NewVariable("y", GetVariable("a")),
			GetVariable("y"),
		], ["a"])),
		Call(GetVariable("f"), [Literal(v)]),
	]

EXAMPLES = {fn.__name__: fn for fn in (fibonacci, triangle, adder, snapshot, forgetful)}

def describe(name:str) -> str:
	return EXAMPLES[name].__doc__.strip()
