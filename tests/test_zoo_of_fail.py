import io
import unittest
from unittest import mock

from sprig import examples
from sprig.syntax import Literal, GetVariable, NewVariable, BinOp, If, Func, Call
from sprig.errors import SprigError, SprigTypeError, EmptyBodyError, StackOverflow, UnboundVariableUse
from sprig.diagnostics import Report, Pic, TooManyIssues
from sprig.listing import Listing
from sprig.tree_walker import executive
from sprig.tree_walker.scope import Scope
from sprig.tree_walker.values import Number

class Silence(Report):
	def __init__(self):
		super().__init__(verbose=False, max_issues=30)
		self.complain_to_console = mock.Mock()

def _failure(program) -> SprigError:
	try: executive.run_program(program)
	except SprigError as ex: return ex
	raise AssertionError("failed to fail")

class ZooOfFail(unittest.TestCase):
	""" Tests that assert about failure modes. """

	def test_empty_body(self):
		program = [NewVariable("nothing", Func([], ["a"])), Call(GetVariable("nothing"), [Literal(1)])]
		ex = _failure(program)
		self.assertIsInstance(ex, EmptyBodyError)
		self.assertIs(program[1], ex.site)
		self.assertEqual((program[1],), ex.trace)

	def test_unbounded_recursion(self):
		program = [
			NewVariable("forever", Func([Call(GetVariable("forever"), [])], [])),
			Call(GetVariable("forever"), []),
		]
		ex = _failure(program)
		self.assertIsInstance(ex, StackOverflow)
		self.assertIs(program[1], ex.site)

	def test_recursion_limit_below_current_depth(self):
		program = [Literal(1)]
		with self.assertRaises(StackOverflow) as cm:
			executive.run_program(program, recursion_limit=5)
		self.assertIs(program[0], cm.exception.site)

	def test_failure_stops_the_program_but_keeps_earlier_bindings(self):
		scope = Scope()
		program = [
			NewVariable("before", Literal(1)),
			NewVariable("boom", BinOp("+", Literal(1), Func([Literal(1)], []))),
			NewVariable("after", Literal(2)),
		]
		with self.assertRaises(SprigTypeError):
			executive.run_program(program, scope)
		self.assertEqual(Number(1), scope.lookup("before"))
		self.assertNotIn("boom", scope)
		self.assertNotIn("after", scope)

	def test_site_and_trace_of_nested_failure(self):
		bad = BinOp("-", GetVariable("n"), GetVariable("m"))
		inner = Call(GetVariable("g"), [Literal(1)])
		outer = Call(GetVariable("f"), [])
		program = [
			NewVariable("g", Func([bad], ["n"])),
			NewVariable("f", Func([Literal(0), inner], [])),
			outer,
		]
		ex = _failure(program)
		self.assertIsInstance(ex, UnboundVariableUse)
		self.assertIs(bad.right, ex.site)
		self.assertEqual((outer, inner), ex.trace)
		self.assertEqual("m", ex.name)

	def test_calling_results_of_conditions(self):
		# The if-without-else yields Number(1), which is no function.
		ex = _failure([Call(If(BinOp(">", Literal(0), Literal(1)), Literal(5)), [])])
		self.assertIsInstance(ex, SprigTypeError)
		self.assertNotIsInstance(ex, UnboundVariableUse)

class ListingTests(unittest.TestCase):

	def test_rendering(self):
		listing = Listing(examples.fibonacci(10))
		self.assertEqual(
			"fib := fn(n) { if (n > 1) then (fib((n - 1)) + fib((n - 2))) }\n"
			"fib(10)\n",
			listing.text,
		)

	def test_spans(self):
		program = examples.adder(3, 4.5)
		listing = Listing(program)
		call = program[-1]
		where = listing.span(call)
		self.assertEqual("add(4.5)", listing.text[where])
		self.assertIsNone(listing.span(Literal(3)))

	def test_illustration_mentions_caption(self):
		program = [BinOp("+", Literal(1), GetVariable("ghost"))]
		listing = Listing(program)
		picture = listing.illustrate(program[0].right, "unbound")
		self.assertIn("ghost", picture)
		self.assertIn("unbound", picture)

class ReportTests(unittest.TestCase):

	def test_evaluation_failed(self):
		program = [
			NewVariable("nothing", Func([], [])),
			Call(GetVariable("nothing"), []),
		]
		report = Silence()
		report.evaluation_failed(Listing(program), _failure(program))
		self.assertTrue(report.sick())
		text = report.issues[0].as_text()
		self.assertIn("EmptyBodyError", text)
		self.assertIn("While calling:", text)
		report.reset()
		self.assertTrue(report.ok())

	def test_stack_overflow_hint(self):
		program = [NewVariable("me", Func([Call(GetVariable("me"), [])], [])), Call(GetVariable("me"), [])]
		report = Silence()
		report.evaluation_failed(Listing(program), _failure(program))
		self.assertIn("without end", report.issues[0].as_text())

	def test_complaints_go_to_stderr(self):
		report = Report(verbose=1)
		with mock.patch("sys.stderr", new_callable=io.StringIO) as err:
			report.info("hello", "there")
			program = [Call(Literal(3), [])]
			report.evaluation_failed(Listing(program), _failure(program))
			report.complain_to_console()
		self.assertIn("hello there", err.getvalue())
		self.assertIn("cannot call a non-function value", err.getvalue())

	def test_pic_layout(self):
		pic = Pic("Trouble", ["  picture"], ["While calling:", "  more"])
		self.assertEqual("Trouble\n\n  picture\nWhile calling:\n  more", pic.as_text())

	def test_quiet_report_says_nothing(self):
		report = Report(verbose=0)
		with mock.patch("sys.stderr", new_callable=io.StringIO) as err:
			report.info("hello")
		self.assertEqual("", err.getvalue())

	def test_too_many_issues(self):
		report = Report(max_issues=2)
		report.issue("one")
		with self.assertRaises(TooManyIssues):
			report.issue("two")

	def test_assert_no_issues(self):
		report = Silence()
		report.assert_no_issues("fine")
		report.issue("trouble")
		with self.assertRaises(AssertionError):
			report.assert_no_issues("not fine")
		self.assertEqual(1, report.complain_to_console.call_count)

if __name__ == '__main__':
	unittest.main()
