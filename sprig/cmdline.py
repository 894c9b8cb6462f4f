"""
This runs the example programs bundled with Sprig.

{0}

For example:

    sprig fibonacci 10

will build the Fibonacci program for 10, run it, and show the result.

    sprig -h

will explain all the arguments. The examples are:

{1}
"""
import sys, argparse
from .examples import EXAMPLES, describe

def _limit(text):
	limit = int(text)
	if limit < 1: raise argparse.ArgumentTypeError("recursion limit must be at least 1")
	return limit

parser = argparse.ArgumentParser(
	prog="sprig",
	description="Tree-walking evaluator for the Sprig expression language.",
)
parser.add_argument("example", choices=sorted(EXAMPLES), help="which bundled program to run")
parser.add_argument("arguments", nargs="*", type=float, help="numbers to build the program with")
parser.add_argument('-l', "--listing", action="store_true", help="Show the program before running it.")
parser.add_argument('-v', "--verbose", action="count", help="Mention each statement's result as it happens.")
parser.add_argument('-r', "--recursion-limit", type=_limit, help="Python recursion limit while the program runs.")

def run(args):
	from .diagnostics import Report
	from .errors import SprigError
	from .listing import Listing
	from .tree_walker.scope import Scope
	from .tree_walker.types import NO_VALUE
	from .tree_walker.executive import each_result
	report = Report(verbose=args.verbose)
	try: program = EXAMPLES[args.example](*args.arguments)
	except TypeError:
		parser.error("too many numbers for %s" % args.example)
	listing = Listing(program, filename=args.example)
	if args.listing:
		print(listing, end="")
	result = NO_VALUE
	try:
		for index, result in enumerate(each_result(program, Scope(), args.recursion_limit)):
			report.finished_statement(index, program[index], result)
	except SprigError as ex:
		report.evaluation_failed(listing, ex)
		report.complain_to_console()
		return 1
	print("%s returns: %s" % (args.example, result))
	return 0

def catalogue():
	return "\n".join("    %-10s %s" % (name, describe(name)) for name in sorted(EXAMPLES))

def main(argv=None):
	argv = sys.argv[1:] if argv is None else argv
	if argv:
		sys.exit(run(parser.parse_args(argv)))
	else:
		print(__doc__.strip().format(parser.format_usage(), catalogue()))
