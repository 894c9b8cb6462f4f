import sys, random
from typing import Any, Sequence
from .errors import SprigError, StackOverflow
from .listing import Listing
from . import syntax

class TooManyIssues(Exception):
	pass

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]

	minced_oaths = [
		'Ack', 'ARGH', 'Blargh', 'Confound it', 'Crud', 'Curses', "Crikey",
		'Drat', 'Fiddlesticks', 'Good Grief', "Great Scott",
		'Jeepers', 'Heavens', 'Nuts', 'Rats',
	]

	resignations = [
		'I am undone.',
		'I cannot continue.',
		'The branch snapped.',
		'I need to ask for help.',
	]

	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

class Report:
	""" Collects the issues found along the way, and optionally chatters about progress. """
	_issues : list["Pic"]

	def __init__(self, *, verbose:int=0, max_issues=3):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues

	@property
	def issues(self) -> Sequence["Pic"]: return tuple(self._issues)

	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)

	def issue(self, it:Any):
		self._issues.append(it)
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)

	def reset(self):
		self._issues.clear()

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self._issues)

	def assert_no_issues(self, message):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(_outburst()+" "+message)

	# Methods the executive calls:

	def evaluation_failed(self, listing:Listing, error:SprigError):
		intro = "%s: %s" % (type(error).__name__, error)
		problem = []
		if error.site is not None:
			problem.append(listing.illustrate(error.site, "Trouble here"))
		footer = []
		if error.trace:
			footer.append("While calling:")
			footer.extend(listing.illustrate(call, "called from here") for call in error.trace)
		elif isinstance(error, StackOverflow):
			footer.append("Perhaps a function calls itself without end?")
		self.issue(Pic(intro, problem, footer))

	def finished_statement(self, index:int, expr:syntax.Expression, result):
		self.info("Statement %d (%s) gave %s" % (index, type(expr).__name__, result))

class Pic:
	def __init__(self, intro:str, illustrations:list[str], footer=()):
		self._intro, self._illustrations, self._footer = intro, illustrations, footer
	def as_text(self):
		lines = [self._intro, ""]
		lines.extend(self._illustrations)
		lines.extend(self._footer)
		return '\n'.join(lines)

def _bemoan(issues):
	""" Emit all the issues to the console. """
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()
