"""
Reporting substitution failures to a human.

The algebra itself only raises. An inference driver that would rather
collect problems than stop at the first one can route its calls through
a Report, which turns each failure into a readable issue.
"""
import sys, random
from typing import Any, Callable, Sequence
from .substitution import CircularBinding, MalformedTypeExpr
from .texp import render

class TooManyIssues(Exception):
	pass

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]
	minced_oaths = [
		'Ack', 'ARGH', 'Blargh', 'Confound it', 'Crud', 'Curses', 'Drat',
		'Fiddlesticks', 'Good Grief', 'Great Scott', 'Jeepers', 'Nuts', 'Rats',
	]
	resignations = [
		'That type would never end.',
		'The types do not add up.',
		'I cannot make these agree.',
	]
	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

class Pic:
	def __init__(self, intro:str, lines:Sequence[str]=(), footer:Sequence[str]=()):
		self.intro, self._lines, self._footer = intro, list(lines), footer
	def as_text(self):
		lines = [self.intro, ""]
		lines.extend("    "+line for line in self._lines)
		lines.extend(self._footer)
		return '\n'.join(lines)

class Report:
	""" The result-monad, more or less, for a driver that wants one. """
	_issues : list[Pic]

	def __init__(self, *, verbose:int=0, max_issues=3):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues

	@property
	def issues(self) -> tuple[Pic, ...]: return tuple(self._issues)
	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)

	def issue(self, it:Pic):
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

	def attempt(self, operation:Callable, *args) -> Any:
		"""
		Call one of the fallible operations of the algebra.
		Return its result, or None after filing an issue if it fails.
		"""
		try:
			result = operation(*args)
		except CircularBinding as ex:
			self.circular_binding(ex)
		except MalformedTypeExpr as ex:
			self.malformed_type_expr(ex)
		else:
			self.info(getattr(operation, "__name__", operation), "=>", result)
			return result

	# Methods specific to the failure modes of the algebra:

	def circular_binding(self, ex:CircularBinding):
		intro = "This would make an infinite type."
		name = ex.variable.name
		problem = ["%s := %s" % (name, render(ex.texp))]
		footer = ["%s cannot stand for a type that contains %s." % (name, name)]
		self.issue(Pic(intro, problem, footer))

	def malformed_type_expr(self, ex:MalformedTypeExpr):
		intro = "This is not a type expression:"
		self.issue(Pic(intro, [repr(ex.texp)]))

def _bemoan(issues):
	""" Emit all the issues to the console. """
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()
