import sys, random
from typing import Any, Sequence

class TooManyIssues(Exception):
	pass

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]

	minced_oaths = [
		'Ack', 'ARGH', 'Blargh', 'Confound it', 'Crud', 'Curses', "Crikey",
		'Drat', 'Fiddlesticks', 'Good Grief', "Great Scott", 'Jeepers',
		"Mercy", 'Nuts', 'Rats',
	]

	resignations = [
		'The laws are broken.',
		'This map is not what it seems.',
		'I cannot vouch for these keys.',
		'I need to ask for help.',
	]

	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

class Report:
	""" Collects issues found by the law audits, and does the talking to the console. """
	_issues : list["Pic"]

	def __init__(self, *, verbose:int=0, max_issues=3):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues

	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)

	@property
	def issues(self) -> list["Pic"]: return list(self._issues)

	def issue(self, it:"Pic"):
		self._issues.append(it)
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)

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

	# Methods the law audit calls:

	def law_broken(self, law:str, expression:str, evidence:Sequence[tuple[str, Any]]):
		intro = "The %s law does not hold:" % law
		self.issue(Pic(intro, ["    "+expression], _evidence(evidence)))

	def equality_broken(self, property_name:str, keys:Sequence[Any]):
		intro = "The key-equality predicate is not %s." % property_name
		witnesses = ["    "+", ".join(map(repr, keys))]
		footer = ["Shadowing and locality are undefined for these keys."]
		self.issue(Pic(intro, witnesses, footer))

def _evidence(evidence):
	return ["  %s = %r" % (name, value) for name, value in evidence]

class Pic:
	def __init__(self, intro:str, body:list[str], footer=()):
		self._intro, self._body, self._footer = intro, body, footer
	@property
	def description(self): return self._intro
	def as_text(self):
		lines = [self._intro, ""]
		lines.extend(self._body)
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
