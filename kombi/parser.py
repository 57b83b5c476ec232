"""
The parser abstraction, and the handful of ways to put two parsers together.

A Parser is nothing but a function from a StringView to either a `Parsed(rest, value)`
pair or `None`. Everything interesting comes from combining them:

	.map(f)        transforms the value of a successful parse;
	.ap(p)         sequences: this parser yields a function, `p` yields its argument;
	.alt(p)        tries this parser, and on failure tries `p` from the same starting point.

Those three, together with `Parser.just(x)` and `Parser.empty()`, are the whole toolkit.
The rest (`>>`, `<<`, `lift2`) are spelled in terms of them.

Parsers hold no state of their own, so one may be shared freely, even among threads.
"""

from typing import Callable, Any

from .view import StringView
from .interface import Parsed, Outcome, GrammarError


class Parser:
	__slots__ = ('_run',)

	def __init__(self, run:Callable[[StringView], Outcome]):
		self._run = run

	def __call__(self, view:StringView) -> Outcome:
		return self._run(view)

	def run(self, subject) -> Outcome:
		""" Like calling the parser directly, but also accepts a plain string. """
		if isinstance(subject, str): subject = StringView.of(subject)
		return self._run(subject)

	@staticmethod
	def just(value) -> "Parser":
		""" Succeed without consuming anything. """
		return Parser(lambda view: Parsed(view, value))

	@staticmethod
	def empty() -> "Parser":
		""" Never succeed. """
		return Parser(_fail)

	def map(self, f:Callable) -> "Parser":
		run = self._run
		def mapped(view):
			outcome = run(view)
			if outcome is None: return None
			return Parsed(outcome.rest, f(outcome.value))
		return Parser(mapped)

	def map_const(self, value) -> "Parser":
		return self.map(lambda _: value)

	def ap(self, argument:"Parser") -> "Parser":
		"""
		This parser must produce a one-argument function. If it succeeds, `argument` runs
		on what remains, and the result is the function applied to the argument's value.
		"""
		run, run_argument = self._run, argument._run
		def applied(view):
			outcome = run(view)
			if outcome is None: return None
			fn, rest = outcome.value, outcome.rest
			outcome = run_argument(rest)
			if outcome is None: return None
			return Parsed(outcome.rest, fn(outcome.value))
		return Parser(applied)

	def lazy_ap(self, thunk:Callable[[], "Parser"]) -> "Parser":
		""" As `.ap(...)`, but the argument parser is only obtained once this parser has succeeded. """
		run = self._run
		def applied(view):
			outcome = run(view)
			if outcome is None: return None
			fn = outcome.value
			outcome = thunk()(outcome.rest)
			if outcome is None: return None
			return Parsed(outcome.rest, fn(outcome.value))
		return Parser(applied)

	def alt(self, other:"Parser") -> "Parser":
		"""
		Ordered choice: the first alternative that matches wins. The second alternative
		always starts from the same view the first one was given.
		"""
		first, second = self._run, other._run
		def alternative(view):
			outcome = first(view)
			return second(view) if outcome is None else outcome
		return Parser(alternative)

	def followed_by(self, other:"Parser") -> "Parser":
		""" Both in sequence; keep the value on the right. """
		return self.map(_keep_right).ap(other)

	def skip(self, other:"Parser") -> "Parser":
		""" Both in sequence; keep the value on the left. """
		return self.map(_keep_left).ap(other)

	__or__ = alt
	__rshift__ = followed_by
	__lshift__ = skip


class Forward(Parser):
	"""
	A placeholder for a parser that cannot be built yet, usually because it refers to itself.
	Use it in other definitions freely, then call `.define(...)` exactly once.
	"""
	__slots__ = ('_target', 'name')

	def __init__(self, name='forward'):
		super().__init__(self._follow)
		self._target = None
		self.name = name

	def _follow(self, view):
		target = self._target
		if target is None: raise GrammarError("Parser %r was used before it was defined." % self.name)
		return target(view)

	def define(self, parser:Parser):
		if self._target is not None: raise GrammarError("Parser %r is already defined." % self.name)
		self._target = parser._run

	def __repr__(self): return "<Forward %s>" % self.name


def lift2(f:Callable[[Any, Any], Any], first:Parser, second:Parser) -> Parser:
	""" Run two parsers in order and combine their values with a two-argument function. """
	return first.map(lambda a: lambda b: f(a, b)).ap(second)


def _fail(view): return None
def _keep_right(_): return _identity
def _keep_left(a): return lambda _: a
def _identity(x): return x
