"""
Interface definitions: the shape of a parse outcome, and the exceptions this package deals in.

A parser either matches, giving a `Parsed` pair, or it does not, giving `None`.
There is deliberately nothing more to say about a failure: no position, no expectation.
The exceptions below exist for the convenience layer and for grammar-construction mistakes;
the combinators themselves never raise on account of bad input.
"""

from typing import NamedTuple, Any, Optional

from .view import StringView


class Parsed(NamedTuple):
	rest: StringView
	value: Any

Outcome = Optional[Parsed]


class KombiError(ValueError):
	""" Base class of all exceptions arising from this package. """

class NoMatch(KombiError):
	""" The text was not recognized. That's all anyone knows. """

class TrailingInput(NoMatch):
	"""
	A value was recognized, but something other than whitespace followed it
	and the caller asked for the entire text to be consumed.
	Parameters are:
		the string offset where the leftovers begin.
	"""
	def __init__(self, position):
		super().__init__(position)
		self.position = position

class GrammarError(KombiError):
	""" Something is wrong with how a grammar was put together, as opposed to the text it reads. """
