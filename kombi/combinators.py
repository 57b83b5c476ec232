""" Small parsers, and the usual ways to repeat them. Built entirely on the Parser core. """

from typing import Callable, Iterable, Sequence

from .interface import Parsed
from .parser import Parser, lift2


def satisfy(predicate:Callable[[str], bool]) -> Parser:
	""" Exactly one character, provided the predicate likes it. """
	def one(view):
		if view and predicate(view[0]): return Parsed(view.drop(1), view[0])
	return Parser(one)

def char_parser(char:str) -> Parser:
	def one(view):
		if view and view[0] == char: return Parsed(view.drop(1), char)
	return Parser(one)

def sequence(parsers:Sequence[Parser]) -> Parser:
	""" Run each parser in turn, each from where the last left off; collect the values in a list. """
	result = Parser.just(())
	for p in parsers:
		result = lift2(_snoc, result, p)
	return result.map(list)

def traverse(f:Callable[..., Parser], items:Iterable) -> Parser:
	return sequence([f(x) for x in items])

def string_parser(literal:str) -> Parser:
	return traverse(char_parser, literal).map(''.join)

def span_parser(predicate:Callable[[str], bool]) -> Parser:
	""" Never fails. The value is the (possibly empty) StringView of the longest matching prefix. """
	def spanned(view):
		matched, rest = view.span(predicate)
		return Parsed(rest, matched)
	return Parser(spanned)

def guard(p:Parser, predicate:Callable[..., bool]) -> Parser:
	""" Succeed only where `p` does, and then only if the predicate approves of the value. """
	def guarded(view):
		outcome = p(view)
		if outcome is not None and predicate(outcome.value): return outcome
	return Parser(guarded)

def not_empty(p:Parser) -> Parser:
	""" Reject a successful match whose value has zero length. """
	return guard(p, len)

def maybe(char:str) -> Parser:
	""" The character if it's next, otherwise `None`. Either way, succeed. """
	return char_parser(char) | Parser.just(None)

def many(p:Parser) -> Parser:
	"""
	Zero or more, as many as will match. Never fails.
	Stops early if `p` matches without consuming anything, since it would do so forever.
	"""
	def repeated(view):
		values = []
		while True:
			outcome = p(view)
			if outcome is None or len(outcome.rest) == len(view): break
			values.append(outcome.value)
			view = outcome.rest
		return Parsed(view, values)
	return Parser(repeated)

def sep_by(separator:Parser, element:Parser) -> Parser:
	""" Zero or more elements with separators between. Never fails. """
	some = lift2(_cons, element, many(separator >> element))
	return some | Parser(_nothing_yet)

whitespace = span_parser(str.isspace)


def _snoc(items:tuple, item): return items + (item,)
def _cons(item, items:list): return [item] + items
def _nothing_yet(view): return Parsed(view, [])
