"""
JSON, as understood by a handful of combinators. See http://www.json.org/ for the real thing.

This reading of JSON is simpler than the standard in two respects:
	* Numbers are 32-bit signed integers. No fractions, no exponents.
	* String literals are taken verbatim from between the quotes. Backslash is not special,
	  so the first double-quote always ends the string.

The productions refer to one another in a circle (a value may be an array, which holds values).
That circle is closed with a single `Forward` cell, defined once at the bottom of this module.
Nesting depth is therefore bounded by Python's recursion limit; sequence length is not.
With the default limit of 1000, that comes to roughly ninety levels of arrays and objects.
"""

from ..view import StringView
from ..interface import NoMatch, TrailingInput
from ..parser import Parser, Forward
from ..combinators import char_parser, string_parser, span_parser, not_empty, guard, maybe, sep_by, whitespace
from .values import JsonValue, JSON_NULL, JsonBool, JsonNumber, JsonString, JsonArray, JsonObject

INT_MIN, INT_MAX = -2**31, 2**31 - 1

json_value = Forward('json_value')

json_null = string_parser("null").map_const(JSON_NULL)

json_bool = string_parser("true").map_const(JsonBool(True)) | string_parser("false").map_const(JsonBool(False))

def _is_digit(c): return '0' <= c <= '9'

def _significant(digits:StringView): return digits.value.lstrip('0') or '0'

def _signed(minus):
	def attach(digits:str): return int(digits) if minus is None else -int(digits)
	return attach
# More than ten significant digits cannot fit in 32 bits, so such runs are never converted.
# Ten significant digits is already past the 32-bit range; anything longer is not even converted.
_digits = guard(not_empty(span_parser(_is_digit)).map(_significant), lambda digits: len(digits) <= 10)
_integer = maybe('-').map(_signed).ap(_digits)
json_number = guard(_integer, lambda n: INT_MIN <= n <= INT_MAX).map(JsonNumber)

# The value here is the raw StringView between the quotes.
string_literal = char_parser('"') >> span_parser(lambda c: c != '"') << char_parser('"')

json_string = string_literal.map(lambda literal: JsonString(literal.value))

def _punctuation(char): return whitespace >> char_parser(char) << whitespace

_comma = _punctuation(',')

json_array = (
	(char_parser('[') >> whitespace)
	>> sep_by(_comma, json_value)
	<< (whitespace >> char_parser(']'))
).map(JsonArray)

def _pair_with(key:StringView):
	return lambda value: (key.value, value)

_pair = string_literal.map(_pair_with).ap(_punctuation(':') >> json_value)

json_object = (
	(char_parser('{') >> whitespace)
	>> sep_by(_comma, _pair)
	<< (whitespace >> char_parser('}'))
).map(JsonObject.from_pairs)

json_value.define(json_null | json_bool | json_number | json_string | json_array | json_object)


def parse(text:str, *, strict=False) -> JsonValue:
	"""
	Read one JSON value from the front of `text`, raising NoMatch if there isn't one.

	By default, whatever follows the value is ignored. With `strict=True`, whitespace is
	allowed on either side but anything else left over raises TrailingInput.
	"""
	view = StringView.of(text)
	if strict: view = whitespace(view).rest
	outcome = json_value(view)
	if outcome is None: raise NoMatch()
	if strict:
		rest = whitespace(outcome.rest).rest
		if rest: raise TrailingInput(rest.offset)
	return outcome.value
