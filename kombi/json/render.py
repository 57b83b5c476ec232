"""
Write a JsonValue back out as text.

Strings go out exactly as they came in: nothing is escaped, because nothing was unescaped
on the way in. Feed this module's output back to the grammar and you get the same value.
"""

from ..support.foundation import Visitor
from .values import JsonValue, JsonBool, JsonNumber, JsonString, JsonArray, JsonObject


class _Renderer(Visitor):
	def __init__(self, indent):
		self.indent = indent

	def _open(self, depth):
		if self.indent is None: return '', ', ', ''
		outer = '\n' + ' ' * (self.indent * depth)
		inner = outer + ' ' * self.indent
		return inner, ',' + inner, outer

	def visit_JsonNull(self, _, depth): return 'null'
	def visit_JsonBool(self, host:JsonBool, depth): return 'true' if host.value else 'false'
	def visit_JsonNumber(self, host:JsonNumber, depth): return str(host.value)
	def visit_JsonString(self, host:JsonString, depth): return '"%s"' % host.value

	def visit_JsonArray(self, host:JsonArray, depth):
		if not host.values: return '[]'
		first, between, last = self._open(depth)
		return '[' + first + between.join(self.visit(v, depth + 1) for v in host.values) + last + ']'

	def visit_JsonObject(self, host:JsonObject, depth):
		if not host.members: return '{}'
		first, between, last = self._open(depth)
		items = ('"%s": %s' % (k, self.visit(v, depth + 1)) for k, v in host.members.items())
		return '{' + first + between.join(items) + last + '}'


def dumps(value:JsonValue, indent:int=None) -> str:
	return _Renderer(indent).visit(value, 0)
