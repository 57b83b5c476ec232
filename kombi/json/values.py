"""
The closed family of JSON values which the grammar produces.

Each variant is an immutable dataclass with structural equality, so parse results
compare naturally in tests: `JsonNumber(1) == JsonNumber(1)` but `JsonNumber(1) != JsonBool(True)`.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable

from ..support.foundation import Visitor


class JsonValue:
	""" Common ancestor of all the variants below. Nothing else should inherit from it. """
	__slots__ = ()

@dataclass(frozen=True)
class JsonNull(JsonValue):
	def __repr__(self): return 'JsonNull'

JSON_NULL = JsonNull()

@dataclass(frozen=True)
class JsonBool(JsonValue):
	value: bool

@dataclass(frozen=True)
class JsonNumber(JsonValue):
	value: int # Signed, and within 32 bits. There is no support for fractions or exponents.

@dataclass(frozen=True)
class JsonString(JsonValue):
	value: str

@dataclass(frozen=True)
class JsonArray(JsonValue):
	values: tuple

	def __post_init__(self):
		object.__setattr__(self, 'values', tuple(self.values))

@dataclass(frozen=True)
class JsonObject(JsonValue):
	members: MappingProxyType

	def __post_init__(self):
		object.__setattr__(self, 'members', MappingProxyType(dict(self.members)))

	@staticmethod
	def from_pairs(pairs:Iterable[tuple[str, JsonValue]]) -> "JsonObject":
		""" Later pairs overwrite earlier ones with the same key. """
		return JsonObject(dict(pairs))

	def __hash__(self): return hash(frozenset(self.members.items()))


class _PlainPython(Visitor):
	def visit_JsonNull(self, _): return None
	def visit_JsonBool(self, host:JsonBool): return host.value
	def visit_JsonNumber(self, host:JsonNumber): return host.value
	def visit_JsonString(self, host:JsonString): return host.value
	def visit_JsonArray(self, host:JsonArray): return [self.visit(v) for v in host.values]
	def visit_JsonObject(self, host:JsonObject): return {k: self.visit(v) for k, v in host.members.items()}

def to_python(value:JsonValue):
	""" Convert to ordinary Python data: None, bool, int, str, list and dict. """
	return _PlainPython().visit(value)
