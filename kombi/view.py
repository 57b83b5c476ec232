"""
A StringView is a window onto some larger string. It never copies the text it looks at.

Parsers built from combinators spend nearly all their time saying "the rest of the input
starts over there." If that were done by slicing, every step would copy the remainder of
the document, and a few megabytes of JSON would take a very long time indeed. So instead
a view carries a reference to the whole buffer along with start and (inclusive) end offsets.
Deriving a new view is constant-time; only `.value` ever produces a new string, and it
does so at most once per view.

An empty view has `end == start - 1`. That is a perfectly ordinary state, not an error.
"""

from typing import Callable


class StringView:
	__slots__ = ('_buffer', '_start', '_end', '_length', '_value')

	def __init__(self, buffer:str, start:int, end:int):
		self._buffer = buffer
		self._start = start
		self._end = end
		self._length = end - start + 1
		self._value = None

	@staticmethod
	def of(text:str) -> "StringView":
		""" Wrap a whole string. Every other view is derived from one made this way. """
		return StringView(text, 0, len(text) - 1)

	def span(self, predicate:Callable[[str], bool]) -> tuple["StringView", "StringView"]:
		"""
		Split into the longest prefix whose characters all satisfy the predicate, and whatever follows.
		Either part may be empty.
		"""
		if not self._length: return self, self
		buffer, index, end = self._buffer, self._start, self._end
		while index <= end and predicate(buffer[index]): index += 1
		return StringView(buffer, self._start, index - 1), StringView(buffer, index, end)

	def drop(self, n:int) -> "StringView":
		""" Skip the first n characters. Dropping more than there are gives an empty view, not an exception. """
		if n <= 0: return self
		if n >= self._length: return StringView(self._buffer, self._end + 1, self._end)
		return StringView(self._buffer, self._start + n, self._end)

	def is_empty(self) -> bool: return self._length == 0
	def is_not_empty(self) -> bool: return self._length != 0
	def __len__(self): return self._length
	def __bool__(self): return self._length != 0

	def __getitem__(self, index:int) -> str:
		if not 0 <= index < self._length: raise IndexError(index)
		return self._buffer[self._start + index]

	@property
	def offset(self) -> int:
		""" Where this view begins, counted from the start of the underlying buffer. """
		return self._start

	@property
	def value(self) -> str:
		if self._value is None:
			self._value = self._buffer[self._start:self._end + 1] if self._length else ''
		return self._value

	def __str__(self): return self.value

	def __repr__(self): return "StringView(%r, at=%d)" % (self.value, self._start)

	def _region(self):
		# All empty views are alike, wherever they happen to sit.
		return (self._start, self._end) if self._length else None

	def __eq__(self, other):
		if not isinstance(other, StringView): return NotImplemented
		return self._region() == other._region() and (self._buffer is other._buffer or self._buffer == other._buffer)

	def __hash__(self): return hash((self._buffer, self._region()))
