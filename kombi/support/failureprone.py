"""
Helpers for showing a person where in a text something happened.

The parsers themselves know nothing of lines or columns; a position is a plain offset.
That's plenty for a machine but rude to a human, so SourceText converts an offset into a
row and column, fishes out the relevant line, and draws a little caret under the spot.

Line breaks follow the usual Unix, old-Apple, and DOS conventions. The more exotic
Unicode line separators are not treated as breaks.
"""

import bisect, re, sys

LINE_BREAK = re.compile(r'\r\n?|\n')


def illustration(single_line:str, start:int, width:int=0, *, prefix='', caption="near here") -> str:
	""" Builds up a picture of where something appears in a line of text. """
	blanks = ''.join(c if c == '\t' else ' ' for c in prefix + single_line[:start])
	underline = '^' * max(1, min(width, len(single_line) - start))
	return prefix + single_line.rstrip() + '\n' + blanks + underline + " " + caption


class SourceText:
	""" Wrapper for a text, to support half-respectable error messages with context. """
	def __init__(self, content:str, filename:str=None):
		self.content = content
		self.filename = filename
		self.__bounds = None

	def __make_bounds(self):
		# Line breaks are only found if someone actually asks.
		if self.__bounds is None:
			inside = [m.end() for m in LINE_BREAK.finditer(self.content)]
			self.__bounds = [0] + inside + [len(self.content)]
		return self.__bounds

	def find_row_col(self, index:int) -> tuple[int, int]:
		""" Rows count from one; columns from zero. """
		bounds = self.__make_bounds()
		row = bisect.bisect_right(bounds, index, hi=len(bounds) - 1) - 1
		return row + 1, index - bounds[row]

	def line_of_text(self, row:int) -> str:
		bounds = self.__make_bounds()
		return self.content[bounds[row - 1]:bounds[row]]

	def complaint(self, index:int, message:str, width:int=1) -> str:
		row, col = self.find_row_col(index)
		where = "At" if self.filename is None else str(self.filename) + ":"
		reference = "%s line %d, column %d: %s" % (where, row, col + 1, message)
		return reference + "\n" + illustration(self.line_of_text(row), col, width, prefix=' >>> ')

	def complain(self, index:int, message:str, width:int=1):
		print(self.complaint(index, message, width), file=sys.stderr)
