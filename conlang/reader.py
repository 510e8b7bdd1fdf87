"""
The line reader: one line of text in, one value out.

A line must parse as a single value (optionally followed by a full stop)
with nothing left over. Used as an iterator, the reader yields values
until the first line that goes wrong, and then it is finished: it does
not skip the bad line and carry on.

A line that matches no part of the grammar at all is a different matter.
That raises Unparseable, which is not a ReaderError and which nothing here
catches, so it brings the whole read-print session down with it.
"""
from typing import Iterable, Optional
from .values import Value
from .grammar import NoMatch, value_line
from .diagnostics import Report

class ReaderError(Exception):
	pass

class EndOfInput(ReaderError):
	def __str__(self): return "end of file"

class LeftoverInput(ReaderError):
	""" The line held a value, and then some. """
	def __init__(self, rest:str, line:str=None, lineno:int=0):
		super().__init__(rest)
		self.rest, self.line, self.lineno = rest, line, lineno
	def __str__(self): return "too much input: %s"%self.rest

# str.isspace also accepts the information separators U+001C..U+001F,
# which are not White_Space in Unicode.
_NOT_WHITESPACE = frozenset("\x1c\x1d\x1e\x1f")

def _all_whitespace(text:str) -> bool:
	return all(c.isspace() and c not in _NOT_WHITESPACE for c in text)

class Unparseable(Exception):
	""" No alternative of the grammar matches the line. """
	def __init__(self, line:str, lineno:int=0):
		super().__init__(line)
		self.line, self.lineno = line, lineno
	def __str__(self): return "no value on line %d: %r"%(self.lineno, self.line)

class ConlangReader:
	def __init__(self, lines:Iterable[str], report:Optional[Report]=None):
		self._lines = iter(lines)
		self._report = report
		self.lineno = 0

	def parse_next(self) -> Value:
		try: buf = next(self._lines)
		except StopIteration: raise EndOfInput() from None
		self.lineno += 1

		try: val, remaining = value_line(buf)
		except NoMatch: raise Unparseable(buf, self.lineno) from None

		if not remaining or _all_whitespace(buf):
			return val
		else:
			raise LeftoverInput(remaining, buf, self.lineno)

	def __iter__(self): return self

	def __next__(self) -> Value:
		try: return self.parse_next()
		except EndOfInput:
			if self._report is not None: self._report.end_of_input(self.lineno)
		except LeftoverInput as ex:
			if self._report is not None: self._report.too_much_input(ex.lineno, ex.line, ex.rest)
		raise StopIteration
