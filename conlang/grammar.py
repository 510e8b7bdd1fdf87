"""
Recursive-descent grammar for one line of conlang notation:

	value      := complement | sequence | number | word
	complement := prefix ':' value (prefix ':' value)*
	sequence   := delim value (delim value)*
	number     := ['+'|'-'] digits ['.' digits] [('e'|'E') digits]
	word       := run of chars excluding {. : , space tab newline ) ] } " '}
	line       := value ['.']

Each rule takes the text yet to be parsed and returns the value it built
along with whatever text it left alone. A rule that does not apply raises
NoMatch, which tells `value` to go on to the next alternative. Nothing is
shared between attempts, so backing out just means dropping the partial work.

Rules do not skip leading whitespace. Only the sequence delimiters and the
gap before a repeated complement part soak any up.
"""
import math
from .values import Value, Number, make_word, make_complement, make_sequence

WHITESPACE = " \t\n"
DIGITS = "0123456789"
WORD_TERMINATORS = frozenset(".:, \t\n)]}\"'")
DELIMITERS = frozenset(",;")
SIGNS = {"+": 1.0, "-": -1.0}

class NoMatch(Exception):
	""" This rule does not apply to this text. """
	pass

def _skip_whitespace(text:str) -> str:
	return text.lstrip(WHITESPACE)

def _decimal(text:str) -> tuple[str, str]:
	end = 0
	while end < len(text) and text[end] in DIGITS: end += 1
	if not end: raise NoMatch(text)
	return text[:end], text[end:]

def _accumulate(digits:str) -> float:
	n = 0.0
	for d in digits:
		n = n*10 + DIGITS.index(d)
	return n

def _power_of_ten(exponent:float) -> float:
	try: return 10.0 ** exponent
	except OverflowError: return math.inf

def _optional_part(marks, text:str):
	""" Digits after one of the given marks, or None (and the text untouched) if they are not there. """
	if text[:1] and text[0] in marks:
		try: return _decimal(text[1:])
		except NoMatch: pass
	return None, text

def number(text:str) -> tuple[Value, str]:
	"""
	Digits to float the simple way, not the exact way.
	The digits accumulate one at a time in floating point, so the occasional
	result differs in the last place from what float() would say. That is expected.
	"""
	sign = SIGNS.get(text[:1])
	rest = text if sign is None else text[1:]
	whole_part, rest = _decimal(rest)
	fractional_part, rest = _optional_part(".", rest)
	exponent, rest = _optional_part("eE", rest)

	n = _accumulate(whole_part)
	if fractional_part is not None:
		n += _accumulate(fractional_part) / _power_of_ten(len(fractional_part))
	if exponent is not None:
		n *= _power_of_ten(_accumulate(exponent))
	if sign is not None:
		n *= sign
	return Number(n), rest

def word_text(text:str) -> tuple[str, str]:
	""" The longest non-empty run of text before any word-terminator. """
	end = 0
	while end < len(text) and text[end] not in WORD_TERMINATORS: end += 1
	if not end: raise NoMatch(text)
	return text[:end], text[end:]

def word(text:str) -> tuple[Value, str]:
	it, rest = word_text(text)
	return make_word(it), rest

def _complement_part(prefix:str, text:str) -> tuple[Value, str]:
	marker = prefix + ":"
	rest = _skip_whitespace(text)
	if not rest.startswith(marker): raise NoMatch(text)
	return value(rest[len(marker):])

def complement(text:str) -> tuple[Value, str]:
	"""
	The prefix must come back verbatim to introduce each further part.
	The prefix itself does not appear in the result.
	"""
	prefix, rest = word_text(text)
	if not rest.startswith(":"): raise NoMatch(text)
	head, rest = value(rest[1:])
	tail = []
	while True:
		try: part, rest = _complement_part(prefix, rest)
		except NoMatch: break
		tail.append(part)
	return make_complement(head, tail), rest

def _separator(delimiter:str, text:str) -> str:
	rest = _skip_whitespace(text)
	if not rest.startswith(delimiter): raise NoMatch(text)
	return _skip_whitespace(rest[1:])

def sequence(text:str) -> tuple[Value, str]:
	"""
	Whichever delimiter opens the sequence is the only one that continues it.
	Anything else ends the sequence, and is left for the caller to judge.
	"""
	if not text or text[0] not in DELIMITERS: raise NoMatch(text)
	delimiter = text[0]
	first, rest = value(_skip_whitespace(text[1:]))
	items = [first]
	while True:
		try:
			after = _separator(delimiter, rest)
			item, after = value(after)
		except NoMatch:
			break
		items.append(item)
		rest = after
	return make_sequence(items), rest

_ALTERNATIVES = (complement, sequence, number, word)

def value(text:str) -> tuple[Value, str]:
	""" The order of the alternatives is the precedence of the grammar. """
	for rule in _ALTERNATIVES:
		try: return rule(text)
		except NoMatch: continue
	raise NoMatch(text)

def value_line(text:str) -> tuple[Value, str]:
	""" A value, and then maybe a full stop. """
	it, rest = value(text)
	if rest.startswith("."): rest = rest[1:]
	return it, rest
