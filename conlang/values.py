"""
The values a line of conlang notation turns into.

Everything the grammar builds is one of these, and none of them changes
after construction, so a value may be shared by as many parents as it likes.

Equality is deliberately uneven:
Words and Numbers compare by content, Complements and Verbs by identity,
and Sequences (and Nil) never compare equal to anything, themselves included.
Code that wants structural comparison of trees must walk them itself.
"""
import math
from abc import ABC, abstractmethod
from typing import Optional, Sequence as SequenceOf

class Value(ABC):
	@abstractmethod
	def visit(self, visitor:"ValueVisitor"): pass
	def __repr__(self) -> str:
		it = self.visit(Render())
		assert isinstance(it, str), (it, type(self))
		return it

class Nil(Value):
	""" The empty value. Nothing in the grammar makes one. """
	def visit(self, visitor:"ValueVisitor"): return visitor.on_nil(self)
	def __eq__(self, other): return False
	__hash__ = object.__hash__

NIL = Nil()

class Word(Value):
	""" An atom of text. Two words with the same text are equal. """
	def __init__(self, text:str):
		assert isinstance(text, str), type(text)
		self.text = text
	def visit(self, visitor:"ValueVisitor"): return visitor.on_word(self)
	def __eq__(self, other): return isinstance(other, Word) and self.text == other.text
	def __hash__(self): return hash(self.text)

class Complement(Value):
	""" A value paired with its complement. Two of these are equal only if they are the same one. """
	def __init__(self, head:Value, tail:Value):
		self.head, self.tail = head, tail
	def visit(self, visitor:"ValueVisitor"): return visitor.on_complement(self)

class Verb(Value):
	"""
	An operation which can be performed on an object.
	Concrete verbs live outside this package; here we only need to hold them and tell them apart.
	"""
	@abstractmethod
	def apply(self, complement:Value) -> Value: pass
	@abstractmethod
	def name(self) -> Optional[Word]: pass
	def visit(self, visitor:"ValueVisitor"): return visitor.on_verb(self)

class Number(Value):
	""" A floating-point magnitude, compared numerically. """
	def __init__(self, magnitude:float):
		self.magnitude = float(magnitude)
	def visit(self, visitor:"ValueVisitor"): return visitor.on_number(self)
	def __eq__(self, other): return isinstance(other, Number) and self.magnitude == other.magnitude
	def __hash__(self): return hash(self.magnitude)

class Sequence(Value):
	"""
	An ordered run of values.
	Comparison has no case for sequences, so a sequence is never equal to anything.
	Not even to itself. Surprising, but that is the rule.
	"""
	items: tuple[Value, ...]
	def __init__(self, items:SequenceOf[Value]):
		self.items = tuple(items)
	def visit(self, visitor:"ValueVisitor"): return visitor.on_sequence(self)
	def __eq__(self, other): return False
	__hash__ = object.__hash__
	def __len__(self): return len(self.items)
	def __iter__(self): return iter(self.items)
	def __getitem__(self, index): return self.items[index]

###############################################################################

def make_word(text:str) -> Word:
	return Word(text)

def make_complement(head:Value, tail:SequenceOf[Value]) -> Value:
	"""
	No tail at all means no pair: you get the head back.
	Several tail parts do not chain into nested pairs;
	they become one sequence bound as the tail.
	"""
	if not tail:
		return head
	elif len(tail) == 1:
		return Complement(head, tail[0])
	else:
		return Complement(head, make_sequence(tail))

def make_sequence(contents:SequenceOf[Value]) -> Sequence:
	return Sequence(contents)

###############################################################################

class ValueVisitor:
	def on_nil(self, n:Nil): raise NotImplementedError(type(self))
	def on_word(self, w:Word): raise NotImplementedError(type(self))
	def on_complement(self, c:Complement): raise NotImplementedError(type(self))
	def on_verb(self, v:Verb): raise NotImplementedError(type(self))
	def on_number(self, n:Number): raise NotImplementedError(type(self))
	def on_sequence(self, s:Sequence): raise NotImplementedError(type(self))

class Render(ValueVisitor):
	""" Return the debugging representation of a value, as the read-print loop shows it. """
	def on_nil(self, n:Nil):
		return "NOTHING"
	def on_word(self, w:Word):
		return _quote(w.text)
	def on_complement(self, c:Complement):
		return "(%s . %s)"%(c.head.visit(self), c.tail.visit(self))
	def on_verb(self, v:Verb):
		name = v.name()
		if name is None: return "FORBIDDENMAGIC"
		else: return name.visit(self)
	def on_number(self, n:Number):
		return _float_text(n.magnitude)
	def on_sequence(self, s:Sequence):
		return "[%s]"%(", ".join(item.visit(self) for item in s.items))

_ESCAPES = {"\0":"\\0", "\t":"\\t", "\r":"\\r", "\n":"\\n", "\\":"\\\\", '"':'\\"'}

def _escape(c:str) -> str:
	if c in _ESCAPES: return _ESCAPES[c]
	if c.isprintable(): return c
	return "\\u{%x}"%ord(c)

def _quote(text:str) -> str:
	return '"%s"'%"".join(map(_escape, text))

def _float_text(x:float) -> str:
	# repr already picks the digits and where exponent form begins;
	# only the spelling of the exponent and of not-a-number needs adjusting.
	if math.isnan(x): return "NaN"
	text = repr(x)
	if "e" in text:
		mantissa, exponent = text.split("e")
		return "%se%d"%(mantissa, int(exponent))
	return text
