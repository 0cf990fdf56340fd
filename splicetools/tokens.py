"""
The token model: what a macro expander receives and what it gives back.

A token sequence is a tuple of tokens. Delimited sub-sequences are already
nested into Group tokens, so a sequence is really a tree. Tokens are immutable;
a rewrite builds fresh tuples and fresh groups, and it goes out of its way
to re-use the very same objects wherever nothing changed.

Each token carries a span: its provenance, for the sake of diagnostics.
Spans do not participate in equality. Two sequences are equal if they hold the
same kinds of tokens with the same text in the same order, wherever they came from.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple, Optional, Iterable, Iterator

class Span(NamedTuple):
	""" Character offsets into the text a token was scanned from. """
	start: int
	stop: int

	def join(self, other:"Span") -> "Span":
		return Span(min(self.start, other.start), max(self.stop, other.stop))

	def as_slice(self) -> slice: return slice(self.start, self.stop)

def join_spans(first:Optional[Span], last:Optional[Span]) -> Optional[Span]:
	""" Either side may be missing if the tokens were made by hand. """
	if first is None: return last
	if last is None: return first
	return first.join(last)

class LiteralKind(Enum):
	INTEGER = 'integer'
	FLOAT = 'float'
	STRING = 'string'
	RAW_STRING = 'raw string'
	BYTE_STRING = 'byte string'
	CHAR = 'char'
	BYTE = 'byte'

class Delimiter(Enum):
	""" Value is the (open, close) pair. The invisible kind comes from macro substitution, never from text. """
	PARENTHESIS = ('(', ')')
	BRACKET = ('[', ']')
	BRACE = ('{', '}')
	NONE = ('', '')

	@property
	def open(self): return self.value[0]
	@property
	def close(self): return self.value[1]

OPENERS = {d.open: d for d in Delimiter if d is not Delimiter.NONE}
CLOSERS = {d.close: d for d in Delimiter if d is not Delimiter.NONE}

# The reserved two-character markers around a splice region.
SPLICE_OPEN = '[<'
SPLICE_CLOSE = '>]'

@dataclass(frozen=True)
class Ident:
	text: str
	span: Optional[Span] = field(default=None, compare=False)
	def __str__(self): return self.text

@dataclass(frozen=True)
class Literal:
	text: str
	kind: LiteralKind
	span: Optional[Span] = field(default=None, compare=False)
	def __str__(self): return self.text

@dataclass(frozen=True)
class Punct:
	symbol: str
	span: Optional[Span] = field(default=None, compare=False)
	def __str__(self): return self.symbol

@dataclass(frozen=True)
class Group:
	delimiter: Delimiter
	tokens: tuple
	span: Optional[Span] = field(default=None, compare=False)
	def __str__(self): return render((self,))
	def rebuild(self, tokens) -> "Group":
		""" Same delimiter and span, different contents. """
		return Group(self.delimiter, tuple(tokens), self.span)


def is_punct(token, symbol:str) -> bool:
	return isinstance(token, Punct) and token.symbol == symbol

def walk(tokens:Iterable) -> Iterator:
	""" Every token in document order, descending into groups right after the group itself. """
	for token in tokens:
		yield token
		if isinstance(token, Group):
			yield from walk(token.tokens)

def render(tokens:Iterable) -> str:
	""" Tokens back to text. Not pretty, but it scans back into the same tree. """
	text = ""
	glue = True
	for token in tokens:
		if isinstance(token, Group):
			inner = render(token.tokens)
			if token.delimiter is Delimiter.NONE: part = inner
			elif inner: part = token.delimiter.open + " " + inner + " " + token.delimiter.close
			else: part = token.delimiter.open + token.delimiter.close
		else:
			part = str(token)
		if not part: continue
		text += part if glue else " " + part
		glue = is_punct(token, "'") # A lifetime's tick sticks to its name.
	return text
