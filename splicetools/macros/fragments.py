"""
Concatenation and modifiers: the fold that turns the inside of one splice region into one identifier.

Within a splice region, each fragment is an identifier or a literal, and may be
followed by any number of `:modifier` suffixes, applied left to right:

	lower      -- the fragment's text goes to lower case.
	upper      -- the fragment's text goes to upper case.
	span       -- the pasted identifier takes this fragment's provenance.
	span(name) -- the pasted identifier takes the provenance of `name`, wherever
	              it first appears in the invocation.

If conflicting case modifiers appear on one fragment, the last one wins,
simply because each is applied in turn. The `span` modifier may appear at most
once in a region; with none, the pasted identifier takes the span of the region itself.

Literals: a string contributes its contents, which must be identifier characters.
An integer without a type suffix contributes its value in decimal, not its text
as written, so `0x10` contributes `16` and `1_000` contributes `1000`. Suffixed
integers like `1u32` are rejected, as are floats and every other literal kind.

Invisible groups (the kind macro substitution produces) are transparent here.
Anything else that isn't an identifier or a suitable literal is an error.
"""

import re
from typing import NamedTuple, Optional

from ..tokens import Ident, Literal, LiteralKind, Group, Delimiter, Span, is_punct
from ..support.interfaces import (
	MalformedSpliceSyntax, EmptySpliceUnit, UnsupportedFragmentKind, InvalidIdentifier,
	UnknownModifier, UnresolvedSpanReference,
)
from ..support.symtab import NameSpace, NoSuchSymbol

class Fragment(NamedTuple):
	text: str
	span: Optional[Span]
	pinned: bool = False # Set by the `span` modifier: this fragment's span becomes the result's.

INTEGER = re.compile(r'(0x|0o|0b)?([0-9a-fA-F_]+)')
RADIX = {None: 10, '0x': 16, '0o': 8, '0b': 2}

def fragment_text(token) -> str:
	""" What an identifier or literal contributes to the pasted identifier. """
	if isinstance(token, Ident):
		return token.text[2:] if token.text.startswith('r#') else token.text
	if token.kind is LiteralKind.STRING:
		inner = token.text[1:-1]
		if all(c.isalnum() or c == '_' for c in inner): return inner
		raise UnsupportedFragmentKind("string literal %s cannot be rendered as part of an identifier"%token.text, token.span)
	if token.kind is LiteralKind.INTEGER:
		m = INTEGER.fullmatch(token.text)
		if m:
			try: return str(int(m.group(2).replace('_', ''), RADIX[m.group(1)]))
			except ValueError: pass
		raise UnsupportedFragmentKind("integer literal %s has no unambiguous identifier form"%token.text, token.span)
	raise UnsupportedFragmentKind("%s literals cannot be pasted"%token.kind.value, token.span)

class SpanReferences:
	"""
	Where each name first appears in an invocation, in document order.
	The table is built on first use, because most invocations never need it.
	Names mentioned only as the argument of a `span(...)` modifier don't count:
	otherwise every reference would trivially resolve to itself.
	"""
	def __init__(self, tokens):
		self.__tokens = tokens
		self.__table:Optional[NameSpace[Span]] = None

	def resolve(self, name:Ident) -> Optional[Span]:
		if self.__table is None:
			self.__table = NameSpace(place='invocation')
			self.__collect(self.__tokens)
		try: return self.__table[name.text]
		except NoSuchSymbol:
			raise UnresolvedSpanReference("span reference `%s` does not appear in this invocation"%name.text, name.span) from None

	def __collect(self, tokens):
		for i, token in enumerate(tokens):
			if isinstance(token, Ident):
				if token.text not in self.__table: self.__table[token.text] = token.span
			elif isinstance(token, Group) and not _is_span_argument(tokens, i):
				self.__collect(token.tokens)

def _is_span_argument(tokens, i) -> bool:
	return i >= 2 and is_punct(tokens[i-2], ':') and tokens[i-1] == Ident('span') and tokens[i].delimiter is Delimiter.PARENTHESIS

def _no_argument(name:Ident, argument:Optional[Group]):
	if argument is not None:
		raise MalformedSpliceSyntax("modifier `%s` takes no argument"%name.text, argument.span)

def _lower(fragment:Fragment, name:Ident, argument, references:SpanReferences) -> Fragment:
	_no_argument(name, argument)
	return fragment._replace(text=fragment.text.lower())

def _upper(fragment:Fragment, name:Ident, argument, references:SpanReferences) -> Fragment:
	_no_argument(name, argument)
	return fragment._replace(text=fragment.text.upper())

def _span(fragment:Fragment, name:Ident, argument, references:SpanReferences) -> Fragment:
	if argument is None: return fragment._replace(pinned=True)
	if len(argument.tokens) != 1 or not isinstance(argument.tokens[0], Ident):
		raise MalformedSpliceSyntax("`span(...)` takes exactly one identifier", argument.span)
	return Fragment(fragment.text, references.resolve(argument.tokens[0]), True)

MODIFIERS = {
	'lower': _lower,
	'upper': _upper,
	'span': _span,
}

def _transparent(tokens):
	""" Flatten invisible groups in place; nothing else. """
	for token in tokens:
		if isinstance(token, Group) and token.delimiter is Delimiter.NONE: yield from _transparent(token.tokens)
		else: yield token

def parse_fragments(tokens, references:SpanReferences) -> list[Fragment]:
	""" Apply each fragment's modifiers as they come. Raises on anything not fit to paste. """
	items = list(_transparent(tokens))
	fragments = []
	i = 0
	while i < len(items):
		token = items[i]
		i += 1
		if isinstance(token, (Ident, Literal)):
			fragments.append(Fragment(fragment_text(token), token.span))
		elif is_punct(token, ':'):
			if not fragments:
				raise MalformedSpliceSyntax("modifier with no fragment before it", token.span)
			if i == len(items) or not isinstance(items[i], Ident):
				raise MalformedSpliceSyntax("expected a modifier name after ':'", token.span)
			name = items[i]
			i += 1
			argument = None
			if i < len(items) and isinstance(items[i], Group) and items[i].delimiter is Delimiter.PARENTHESIS:
				argument = items[i]
				i += 1
			try: modifier = MODIFIERS[name.text]
			except KeyError: raise UnknownModifier("unknown modifier `%s`"%name.text, name.span) from None
			if modifier is _span and any(f.pinned for f in fragments):
				raise MalformedSpliceSyntax("the span modifier may appear at most once", name.span)
			fragments[-1] = modifier(fragments[-1], name, argument, references)
		elif isinstance(token, Group):
			raise UnsupportedFragmentKind("a %s group cannot be pasted"%token.delimiter.name.lower(), token.span)
		else:
			raise UnsupportedFragmentKind("cannot paste %r"%str(token), token.span)
	return fragments

def concatenate(tokens, unit_span:Optional[Span], references:SpanReferences) -> Ident:
	""" The contents of one splice region, markers excluded, become one identifier. """
	if not tokens:
		raise EmptySpliceUnit("nothing to paste between '[<' and '>]'", unit_span)
	fragments = parse_fragments(tokens, references)
	if not fragments:
		raise EmptySpliceUnit("nothing to paste between '[<' and '>]'", unit_span)
	pasted = ''.join(f.text for f in fragments)
	span = next((f.span for f in fragments if f.pinned), unit_span)
	if not pasted.isidentifier():
		raise InvalidIdentifier("pasted text %r is not a valid identifier"%pasted, span)
	return Ident(pasted, span)
