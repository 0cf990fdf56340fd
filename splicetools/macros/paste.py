"""
Paste identifiers together.

Within the tokens given to `expand`, everything between a `[<` marker and the
next `>]` marker is a splice region. The identifiers and literals inside it are
concatenated to form a single identifier, which takes the region's place:

	fn [<some_ "foo" _fn 100>]() -> u32     becomes     fn some_foo_fn100() -> u32

See the `fragments` module for the modifiers that may follow each fragment.

The scan is depth-first and bottom-up. Every group is resolved before the level
containing it, and a level is rebuilt only if something in it changed. Thus,
given no markers at all, `expand` hands back the very same tuple. Splice
regions do not nest; nor may a marker go without its partner.

The engine only ever produces tokens. What the pasted identifiers go on to
declare or mention is the concern of whoever compiles the result.
"""

from typing import Iterator, Optional

from ..tokens import Group, Span, SPLICE_OPEN, SPLICE_CLOSE, is_punct, join_spans
from ..support.interfaces import MalformedSpliceSyntax
from .fragments import SpanReferences, concatenate
from .reassembly import reassemble

def expand(tokens) -> tuple:
	""" Resolve every splice region, at every depth. Fails as a whole or not at all. """
	tokens = tuple(tokens)
	return _expand_level(tokens, SpanReferences(tokens))

def _expand_level(tokens:tuple, references:SpanReferences) -> tuple:
	level = tuple(_expand_group(t, references) if isinstance(t, Group) else t for t in tokens)
	replacements = [
		(start, stop, concatenate(level[start+1:stop-1], span, references))
		for start, stop, span in splice_units(level)
	]
	if not replacements and all(a is b for a, b in zip(tokens, level)):
		return tokens
	return reassemble(level, replacements)

def _expand_group(group:Group, references:SpanReferences) -> Group:
	inner = _expand_level(group.tokens, references)
	return group if inner is group.tokens else group.rebuild(inner)

def splice_units(level) -> Iterator[tuple[int, int, Optional[Span]]]:
	"""
	Yield (start, stop, span) for each splice region of one level, markers included in the range.
	The span runs from the opening marker through the closing one.
	"""
	open_at = None
	for i, token in enumerate(level):
		if is_punct(token, SPLICE_OPEN):
			if open_at is not None:
				raise MalformedSpliceSyntax("splice regions do not nest", token.span)
			open_at = i
		elif is_punct(token, SPLICE_CLOSE):
			if open_at is None:
				raise MalformedSpliceSyntax("'>]' without a matching '[<'", token.span)
			yield open_at, i+1, join_spans(level[open_at].span, token.span)
			open_at = None
	if open_at is not None:
		raise MalformedSpliceSyntax("'[<' without a matching '>]'", level[open_at].span)
