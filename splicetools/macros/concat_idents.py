"""
Concatenate two identifiers.

This is the older, simpler cousin of `paste`: `concat_idents!(prefix_, NAME)` becomes
the single identifier `prefix_NAME`. The result has the span of the second
argument, since that's usually the part the caller supplied.
"""

from ..tokens import Ident, is_punct
from ..support.interfaces import MalformedSpliceSyntax

def concat_idents(tokens) -> tuple:
	tokens = tuple(tokens)
	if len(tokens) == 4 and is_punct(tokens[3], ','): tokens = tokens[:3] # Trailing comma is fine.
	if not tokens:
		raise MalformedSpliceSyntax("concat_idents needs two identifiers")
	first = _expect_ident(tokens, 0)
	if len(tokens) < 2 or not is_punct(tokens[1], ','):
		raise MalformedSpliceSyntax("expected ',' after the first identifier", (tokens[1] if len(tokens) > 1 else first).span)
	second = _expect_ident(tokens, 2)
	if len(tokens) > 3:
		raise MalformedSpliceSyntax("concat_idents takes exactly two identifiers", tokens[3].span)
	return (Ident(first.text + second.text, second.span),)

def _expect_ident(tokens, index) -> Ident:
	if index >= len(tokens):
		raise MalformedSpliceSyntax("expected an identifier", tokens[-1].span)
	if not isinstance(tokens[index], Ident):
		raise MalformedSpliceSyntax("expected an identifier, found %r"%str(tokens[index]), tokens[index].span)
	return tokens[index]
