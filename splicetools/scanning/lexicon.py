"""
The lexical grammar of the host language (which looks a great deal like Rust),
and the tree-builder that nests delimited groups.

Splice markers get special treatment. `[<` is a marker only if a `>]` follows
before any other bracket, brace, or semicolon; a nested `[<` doesn't count
against it. Anywhere else it is just `[` then `<`, so that valid code like
`TABLE[<u8 as Tr>::N]` scans as usual. A marker pushes the SPLICE condition,
and only within that condition does `>]` make a closing marker, so that
`table[n >> 1]` or `a[(b > c)]` are also unaffected.
A nested `[<` still pushes: the markers come out balanced and the paste
engine gets to complain about the nesting.
"""

import re

from .interface import INITIAL, SPLICE
from . import miniscan
from ..support.interfaces import DelimiterMismatch
from ..tokens import Ident, Literal, LiteralKind, Punct, Group, Span, OPENERS, CLOSERS, SPLICE_OPEN, SPLICE_CLOSE, join_spans

HOST = miniscan.Definition("host language")

OPERATORS = [
	'>>=', '<<=', '...', '..=',
	'::', '->', '=>', '==', '!=', '<=', '>=', '&&', '||', '..',
	'+=', '-=', '*=', '/=', '%=', '^=', '&=', '|=', '<<', '>>',
]

ESCAPE = r'\\(?:x[0-9a-fA-F]{2}|u\{[0-9a-fA-F_]{1,6}\}|.)'
QUOTED = r'"(?:[^"\\]|\\[\s\S])*"'
SPLICE_AHEAD = r'\[<(?=(?:[^\[\]{};]|\[<)*?>\])'

def _literal(kind):
	return lambda text, span: Literal(text, kind, span)

with HOST.condition(INITIAL, SPLICE) as both:
	both.ignore(r'\s+')
	both.ignore(r'//[^\n]*')
	both.ignore(r'/\*[\s\S]*?\*/')

	@both.on(SPLICE_AHEAD)
	def splice_open(yy):
		yy.push(SPLICE)
		yy.emit(Punct(SPLICE_OPEN, yy.span()))

	both.token(Ident, r'(?:r#)?[^\W\d]\w*')

	@both.on(r"'[^\W\d]\w*")
	def lifetime(yy):
		# The tick and the name are separate tokens, as the compiler sees them.
		yy.emit(Punct("'", Span(yy.left, yy.left+1)))
		yy.emit(Ident(yy.match()[1:], Span(yy.left+1, yy.right)))

	both.token(_literal(LiteralKind.CHAR), r"'(?:[^'\\\n]|%s)'"%ESCAPE)
	both.token(_literal(LiteralKind.BYTE), r"b'(?:[^'\\\n]|%s)'"%ESCAPE)
	both.token(_literal(LiteralKind.STRING), QUOTED)
	both.token(_literal(LiteralKind.BYTE_STRING), 'b'+QUOTED)
	both.token(_literal(LiteralKind.RAW_STRING), r'r(?P<hashes>#*)"[\s\S]*?"(?P=hashes)')
	both.token(_literal(LiteralKind.BYTE_STRING), r'br(?P<hashes>#*)"[\s\S]*?"(?P=hashes)')
	# Integers come first, so a plain run of digits is an integer and not a float.
	both.token(_literal(LiteralKind.INTEGER), r'(?:0x[0-9a-fA-F_]+|0o[0-7_]+|0b[01_]+|[0-9][0-9_]*)(?:[iu](?:8|16|32|64|128|size))?')
	both.token(_literal(LiteralKind.FLOAT), r'[0-9][0-9_]*(?:\.[0-9][0-9_]*)?(?:[eE][+-]?[0-9_]+)?(?:f32|f64)?')

	for op in OPERATORS: both.token(Punct, re.escape(op))
	both.token(Punct, r'[-+*/%^!&|=<>@.,;:#$?~()\[\]{}]')

with HOST.condition(SPLICE) as splice:
	@splice.on(r'>\]', rank=1)
	def splice_close(yy):
		yy.pop()
		yy.emit(Punct(SPLICE_CLOSE, yy.span()))

def lex(text:str):
	""" Flat token stream. Delimiters are still plain Punct tokens. """
	return HOST.scan(text)

def build_tree(flat) -> tuple:
	""" Nest each delimited run of tokens into a Group. The group's span covers both delimiters. """
	stack = []
	children = []
	for token in flat:
		if isinstance(token, Punct) and token.symbol in OPENERS:
			stack.append((OPENERS[token.symbol], token, children))
			children = []
		elif isinstance(token, Punct) and token.symbol in CLOSERS:
			if not stack:
				raise DelimiterMismatch("unexpected closing delimiter %r"%token.symbol, token.span)
			delimiter, opener, outer = stack.pop()
			if CLOSERS[token.symbol] is not delimiter:
				raise DelimiterMismatch("closing delimiter %r does not match %r"%(token.symbol, opener.symbol), token.span)
			outer.append(Group(delimiter, tuple(children), join_spans(opener.span, token.span)))
			children = outer
		else:
			children.append(token)
	if stack:
		opener = stack[-1][1]
		raise DelimiterMismatch("unclosed delimiter %r"%opener.symbol, opener.span)
	return tuple(children)

def tokenize(text:str) -> tuple:
	""" Text to token tree. """
	return build_tree(lex(text))
