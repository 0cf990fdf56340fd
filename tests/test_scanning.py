import unittest
from splicetools.scanning import miniscan, lexicon
from splicetools.scanning.interface import INITIAL, SPLICE
from splicetools.support.interfaces import ScannerBlocked, DelimiterMismatch
from splicetools.tokens import Ident, Literal, LiteralKind, Punct, Group, Delimiter, Span

def pair(kind):
	return lambda text, span: (kind, text)

class TestMiniScan(unittest.TestCase):
	def test_01_simple_tokens_with_rank_feature(self):
		s = miniscan.Definition()
		s.ignore(r'\s+') # Ignore spaces except inasmuch as they separate tokens.
		s.token(pair('word'), r'\w+') # The digits are included in the \w shorthand,
		s.token(lambda text, span: ('number', int(text)), r'\d+', rank=1) # but the higher rank makes numbers stand out.
		self.assertEqual(
			[
				('word', 'abc'),
				('number', 123),
				('word', 'def456'),
				('number', 789),
				('word', 'XYZ'),
			],
			list(s.scan(' abc   123  def456  789XYZ ')),
		)

	def test_02_longest_match_then_earliest_rule(self):
		s = miniscan.Definition()
		s.token(pair('first'), r'ab')
		s.token(pair('second'), r'ab')
		s.token(pair('longer'), r'abc')
		self.assertEqual([('longer', 'abc'), ('first', 'ab')], list(s.scan('abcab')))

	def test_03_conditions(self):
		s = miniscan.Definition()
		s.token(pair('word'), r'\w+', condition=(INITIAL, 'QUOTE'))
		@s.on(r'"')
		def enter(yy): yy.push('QUOTE')
		with s.condition('QUOTE') as quote:
			@quote.on(r'"')
			def leave(yy): yy.pop()
			quote.token(pair('space'), r' +')
		s.ignore(r' +')
		self.assertEqual(
			[('word', 'a'), ('word', 'b'), ('space', ' '), ('word', 'c'), ('word', 'd')],
			list(s.scan('a "b c" d')),
		)

	def test_04_forgotten_action(self):
		s = miniscan.Definition()
		s.on(r'bert') # forget to provide an action,
		with self.assertRaises(AssertionError):
			s.on('.') # triggering an exception at the next attempt to define a pattern.

	def test_05_blocked(self):
		s = miniscan.Definition()
		s.token(pair('word'), r'\w+')
		with self.assertRaises(ScannerBlocked) as cm:
			list(s.scan('abc?'))
		self.assertEqual(3, cm.exception.position)
		self.assertEqual(INITIAL, cm.exception.condition)
		self.assertEqual(Span(3, 4), cm.exception.span)

class TestLexicon(unittest.TestCase):
	def lex(self, text):
		return list(lexicon.lex(text))

	def test_identifiers_and_literals(self):
		self.assertEqual(
			[
				Ident('foo'), Ident('r#fn'), Ident('_'),
				Literal("'b'", LiteralKind.CHAR),
				Literal("b'x'", LiteralKind.BYTE),
				Literal('1.5', LiteralKind.FLOAT),
				Literal('0x1f', LiteralKind.INTEGER),
				Literal('7u8', LiteralKind.INTEGER),
				Literal('2e10', LiteralKind.FLOAT),
				Literal('"s\\"t"', LiteralKind.STRING),
				Literal('b"x"', LiteralKind.BYTE_STRING),
				Literal('r#"raw"#', LiteralKind.RAW_STRING),
			],
			self.lex('foo r#fn _ \'b\' b\'x\' 1.5 0x1f 7u8 2e10 "s\\"t" b"x" r#"raw"#'),
		)

	def test_lifetime_is_tick_and_name(self):
		self.assertEqual([Punct('&'), Punct("'"), Ident('a'), Ident('str')], self.lex("&'a str"))
		tokens = self.lex("'static")
		self.assertEqual(Span(0, 1), tokens[0].span)
		self.assertEqual(Span(1, 7), tokens[1].span)

	def test_operators_take_the_longest_form(self):
		self.assertEqual(
			[Ident('a'), Punct('::'), Ident('b'), Punct('->'), Punct('..='), Punct('>>='), Punct(':')],
			self.lex('a::b -> ..= >>= :'),
		)

	def test_range_is_not_a_float(self):
		self.assertEqual(
			[Literal('1', LiteralKind.INTEGER), Punct('..'), Literal('2', LiteralKind.INTEGER)],
			self.lex('1..2'),
		)

	def test_comments_and_spans(self):
		tokens = self.lex('x // gone\n /* also\ngone */ y')
		self.assertEqual([Ident('x'), Ident('y')], tokens)
		self.assertEqual(Span(0, 1), tokens[0].span)
		self.assertEqual(Span(27, 28), tokens[1].span)

	def test_splice_markers(self):
		self.assertEqual(
			[Punct('[<'), Ident('a'), Punct(':'), Ident('lower'), Punct('>]')],
			self.lex('[<a:lower>]'),
		)

	def test_close_marker_only_inside_splice(self):
		self.assertEqual([Ident('a'), Punct('>'), Punct(']')], self.lex('a >]'))

	def test_open_marker_needs_a_close_ahead(self):
		self.assertEqual(
			[Ident('TABLE'), Punct('['), Punct('<'), Ident('u8'), Ident('as'), Ident('Tr'), Punct('>'), Punct('::'), Ident('N'), Punct(']')],
			self.lex('TABLE[<u8 as Tr>::N]'),
		)
		self.assertEqual([Punct('['), Punct('<'), Ident('a'), Punct(';'), Punct('>'), Punct(']')], self.lex('[<a; >]'))
		self.assertEqual([Punct('['), Punct('<'), Ident('a'), Punct(']'), Punct('>'), Punct(']')], self.lex('[<a] >]'))

	def test_nested_open_marker_still_balances(self):
		self.assertEqual(
			[Punct('[<'), Ident('a'), Punct('[<'), Ident('b'), Punct('>]'), Punct('>]')],
			self.lex('[<a [<b>] >]'),
		)

	def test_blocked(self):
		with self.assertRaises(ScannerBlocked) as cm:
			self.lex('a ` b')
		self.assertEqual(2, cm.exception.position)
		with self.assertRaises(ScannerBlocked) as cm:
			self.lex('[< ` >]')
		self.assertEqual(SPLICE, cm.exception.condition)

class TestTreeBuilder(unittest.TestCase):
	def test_groups(self):
		tree = lexicon.tokenize('f(x, [y]) { }')
		self.assertEqual(
			(
				Ident('f'),
				Group(Delimiter.PARENTHESIS, (Ident('x'), Punct(','), Group(Delimiter.BRACKET, (Ident('y'),)))),
				Group(Delimiter.BRACE, ()),
			),
			tree,
		)
		self.assertEqual(Span(1, 9), tree[1].span)

	def test_generic_inside_brackets(self):
		tree = lexicon.tokenize('x[Vec<u8>]')
		self.assertEqual(Group(Delimiter.BRACKET, (Ident('Vec'), Punct('<'), Ident('u8'), Punct('>'))), tree[1])

	def test_qualified_path_in_brackets(self):
		tree = lexicon.tokenize('&[<T as Default>::default()]')
		self.assertEqual(Group(Delimiter.BRACKET, (
			Punct('<'), Ident('T'), Ident('as'), Ident('Default'), Punct('>'), Punct('::'), Ident('default'),
			Group(Delimiter.PARENTHESIS, ()),
		)), tree[1])

	def test_mismatch(self):
		for text, span in [('(]', Span(1, 2)), ('(a', Span(0, 1)), ('a)', Span(1, 2)), ('a >]', Span(3, 4)), ('fn [<a b', Span(3, 4))]:
			with self.subTest(text=text):
				with self.assertRaises(DelimiterMismatch) as cm:
					lexicon.tokenize(text)
				self.assertEqual(span, cm.exception.span)

if __name__ == '__main__':
	unittest.main()
