import unittest
from splicetools.support.failureprone import SourceText, illustration, Issue, Evidence, Severity
from splicetools.support.interfaces import LanguageError, UnknownModifier
from splicetools.macros import registry
from splicetools.tokens import Span

TEXT = "paste! {\n    fn [<foo:bogus>]() {}\n}\n"

class TestSourceText(unittest.TestCase):
	def test_row_col(self):
		source = SourceText(TEXT)
		self.assertEqual((1, 0), source.find_row_col(0))
		self.assertEqual((2, 4), source.find_row_col(13))
		self.assertEqual("    fn [<foo:bogus>]() {}\n", source.line_of_text(2))

	def test_other_line_breaks(self):
		source = SourceText("a\r\nb\rc", line_breaks='normal')
		self.assertEqual((3, 0), source.find_row_col(5))
		source = SourceText("a\r\nb\rc", line_breaks='unix')
		self.assertEqual((2, 2), source.find_row_col(5))

	def test_excerpt(self):
		source = SourceText(TEXT, filename='demo.rs')
		start = TEXT.index('bogus')
		self.assertEqual(22, start)
		self.assertEqual(
			"     2 :    fn [<foo:bogus>]() {}\n" + ' '*(8+13) + '^^^^^ unknown',
			source.excerpt(Evidence(slice(start, start+5), 'unknown')),
		)

	def test_illustration(self):
		self.assertEqual("abc def\n    ^^^ here", illustration("abc def", 4, 3, caption='here'))

class TestIssue(unittest.TestCase):
	def test_error_as_issue(self):
		with self.assertRaises(UnknownModifier) as cm:
			registry.expand_source(TEXT)
		issue = cm.exception.as_issue('demo')
		self.assertEqual('pasting', issue.phase)
		self.assertIs(Severity.ERROR, issue.severity)
		source = SourceText(TEXT, filename='demo.rs')
		text = issue.as_text({'demo': source}.__getitem__)
		self.assertEqual([
			"Error while pasting: unknown modifier `bogus`",
			"Excerpt from demo.rs :",
			"     2 :    fn [<foo:bogus>]() {}",
			' '*(8+13) + '^^^^^ here',
		], text.split('\n'))

	def test_error_without_span(self):
		issue = LanguageError("no idea where").as_issue()
		self.assertEqual({}, issue.evidence)
		self.assertEqual("Error while translating: no idea where", issue.as_text(None))

	def test_evidence(self):
		issue = Issue('testing', Severity.WARNING, 'hmm', {'k': [Evidence(Span(0, 5).as_slice(), 'this')]})
		self.assertEqual(5, issue.evidence['k'][0].width())
		self.assertEqual("Warning while testing: hmm\n     1 :paste! {\n        ^^^^^ this", issue.as_text(lambda key: SourceText(TEXT)))

if __name__ == '__main__':
	unittest.main()
