"""
This file aggregates the exception types which SpliceTools deals in.

Every failure the machinery can detect is a LanguageError. They all know
(or at least try to know) where in the source text the trouble lies, so
that a tool can show the user a picture of the offending spot. The `span`
attribute is that location, or None if the tokens came from somewhere
other than a scanned text (for instance, built by hand in a test).

None of these is recoverable within the engine: there is no partial-output mode.
"""

from .failureprone import Issue, Evidence, Severity
from ..tokens import Span

class LanguageError(ValueError):
	""" Base class of all exceptions arising from the language machinery. """
	phase = 'translating'

	def __init__(self, message:str, span=None):
		super().__init__(message, span)
		self.message, self.span = message, span

	def __str__(self): return self.message

	def as_issue(self, key=None) -> Issue:
		""" Package this error for display. `key` names the source text it came from. """
		evidence = {} if self.span is None else {key: [Evidence(self.span.as_slice())]}
		return Issue(self.phase, Severity.ERROR, self.message, evidence)

class ScannerBlocked(LanguageError):
	"""
	Raised (by default) if a scanner gets blocked.
	Parameters are:
		the string offset where it happened.
		the current start-condition of the scanner.
	"""
	phase = 'scanning'

	def __init__(self, position, condition):
		super().__init__("unexpected character in condition %s"%condition, Span(position, position+1))
		self.position, self.condition = position, condition

class DelimiterMismatch(LanguageError):
	""" Some bracket, brace, or parenthesis lacks its partner. """
	phase = 'grouping'

class SpliceError(LanguageError):
	""" Base class of the failures detected while pasting identifiers together. """
	phase = 'pasting'

class MalformedSpliceSyntax(SpliceError):
	""" Unmatched or nested splice markers, or a modifier suffix in a bad place. """

class EmptySpliceUnit(SpliceError):
	""" Nothing at all between the markers. """

class UnsupportedFragmentKind(SpliceError):
	""" Only identifiers and certain literals may be pasted together. """

class InvalidIdentifier(UnsupportedFragmentKind):
	""" The fragments were fine individually, but the concatenation is no identifier. """

class UnknownModifier(SpliceError):
	""" A modifier name not in the recognized set. """

class UnresolvedSpanReference(SpliceError):
	""" A `span(name)` modifier named something absent from the invocation. """
