"""
The generic scanning loop: find a lexeme, hand it to the bindings, repeat.
"""
from .interface import INITIAL, Recognizer, Bindings
from ..tokens import Span

class Scanner:
	"""
	This is the standard generic scanner, with support for a stack of start-conditions.
	The recognizer picks out each lexeme; the bindings decide what it means.
	"""

	condition : str

	def __init__(self, text:str, recognizer:Recognizer, bindings:Bindings, start=INITIAL, at=0):
		self.__text = text
		self.__size = len(text)
		self.__recognizer = recognizer
		self.__bindings = bindings
		self.__stack = []
		self.enter(start)
		self.left = self.right = at

	def scan_one_item(self):
		cursor = self.left = self.right
		self.right, rule_id = self.__recognizer.best_match(self.__text, cursor, self.condition)
		if rule_id is None:
			self.right = cursor + 1
			self.__bindings.on_stuck(self)
		else:
			self.__bindings.on_match(self, rule_id)

	def has_more(self):
		return self.right < self.__size

	def enter(self, condition):
		""" Change to a different start-condition. """
		self.condition = condition
	def push(self, condition):
		""" Push the current start-condition onto a stack and change to the one specified. """
		self.__stack.append(self.condition)
		self.enter(condition)
	def pop(self):
		""" Jump back to a start-condition pulled from the condition stack. """
		self.enter(self.__stack.pop())

	def span(self) -> Span:
		""" Return the extent of matched text. """
		return Span(self.left, self.right)
	def match(self):
		""" Return the actual matched text """
		return self.__text[self.left:self.right]


class IterableScanner(Scanner):
	"""
	Iterating over this scanner causes it to yield tokens.
	Scan-actions call yy.emit(...) and this object wraps that into an iterable.
	"""

	def __init__(self, text:str, recognizer:Recognizer, bindings:Bindings, start=INITIAL, at=0):
		super().__init__(text, recognizer, bindings, start, at)
		self.__buffer = []

	def __iter__(self):
		while self.has_more():
			self.scan_one_item()
			yield from self.__buffer
			self.__buffer.clear()

	def emit(self, token):
		"""
		During scan rule invocation, call this method with tokens for the
		scanner to yield once it gets control back. One action may emit several.
		"""
		assert token is not None
		self.__buffer.append(token)
