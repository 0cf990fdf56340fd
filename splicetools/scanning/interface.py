"""
Scanning Interface Definitions.
"""
from abc import ABC, abstractmethod
from typing import Optional

from ..support.interfaces import ScannerBlocked

RuleId = int

INITIAL = 'INITIAL'
SPLICE = 'SPLICE'

class Recognizer(ABC):
	"""
	A recognizer determines which rule matches but knows nothing about what the rules do.
	This interface captures the operation required to execute the general scanning algorithm.
	"""

	@abstractmethod
	def best_match(self, text:str, cursor:int, condition:str) -> tuple[int, Optional[RuleId]]:
		"""
		Return the end of the lexeme starting at `cursor` and the rule that matched it.
		If nothing matches, the rule is None and the end is meaningless.
		The highest-ranked matching rule wins; among equal ranks, the longest match, then the earliest rule.
		"""

class Bindings(ABC):

	@abstractmethod
	def on_match(self, yy, rule_id:RuleId):
		""" Delegate to whatever action the rule was defined with. """

	def on_stuck(self, yy):
		""" If you override this to return normally, scanning will continue normally afterward. """
		raise ScannerBlocked(yy.left, yy.condition)
