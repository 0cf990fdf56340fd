""" Hook regular expression patterns up to actions on a scanner object. """

import re
from typing import NamedTuple, Optional

from .interface import INITIAL, Recognizer, Bindings, RuleId
from .engine import Scanner, IterableScanner

class Rule(NamedTuple):
	pattern: re.Pattern
	rank: int
	action: Optional[callable]

class Definition(Recognizer, Bindings):
	"""
	A scanner definition is a list of (pattern, action) rules, grouped by start-condition.
	It serves as its own recognizer: at each position it tries every rule in the
	current condition. A match by a higher-ranked rule beats any lower-ranked match,
	long or short; among equal ranks the longest match wins, then the earliest rule.
	"""
	def __init__(self, name="MiniScan Definition"):
		self.name = name
		self.__rules:list[Rule] = []
		self.__conditions:dict[str, list[RuleId]] = {}
		self.__awaiting_action = False

	def scan(self, text:str, *, start=INITIAL) -> IterableScanner:
		if self.__awaiting_action: raise AssertionError('You forgot to provide the action for the final pattern!')
		return IterableScanner(text, self, self, start=start)

	def __install_rule(self, *, action:callable, pattern:re.Pattern, condition=None, rank:int=0) -> RuleId:
		rule_id = len(self.__rules)
		self.__rules.append(Rule(pattern, rank, action))
		if condition is None or isinstance(condition, str): condition = [condition or INITIAL]
		else: assert isinstance(condition, (tuple, list)), type(condition)
		for c in condition:
			self.__conditions.setdefault(c, []).append(rule_id)
		return rule_id

	def token(self, make:callable, pattern:str, *, rank=0, condition=None):
		""" Every member of the pattern becomes the token make(matched text, span). """
		@self.on(pattern, rank=rank, condition=condition)
		def action(yy:IterableScanner): yy.emit(make(yy.match(), yy.span()))

	def ignore(self, pattern:str, *, rank=0, condition=None):
		""" Tell Scanner to ignore what matches the pattern. """
		self.on(pattern, rank=rank, condition=condition)(None)

	def on(self, pattern:str, *, condition=None, rank=0):
		"""
		For instance:
		scanner_definition.on(r'//[^\n]*')(None) # Ignore comments
		@scanner_definition.on(r'[A-Za-z_]+')
		def word(yy): yy.emit(Ident(yy.match(), yy.span()))
		"""
		if self.__awaiting_action: raise AssertionError('You forgot to provide the action for the previous pattern!')
		self.__awaiting_action = True
		compiled = re.compile(pattern)
		def decorator(fn):
			assert self.__awaiting_action
			self.__awaiting_action = False
			assert fn is None or callable(fn)
			self.__install_rule(action=fn, pattern=compiled, condition=condition, rank=rank)
			return fn
		return decorator
	def condition(self, *condition): return ConditionContext(self, *condition)

	def best_match(self, text:str, cursor:int, condition:str) -> tuple[int, Optional[RuleId]]:
		best_right, best_rule = cursor, None
		for rule_id in self.__conditions.get(condition, ()):
			rule = self.__rules[rule_id]
			m = rule.pattern.match(text, cursor)
			if m is None or m.end() == cursor: continue # Zero-width matches never count.
			right = m.end()
			if best_rule is None or (rule.rank, right) > (self.__rules[best_rule].rank, best_right):
				best_right, best_rule = right, rule_id
		return best_right, best_rule

	def on_match(self, yy: Scanner, rule_id:RuleId):
		action = self.__rules[rule_id].action
		if callable(action): action(yy)
		else: assert action is None

class ConditionContext:
	""" Python's context manager protocol simplifies writing definitions of scan conditions. """
	def __init__(self, definition:Definition, *condition):
		self.__definition = definition
		self.__condition = condition
	def __enter__(self): return self
	def __exit__(self, exc_type, exc_val, exc_tb): pass
	def on(self, pattern, *, rank=0): return self.__definition.on(pattern, rank=rank, condition=self.__condition)
	def token(self, make:callable, pattern:str, *, rank=0): self.__definition.token(make, pattern, rank=rank, condition=self.__condition)
	def ignore(self, pattern:str, *, rank=0): self.__definition.ignore(pattern, rank=rank, condition=self.__condition)
