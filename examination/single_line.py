from __future__ import annotations

from typing import Any, Callable, Iterator, Optional, Tuple

import numpy

from .examiner import Examiner


ESCAPES = str.maketrans({
	'"': '\\"',
	"\\": "\\\\",
	"\b": "\\b",
	"\f": "\\f",
	"\n": "\\n",
	"\r": "\\r",
	"\t": "\\t",
})


def escape(text: str) -> str:
	# Single pass, so a produced backslash is never escaped again.
	return text.translate(ESCAPES)


def _square(elements: Iterator[str]) -> str:
	return "[" + ", ".join(elements) + "]"


def _curly(entries: Iterator[str]) -> str:
	return "{" + ", ".join(entries) + "}"


class StringExaminer(Examiner[str]):
	"""Renders any value on a single line.

	Strings and chars are quoted and passed through ``escaper``; doubles and
	floats carry a ``d``/``f`` suffix; sequences render as ``[a, b]``,
	mappings as ``{k=v}`` and examinables as ``Name{prop=value}``.
	"""

	def __init__(self, escaper: Callable[[str], str] = escape):
		self.escaper = escaper

	@staticmethod
	def simple_escaping() -> "StringExaminer":
		return _SIMPLE_ESCAPING

	def array(self, array: Any, elements: Iterator[str]) -> str:
		return _square(elements)

	def collection(self, collection: Any, elements: Iterator[str]) -> str:
		return _square(elements)

	def stream(self, stream: Iterator[Any], elements: Iterator[str]) -> str:
		return _square(elements)

	def primitive_array(self, elements: Iterator[str]) -> str:
		return _square(elements)

	def map(self, mapping: Any, entries: Iterator[Tuple[str, str]]) -> str:
		return _curly(f"{key}={value}" for key, value in entries)

	def examinable(self, name: str, properties: Iterator[Tuple[str, str]]) -> str:
		return name + _curly(f"{key}={value}" for key, value in properties)

	def nil(self) -> str:
		return "null"

	def scalar(self, value: Any) -> str:
		return str(value)

	def examine_string(self, value: Optional[str]) -> str:
		if value is None:
			return self.nil()
		return '"' + self.escaper(value) + '"'

	def examine_boolean(self, value: bool) -> str:
		return "true" if value else "false"

	def examine_byte(self, value: int) -> str:
		return str(value)

	def examine_char(self, value: str) -> str:
		return "'" + self.escaper(value) + "'"

	def examine_double(self, value: float) -> str:
		if isinstance(value, numpy.floating):
			return str(value) + "d"
		return repr(float(value)) + "d"

	def examine_float(self, value: float) -> str:
		# Shortest text that round-trips at the value's own precision: 0.4 not 0.4000000059604645.
		if not isinstance(value, numpy.floating):
			value = numpy.float32(value)
		return str(value) + "f"

	def examine_int(self, value: int) -> str:
		return str(value)

	def examine_long(self, value: int) -> str:
		return str(value)

	def examine_short(self, value: int) -> str:
		return str(value)


_SIMPLE_ESCAPING = StringExaminer()
