from __future__ import annotations

from typing import Any, Iterable, Iterator, List, Optional, Tuple

from .config import DEFAULT_LAYOUT, LayoutConfig
from .examiner import Examiner
from .single_line import StringExaminer


Lines = List[str]


def _flatten(delimiter: str, blocks: Iterable[Lines]) -> Lines:
	flat: Lines = []
	for block in blocks:
		if flat:
			flat[-1] += delimiter
		flat.extend(block)
	return flat


def _indent(indent: str, lines: Lines) -> Lines:
	return [indent + line for line in lines]


def _enclose(indent: str, lines: Lines, opening: str, closing: str) -> Lines:
	if not lines:
		return [opening + closing]
	return [opening] + _indent(indent, lines) + [closing]


def _association(left: Lines, middle: str, right: Lines) -> Lines:
	"""Lay out a key/value pair so that the separator column lines up.

	Continuation rows are padded only when the left side spans several
	lines; a one-line key leaves the value's extra lines untouched.
	"""
	lefts = len(left)
	rights = len(right)
	height = max(lefts, rights)
	left_width = max((len(line) for line in left), default=0)

	left_pad = "" if lefts < 2 else " " * left_width
	middle_pad = "" if lefts < 2 else " " * len(middle)

	rows: Lines = []
	for i in range(height):
		cell = left[i].ljust(left_width) if i < lefts else left_pad
		m = middle if i == 0 else middle_pad
		r = right[i] if i < rights else ""
		rows.append(cell + m + r)
	return rows


class MultiLineStringExaminer(Examiner[Lines]):
	"""Renders values as indented lines with aligned ``=`` columns.

	Leaf values are rendered by a single-line ``StringExaminer``. The lines
	carry no terminators; join them with whatever separator suits the caller.
	"""

	def __init__(self, examiner: Optional[StringExaminer] = None, config: Optional[LayoutConfig] = None):
		self.examiner = examiner or StringExaminer.simple_escaping()
		self.config = config or DEFAULT_LAYOUT

	@staticmethod
	def simple_escaping() -> "MultiLineStringExaminer":
		return _SIMPLE_ESCAPING

	def _array_like(self, blocks: Iterable[Lines]) -> Lines:
		flattened = _flatten(self.config.delimiter, blocks)
		return _enclose(self.config.indent, flattened, "[", "]")

	def array(self, array: Any, elements: Iterator[Lines]) -> Lines:
		return self._array_like(elements)

	def collection(self, collection: Any, elements: Iterator[Lines]) -> Lines:
		return self._array_like(elements)

	def stream(self, stream: Iterator[Any], elements: Iterator[Lines]) -> Lines:
		return self._array_like(elements)

	def primitive_array(self, elements: Iterator[Lines]) -> Lines:
		return self._array_like(elements)

	def map(self, mapping: Any, entries: Iterator[Tuple[Lines, Lines]]) -> Lines:
		separator = self.config.separator
		flattened = _flatten(
			self.config.delimiter,
			(_association(key, separator, value) for key, value in entries),
		)
		return _enclose(self.config.indent, flattened, "{", "}")

	def examinable(self, name: str, properties: Iterator[Tuple[str, Lines]]) -> Lines:
		separator = self.config.separator
		flattened = _flatten(
			self.config.delimiter,
			(_association(self.examine_string(key), separator, value) for key, value in properties),
		)
		return _enclose(self.config.indent, flattened, name + "{", "}")

	def nil(self) -> Lines:
		return [self.examiner.nil()]

	def scalar(self, value: Any) -> Lines:
		return [self.examiner.scalar(value)]

	def examine_string(self, value: Optional[str]) -> Lines:
		return [self.examiner.examine_string(value)]

	def examine_boolean(self, value: bool) -> Lines:
		return [self.examiner.examine_boolean(value)]

	def examine_byte(self, value: int) -> Lines:
		return [self.examiner.examine_byte(value)]

	def examine_char(self, value: str) -> Lines:
		return [self.examiner.examine_char(value)]

	def examine_double(self, value: float) -> Lines:
		return [self.examiner.examine_double(value)]

	def examine_float(self, value: float) -> Lines:
		return [self.examiner.examine_float(value)]

	def examine_int(self, value: int) -> Lines:
		return [self.examiner.examine_int(value)]

	def examine_long(self, value: int) -> Lines:
		return [self.examiner.examine_long(value)]

	def examine_short(self, value: int) -> Lines:
		return [self.examiner.examine_short(value)]


_SIMPLE_ESCAPING = MultiLineStringExaminer()
