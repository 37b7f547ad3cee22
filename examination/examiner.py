from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, Iterable, Iterator, Optional, Sequence, Tuple, TypeVar

import numpy

from .model import Examinable, ExaminableProperty
from .shape import Shape, classify

logger = logging.getLogger(__name__)


R = TypeVar("R")


def _floating(value: Any) -> Any:
	# numpy floats keep their own precision for rendering.
	return value if isinstance(value, numpy.floating) else float(value)


class Examiner(ABC, Generic[R]):
	"""Folds an arbitrary value into a result of type ``R``.

	``examine`` classifies the value, examines its children through the same
	entry point and hands the original value plus a lazy iterator of child
	results to the operation for that shape. Implementations only fold; they
	never recurse or inspect types themselves.

	Cyclic value graphs are not detected and end in ``RecursionError``.
	"""

	def examine(self, value: Any) -> R:
		shape = classify(value)
		if shape is Shape.NIL:
			return self.nil()
		if shape is Shape.STRING:
			return self.examine_string(value)
		if shape is Shape.EXAMINABLE:
			return self.examine_examinable(value)
		if shape is Shape.COLLECTION:
			return self.collection(value, (self.examine(element) for element in value))
		if shape is Shape.MAPPING:
			return self.map(value, ((self.examine(k), self.examine(v)) for k, v in value.items()))
		if shape is Shape.ARRAY:
			return self.array(value, (self.examine(element) for element in value))
		if shape is Shape.BOOLEAN_ARRAY:
			return self.examine_boolean_array(value)
		if shape is Shape.BYTE_ARRAY:
			return self.examine_byte_array(value)
		if shape is Shape.CHAR_ARRAY:
			return self.examine_char_array(value)
		if shape is Shape.DOUBLE_ARRAY:
			return self.examine_double_array(value)
		if shape is Shape.FLOAT_ARRAY:
			return self.examine_float_array(value)
		if shape is Shape.INT_ARRAY:
			return self.examine_int_array(value)
		if shape is Shape.LONG_ARRAY:
			return self.examine_long_array(value)
		if shape is Shape.SHORT_ARRAY:
			return self.examine_short_array(value)
		if shape is Shape.BOOLEAN:
			return self.examine_boolean(bool(value))
		if shape is Shape.BYTE:
			return self.examine_byte(int(value))
		if shape is Shape.CHAR:
			return self.examine_char(str(value))
		if shape is Shape.DOUBLE:
			return self.examine_double(_floating(value))
		if shape is Shape.FLOAT:
			return self.examine_float(_floating(value))
		if shape is Shape.INT:
			return self.examine_int(int(value))
		if shape is Shape.LONG:
			return self.examine_long(int(value))
		if shape is Shape.SHORT:
			return self.examine_short(int(value))
		if shape is Shape.STREAM:
			return self.stream(value, (self.examine(element) for element in value))
		logger.debug("No dedicated shape for %s, examining as a scalar", type(value).__name__)
		return self.scalar(value)

	def examine_examinable(self, examinable: Examinable) -> R:
		return self.examine_properties(examinable.examinable_name(), examinable.examinable_properties())

	def examine_properties(self, name: str, properties: Iterable[ExaminableProperty]) -> R:
		"""Examine a named group of properties that need not be an ``Examinable``."""
		return self.examinable(name, ((p.name, p.examine(self)) for p in properties))

	# Recursive shapes

	@abstractmethod
	def array(self, array: Any, elements: Iterator[R]) -> R:
		...

	@abstractmethod
	def collection(self, collection: Any, elements: Iterator[R]) -> R:
		...

	@abstractmethod
	def stream(self, stream: Iterator[Any], elements: Iterator[R]) -> R:
		...

	@abstractmethod
	def map(self, mapping: Any, entries: Iterator[Tuple[R, R]]) -> R:
		...

	@abstractmethod
	def examinable(self, name: str, properties: Iterator[Tuple[str, R]]) -> R:
		...

	# Leaves

	@abstractmethod
	def nil(self) -> R:
		...

	@abstractmethod
	def scalar(self, value: Any) -> R:
		...

	@abstractmethod
	def examine_string(self, value: Optional[str]) -> R:
		...

	@abstractmethod
	def examine_boolean(self, value: bool) -> R:
		...

	@abstractmethod
	def examine_byte(self, value: int) -> R:
		...

	@abstractmethod
	def examine_char(self, value: str) -> R:
		...

	@abstractmethod
	def examine_double(self, value: float) -> R:
		...

	@abstractmethod
	def examine_float(self, value: float) -> R:
		...

	@abstractmethod
	def examine_int(self, value: int) -> R:
		...

	@abstractmethod
	def examine_long(self, value: int) -> R:
		...

	@abstractmethod
	def examine_short(self, value: int) -> R:
		...

	# Primitive arrays, folded element by element without re-dispatch

	@abstractmethod
	def primitive_array(self, elements: Iterator[R]) -> R:
		...

	def examine_boolean_array(self, values: Optional[Sequence[Any]]) -> R:
		if values is None:
			return self.nil()
		return self.primitive_array(self.examine_boolean(bool(v)) for v in values)

	def examine_byte_array(self, values: Optional[Sequence[Any]]) -> R:
		if values is None:
			return self.nil()
		return self.primitive_array(self.examine_byte(int(v)) for v in values)

	def examine_char_array(self, values: Optional[Sequence[Any]]) -> R:
		if values is None:
			return self.nil()
		return self.primitive_array(self.examine_char(str(v)) for v in values)

	def examine_double_array(self, values: Optional[Sequence[Any]]) -> R:
		if values is None:
			return self.nil()
		return self.primitive_array(self.examine_double(_floating(v)) for v in values)

	def examine_float_array(self, values: Optional[Sequence[Any]]) -> R:
		if values is None:
			return self.nil()
		return self.primitive_array(self.examine_float(_floating(v)) for v in values)

	def examine_int_array(self, values: Optional[Sequence[Any]]) -> R:
		if values is None:
			return self.nil()
		return self.primitive_array(self.examine_int(int(v)) for v in values)

	def examine_long_array(self, values: Optional[Sequence[Any]]) -> R:
		if values is None:
			return self.nil()
		return self.primitive_array(self.examine_long(int(v)) for v in values)

	def examine_short_array(self, values: Optional[Sequence[Any]]) -> R:
		if values is None:
			return self.nil()
		return self.primitive_array(self.examine_short(int(v)) for v in values)
