from __future__ import annotations

import array
import collections.abc as abc
from enum import Enum
from typing import Any, Dict, Optional

import numpy

from .model import Char, Examinable


class Shape(str, Enum):
	"""The structural category a value is dispatched on."""

	NIL = "nil"
	STRING = "string"
	EXAMINABLE = "examinable"
	COLLECTION = "collection"
	MAPPING = "mapping"
	ARRAY = "array"
	BOOLEAN_ARRAY = "boolean[]"
	BYTE_ARRAY = "byte[]"
	CHAR_ARRAY = "char[]"
	DOUBLE_ARRAY = "double[]"
	FLOAT_ARRAY = "float[]"
	INT_ARRAY = "int[]"
	LONG_ARRAY = "long[]"
	SHORT_ARRAY = "short[]"
	BOOLEAN = "boolean"
	BYTE = "byte"
	CHAR = "char"
	DOUBLE = "double"
	FLOAT = "float"
	INT = "int"
	LONG = "long"
	SHORT = "short"
	STREAM = "stream"
	SCALAR = "scalar"


TYPECODE_SHAPE: Dict[str, Shape] = {
	"b": Shape.BYTE_ARRAY,
	"B": Shape.BYTE_ARRAY,
	"u": Shape.CHAR_ARRAY,
	"w": Shape.CHAR_ARRAY,
	"h": Shape.SHORT_ARRAY,
	"H": Shape.SHORT_ARRAY,
	"i": Shape.INT_ARRAY,
	"I": Shape.INT_ARRAY,
	"l": Shape.LONG_ARRAY,
	"L": Shape.LONG_ARRAY,
	"q": Shape.LONG_ARRAY,
	"Q": Shape.LONG_ARRAY,
	"f": Shape.FLOAT_ARRAY,
	"d": Shape.DOUBLE_ARRAY,
}


DTYPE_SHAPE: Dict[str, Shape] = {
	"bool": Shape.BOOLEAN_ARRAY,
	"int8": Shape.BYTE_ARRAY,
	"uint8": Shape.BYTE_ARRAY,
	"int16": Shape.SHORT_ARRAY,
	"uint16": Shape.SHORT_ARRAY,
	"int32": Shape.INT_ARRAY,
	"uint32": Shape.INT_ARRAY,
	"int64": Shape.LONG_ARRAY,
	"uint64": Shape.LONG_ARRAY,
	"float16": Shape.FLOAT_ARRAY,
	"float32": Shape.FLOAT_ARRAY,
	"float64": Shape.DOUBLE_ARRAY,
	numpy.dtype(numpy.longdouble).name: Shape.DOUBLE_ARRAY,
}


ELEMENT_SHAPE: Dict[Shape, Shape] = {
	Shape.BOOLEAN_ARRAY: Shape.BOOLEAN,
	Shape.BYTE_ARRAY: Shape.BYTE,
	Shape.SHORT_ARRAY: Shape.SHORT,
	Shape.INT_ARRAY: Shape.INT,
	Shape.LONG_ARRAY: Shape.LONG,
	Shape.FLOAT_ARRAY: Shape.FLOAT,
	Shape.DOUBLE_ARRAY: Shape.DOUBLE,
}


_NOT_COLLECTIONS = (str, bytes, bytearray, memoryview, array.array, numpy.ndarray, abc.Mapping)


def _array_shape(value: Any) -> Optional[Shape]:
	if isinstance(value, (bytes, bytearray)):
		return Shape.BYTE_ARRAY
	if isinstance(value, memoryview):
		if value.ndim != 1:
			return None
		return TYPECODE_SHAPE.get(value.format)
	if isinstance(value, array.array):
		return TYPECODE_SHAPE.get(value.typecode, Shape.ARRAY)
	if isinstance(value, numpy.ndarray):
		if value.ndim == 0:
			return None
		if value.ndim > 1:
			return Shape.ARRAY
		if value.dtype.kind == "U" and value.dtype.itemsize == 4:
			return Shape.CHAR_ARRAY
		return DTYPE_SHAPE.get(value.dtype.name, Shape.ARRAY)
	return None


def _scalar_shape(value: Any) -> Optional[Shape]:
	if isinstance(value, Char):
		return Shape.CHAR
	if isinstance(value, numpy.generic):
		# Aliases such as longlong share a dtype name with their sized type.
		return ELEMENT_SHAPE.get(DTYPE_SHAPE.get(value.dtype.name))
	if isinstance(value, bool):
		return Shape.BOOLEAN
	if isinstance(value, int):
		return Shape.INT
	if isinstance(value, float):
		return Shape.DOUBLE
	return None


def classify(value: Any) -> Shape:
	"""Classify ``value`` into exactly one shape; the first match wins."""
	if value is None:
		return Shape.NIL
	if isinstance(value, str):
		return Shape.STRING
	if isinstance(value, Examinable):
		return Shape.EXAMINABLE
	if isinstance(value, abc.Collection) and not isinstance(value, _NOT_COLLECTIONS):
		return Shape.COLLECTION
	if isinstance(value, abc.Mapping):
		return Shape.MAPPING
	shape = _array_shape(value)
	if shape is not None:
		return shape
	shape = _scalar_shape(value)
	if shape is not None:
		return shape
	if isinstance(value, abc.Iterator):
		return Shape.STREAM
	return Shape.SCALAR
