"""Property sources built by scanning annotated fields.

A field takes part in examination when its annotation carries an
``Examine`` marker::

	class User(ReflectiveExaminable):
		name: Annotated[str, Examine()]
		email: Annotated[str, Examine("mail")]

Plain classes and dataclasses are scanned through their type hints,
pydantic models through ``model_fields``. Base class fields come first.
"""

from __future__ import annotations

import functools
import logging
import typing
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, List, Optional, Sequence, Tuple

from pydantic import BaseModel

from .errors import PropertyAccessError
from .model import Examinable, ExaminableProperty

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Examine:
	"""Marks a field as examinable, optionally under another name."""

	name: str = ""


class ErrorPolicy(str, Enum):
	"""What to do when reading a field's value raises."""

	SKIP = "skip"
	PLACEHOLDER = "placeholder"
	RAISE = "raise"


def _marker(metadata: Any) -> Optional[Examine]:
	for item in metadata or ():
		if isinstance(item, Examine):
			return item
	return None


def _model_fields(cls: type) -> List[Tuple[str, str]]:
	fields: List[Tuple[str, str]] = []
	for attr, info in cls.model_fields.items():
		marker = _marker(info.metadata)
		if marker is not None:
			fields.append((marker.name or attr, attr))
	return fields


def _annotated_fields(cls: type) -> List[Tuple[str, str]]:
	fields: List[Tuple[str, str]] = []
	hints = typing.get_type_hints(cls, include_extras=True)
	for attr, hint in hints.items():
		if typing.get_origin(hint) is not typing.Annotated:
			continue
		marker = _marker(typing.get_args(hint)[1:])
		if marker is not None:
			fields.append((marker.name or attr, attr))
	return fields


@functools.lru_cache(maxsize=None)
def scan_fields(cls: type) -> Tuple[Tuple[str, str], ...]:
	"""Return ``(property name, attribute name)`` for each marked field of ``cls``.

	The result is cached per class.
	"""
	if issubclass(cls, BaseModel):
		return tuple(_model_fields(cls))
	return tuple(_annotated_fields(cls))


class ReflectiveExaminableProperties:
	"""Examinable properties read from the marked fields of an object.

	Fields are discovered once; values are read each time the properties are
	iterated.
	"""

	def __init__(
		self,
		obj: Any,
		fields: Sequence[Tuple[str, str]],
		on_error: ErrorPolicy = ErrorPolicy.SKIP,
		placeholder: Any = None,
	):
		self.obj = obj
		self.fields = fields
		self.on_error = ErrorPolicy(on_error)
		self.placeholder = placeholder

	@classmethod
	def for_fields(
		cls,
		obj: Any,
		on_error: ErrorPolicy = ErrorPolicy.SKIP,
		placeholder: Any = None,
	) -> "ReflectiveExaminableProperties":
		return cls(obj, scan_fields(type(obj)), on_error=on_error, placeholder=placeholder)

	def examinable_properties(self) -> Iterator[ExaminableProperty]:
		owner = type(self.obj).__name__
		for name, attr in self.fields:
			try:
				value = getattr(self.obj, attr)
			except Exception as exc:
				if self.on_error is ErrorPolicy.RAISE:
					raise PropertyAccessError(name, owner) from exc
				logger.warning("Could not read property %r of %s", name, owner, exc_info=True)
				if self.on_error is ErrorPolicy.SKIP:
					continue
				value = self.placeholder
			yield ExaminableProperty.of(name, value)


class ReflectiveExaminable(Examinable):
	"""An ``Examinable`` whose properties are its ``Examine``-marked fields."""

	def examinable_properties(self) -> Iterator[ExaminableProperty]:
		return ReflectiveExaminableProperties.for_fields(self).examinable_properties()
