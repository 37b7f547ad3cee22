from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterator, TypeVar

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
	from .examiner import Examiner


R = TypeVar("R")


@dataclass(frozen=True)
class Char:
	"""A single character, examined as a char rather than a string."""

	value: str

	def __post_init__(self) -> None:
		if not isinstance(self.value, str) or len(self.value) != 1:
			raise ValueError(f"Char expects a single character, got {self.value!r}")

	def __str__(self) -> str:
		return self.value


class ExaminableProperty(BaseModel):
	"""A named value that can be handed to any examiner."""

	model_config = ConfigDict(frozen=True)

	name: str
	value: Any = None

	@classmethod
	def of(cls, name: str, value: Any) -> "ExaminableProperty":
		return cls(name=name, value=value)

	def examine(self, examiner: "Examiner[R]") -> R:
		# Not cached: the value may be a one-shot iterator.
		return examiner.examine(self.value)

	def __str__(self) -> str:
		return f"ExaminableProperty{{{self.name}}}"


class Examinable:
	"""Something that can be examined.

	Subclasses override ``examinable_properties`` to expose their state, in
	the order it should be rendered. ``examinable_name`` defaults to the
	class name.
	"""

	def examinable_name(self) -> str:
		return type(self).__name__

	def examinable_properties(self) -> Iterator[ExaminableProperty]:
		return iter(())

	def examine(self, examiner: "Examiner[R]") -> R:
		return examiner.examine(self)
