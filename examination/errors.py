from __future__ import annotations


class ExaminationError(Exception):
	"""Base class for errors raised by the examination package."""


class PropertyAccessError(ExaminationError):
	"""Reading a property's value failed."""

	def __init__(self, name: str, owner: str):
		super().__init__(f"Could not read property {name!r} of {owner}")
		self.name = name
		self.owner = owner
