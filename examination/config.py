from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class LayoutConfig(BaseModel):
	"""Layout settings for the multi-line examiner.

	Attributes:
		indent: Prefix added once per nesting level.
		separator: Text between a key (or property name) and its value.
		delimiter: Appended to the last line of every block but the final one.
	"""

	model_config = ConfigDict(frozen=True)

	indent: str = "  "
	separator: str = " = "
	delimiter: str = ","

	@field_validator("indent")
	@classmethod
	def _indent_is_whitespace(cls, value: str) -> str:
		if not value or value.strip(" \t"):
			raise ValueError("indent must be a non-empty run of spaces or tabs")
		return value


DEFAULT_LAYOUT = LayoutConfig()
