"""Examination: fold arbitrary values into strings, lines or any other result.

Modules:
- model.py: ExaminableProperty, the Examinable mixin and the Char value type.
- shape.py: Classification of a runtime value into a dispatch shape.
- examiner.py: The Examiner base class that dispatches on shapes.
- single_line.py: StringExaminer, a single-line renderer.
- multiline.py: MultiLineStringExaminer, an indented multi-line renderer.
- config.py: Layout settings for the multi-line renderer.
- reflection.py: Property sources built from annotated fields.
- errors.py: Package exceptions.
"""

from .config import LayoutConfig
from .errors import ExaminationError, PropertyAccessError
from .examiner import Examiner
from .model import Char, Examinable, ExaminableProperty
from .multiline import MultiLineStringExaminer
from .reflection import ErrorPolicy, Examine, ReflectiveExaminable, ReflectiveExaminableProperties
from .shape import Shape, classify
from .single_line import StringExaminer, escape

__all__ = [
	"Char",
	"ErrorPolicy",
	"Examinable",
	"ExaminableProperty",
	"Examine",
	"ExaminationError",
	"Examiner",
	"LayoutConfig",
	"MultiLineStringExaminer",
	"PropertyAccessError",
	"ReflectiveExaminable",
	"ReflectiveExaminableProperties",
	"Shape",
	"StringExaminer",
	"classify",
	"escape",
]
