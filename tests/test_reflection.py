from dataclasses import dataclass
from typing import Annotated, List

import pytest
from pydantic import BaseModel

from examination import (
	ErrorPolicy,
	Examine,
	MultiLineStringExaminer,
	PropertyAccessError,
	ReflectiveExaminable,
	ReflectiveExaminableProperties,
	StringExaminer,
)
from examination.reflection import scan_fields


class Person(ReflectiveExaminable):
	name: Annotated[str, Examine()]
	age: Annotated[int, Examine()]
	secret: str

	def __init__(self, name, age):
		self.name = name
		self.age = age
		self.secret = "hidden"


class Employee(Person):
	title: Annotated[str, Examine("role")]

	def __init__(self, name, age, title):
		super().__init__(name, age)
		self.title = title


@dataclass
class Point(ReflectiveExaminable):
	x: Annotated[float, Examine()]
	y: Annotated[float, Examine()]
	label: str = ""


class Team(ReflectiveExaminable, BaseModel):
	name: Annotated[str, Examine()]
	members: Annotated[List[str], Examine("people")]
	budget: int = 0


class Lazy:
	ready: Annotated[int, Examine()]
	missing: Annotated[int, Examine()]

	def __init__(self):
		self.ready = 1


examiner = StringExaminer()


def test_marked_fields_only():
	assert examiner.examine(Person("kashike", 0)) == 'Person{name="kashike", age=0}'


def test_base_fields_come_first_and_names_can_be_overridden():
	assert examiner.examine(Employee("ann", 41, "lead")) == 'Employee{name="ann", age=41, role="lead"}'


def test_dataclass():
	assert examiner.examine(Point(1.5, 2.0)) == "Point{x=1.5d, y=2.0d}"


def test_pydantic_model():
	team = Team(name="core", members=["a", "b"], budget=10)
	assert examiner.examine(team) == 'Team{name="core", people=["a", "b"]}'


def test_fields_are_scanned_once_per_class():
	first = ReflectiveExaminableProperties.for_fields(Person("a", 1)).fields
	second = ReflectiveExaminableProperties.for_fields(Person("b", 2)).fields
	assert first is second
	assert first == (("name", "name"), ("age", "age"))
	assert scan_fields(Employee) == (("name", "name"), ("age", "age"), ("role", "title"))


def test_values_are_read_on_every_iteration():
	person = Person("kashike", 0)
	source = ReflectiveExaminableProperties.for_fields(person)
	assert [(p.name, p.value) for p in source.examinable_properties()] == [("name", "kashike"), ("age", 0)]
	person.age = 1
	assert [(p.name, p.value) for p in source.examinable_properties()] == [("name", "kashike"), ("age", 1)]


def test_failing_field_is_skipped_by_default(caplog):
	source = ReflectiveExaminableProperties.for_fields(Lazy())
	with caplog.at_level("WARNING", logger="examination.reflection"):
		assert examiner.examine_properties("Lazy", source.examinable_properties()) == "Lazy{ready=1}"
	assert "missing" in caplog.text


def test_failing_field_placeholder():
	source = ReflectiveExaminableProperties.for_fields(Lazy(), on_error=ErrorPolicy.PLACEHOLDER, placeholder="?")
	assert examiner.examine_properties("Lazy", source.examinable_properties()) == 'Lazy{ready=1, missing="?"}'


def test_failing_field_raise():
	source = ReflectiveExaminableProperties.for_fields(Lazy(), on_error="raise")
	with pytest.raises(PropertyAccessError) as info:
		list(source.examinable_properties())
	assert info.value.name == "missing"
	assert isinstance(info.value.__cause__, AttributeError)


def test_multi_line():
	assert MultiLineStringExaminer().examine(Employee("ann", 41, "lead")) == [
		"Employee{",
		'  "name" = "ann",',
		'  "age" = 41,',
		'  "role" = "lead"',
		"}",
	]
