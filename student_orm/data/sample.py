"""Sample student graph.

Three students (Jack, Lee, Amal), one card each, three projects (two for Jack,
one for Lee) and three subjects (Jack: Arts and Crafts, Reading; Lee: Reading,
Math). Only Jack's card is active.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Any

from student_orm.orm.schema import IdCard, Project, Student, StudentGroup, Subject


@dataclass
class SampleGraph:
    """Unsaved entities of the sample graph, wired on both sides of every relation."""

    students: list[Student] = field(default_factory=list)
    cards: list[IdCard] = field(default_factory=list)
    projects: list[Project] = field(default_factory=list)
    subjects: list[Subject] = field(default_factory=list)

    @property
    def entities(self) -> list[Any]:
        """Every entity, in persist order: students, cards, projects, subjects."""
        return [*self.students, *self.cards, *self.projects, *self.subjects]

    def student(self, name: str) -> Student:
        return next(s for s in self.students if s.name == name)

    def subject(self, title: str) -> Subject:
        return next(s for s in self.subjects if s.title == title)


def build_sample_graph() -> SampleGraph:
    jack = Student(name="Jack", dob=date(2000, 1, 1), student_group=StudentGroup.ROSE)
    lee = Student(name="Lee", dob=date(1999, 1, 1), student_group=StudentGroup.DAISY)
    amal = Student(name="Amal", dob=date(1980, 1, 1), student_group=StudentGroup.LOTUS)

    cards = [IdCard(is_active=True), IdCard(is_active=False), IdCard(is_active=False)]
    for student, card in zip((jack, lee, amal), cards, strict=True):
        student.assign_card(card)

    ant_hill = Project(title="Ant Hill Diorama", submission_date=date(2022, 7, 20), score=85)
    saturn = Project(title="Saturn V Poster Presentation", submission_date=date(2022, 7, 25), score=90)
    mars = Project(title="Mars Rover Presentation", submission_date=date(2022, 7, 30), score=87)
    jack.add_project(ant_hill)
    jack.add_project(saturn)
    lee.add_project(mars)

    arts = Subject(title="Arts and Crafts")
    reading = Subject(title="Reading")
    math = Subject(title="Math")
    jack.add_subject(arts)
    jack.add_subject(reading)
    lee.add_subject(reading)
    lee.add_subject(math)

    return SampleGraph(
        students=[jack, lee, amal],
        cards=cards,
        projects=[ant_hill, saturn, mars],
        subjects=[arts, reading, math],
    )
