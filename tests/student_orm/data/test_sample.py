from datetime import date

from student_orm.data.sample import build_sample_graph
from student_orm.orm.schema import StudentGroup


def test_sample_graph_shape():
    graph = build_sample_graph()

    assert [s.name for s in graph.students] == ["Jack", "Lee", "Amal"]
    assert len(graph.cards) == 3
    assert len(graph.projects) == 3
    assert [s.title for s in graph.subjects] == ["Arts and Crafts", "Reading", "Math"]
    assert len(graph.entities) == 12


def test_sample_graph_is_wired_on_both_sides():
    graph = build_sample_graph()
    jack, lee, amal = graph.students

    assert jack.dob == date(2000, 1, 1)
    assert jack.student_group is StudentGroup.ROSE
    assert [card.is_active for card in graph.cards] == [True, False, False]
    assert all(student.card.student is student for student in graph.students)

    assert [p.title for p in jack.projects] == ["Ant Hill Diorama", "Saturn V Poster Presentation"]
    assert [p.student for p in graph.projects] == [jack, jack, lee]
    assert amal.projects == []

    assert graph.subject("Reading").students == [jack, lee]
    assert graph.subject("Math").students == [lee]
    assert graph.student("Lee") is lee


def test_sample_graph_is_fresh_each_call():
    first = build_sample_graph()
    second = build_sample_graph()

    assert first.student("Jack") is not second.student("Jack")
