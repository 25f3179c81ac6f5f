"""Test cases for GenericRepository.

Uses the seeded sample graph: 3 students, 3 cards, 3 projects, 3 subjects.
"""

from datetime import date

import pytest
from sqlalchemy.orm import Session

from student_orm.exceptions import AmbiguousResultError, NotFoundError
from student_orm.orm.repository.base import GenericRepository, describe_predicates, repository_context
from student_orm.orm.schema import Student, StudentGroup, Subject


@pytest.fixture
def subject_repository(db_session: Session) -> GenericRepository[Subject]:
    return GenericRepository(db_session, Subject)


@pytest.fixture
def student_repository(db_session: Session) -> GenericRepository[Student]:
    return GenericRepository(db_session, Student)


class TestLookups:
    def test_get_by_id_returns_none_when_missing(self, subject_repository, sample_graph):
        assert subject_repository.get_by_id(999) is None

    def test_require_by_id_raises_when_missing(self, subject_repository, sample_graph):
        with pytest.raises(NotFoundError, match="id=999"):
            subject_repository.require_by_id(999)

    def test_require_by_id(self, subject_repository, sample_graph):
        reading = sample_graph.subject("Reading")
        assert subject_repository.require_by_id(reading.id).title == "Reading"

    def test_get_all_with_limit_and_offset(self, subject_repository, sample_graph):
        titles = [s.title for s in subject_repository.get_all()]
        assert titles == ["Arts and Crafts", "Reading", "Math"]

        page = subject_repository.get_all(limit=1, offset=1)
        assert [s.title for s in page] == ["Reading"]

    def test_count_and_exists(self, subject_repository, sample_graph):
        assert subject_repository.count() == 3
        assert subject_repository.exists(sample_graph.subject("Math").id)
        assert not subject_repository.exists(999)


class TestPredicates:
    def test_find_one(self, student_repository, sample_graph):
        lee = student_repository.find_one(Student.dob == date(1999, 1, 1))
        assert lee.name == "Lee"

    def test_find_one_without_match_raises(self, student_repository, sample_graph):
        with pytest.raises(NotFoundError):
            student_repository.find_one(Student.dob == date(1970, 1, 1))

    def test_find_one_with_several_matches_raises(self, student_repository, sample_graph):
        with pytest.raises(AmbiguousResultError):
            student_repository.find_one(Student.student_group != StudentGroup.LOTUS)

    def test_find_many_may_be_empty(self, student_repository, sample_graph):
        assert student_repository.find_many(Student.name == "Nobody") == []

    def test_find_many_combines_predicates(self, student_repository, sample_graph):
        found = student_repository.find_many(Student.dob < date(2000, 1, 1), Student.name != "Amal")
        assert [s.name for s in found] == ["Lee"]

    def test_describe_predicates(self):
        assert describe_predicates(()) == "no criteria"
        assert "student_data.name" in describe_predicates((Student.name == "Jack",))


class TestWrites:
    def test_add_and_flush_assigns_id(self, subject_repository, db_session: Session):
        subject = subject_repository.add(Subject(title="History"))
        db_session.flush()

        assert subject.id is not None
        assert subject_repository.get_by_id(subject.id) is subject

    def test_add_all(self, subject_repository, db_session: Session):
        subjects = subject_repository.add_all([Subject(title="History"), Subject(title="Music")])
        db_session.flush()

        assert all(s.id is not None for s in subjects)
        assert subject_repository.count() == 2

    def test_update_merges_detached_entity(self, subject_repository, sample_graph, db_session: Session):
        detached = sample_graph.subject("Math")
        detached.title = "Mathematics"

        merged = subject_repository.update(detached)
        db_session.flush()

        assert merged is not detached
        assert subject_repository.require_by_id(detached.id).title == "Mathematics"

    def test_update_unknown_identity_raises(self, subject_repository, sample_graph):
        with pytest.raises(NotFoundError):
            subject_repository.update(Subject(id=999, title="Ghost"))

    def test_update_without_identity_raises(self, subject_repository):
        with pytest.raises(NotFoundError, match="id=None"):
            subject_repository.update(Subject(title="New"))

    def test_delete_by_id(self, subject_repository, sample_graph, db_session: Session):
        math_id = sample_graph.subject("Math").id

        assert subject_repository.delete_by_id(math_id) is True
        db_session.flush()

        assert subject_repository.get_by_id(math_id) is None
        assert subject_repository.delete_by_id(math_id) is False


def test_repository_context_commits(session_factory):
    with repository_context(session_factory, Subject) as (repo, uow):
        repo.add(Subject(title="Geography"))
        uow.commit()

    with repository_context(session_factory, Subject) as (repo, _):
        assert [s.title for s in repo.get_all()] == ["Geography"]
