"""Test cases for IdCardRepository, ProjectRepository and SubjectRepository."""

import pytest
from sqlalchemy.orm import Session

from student_orm.exceptions import NotFoundError
from student_orm.orm.repository.id_card import IdCardRepository
from student_orm.orm.repository.project import ProjectRepository
from student_orm.orm.repository.subject import SubjectRepository
from student_orm.orm.schema import IdCard


class TestIdCardRepository:
    @pytest.fixture
    def repo(self, db_session: Session) -> IdCardRepository:
        return IdCardRepository(db_session)

    def test_get_active(self, repo, sample_graph):
        active = repo.get_active()
        assert [card.id for card in active] == [sample_graph.student("Jack").card.id]

    def test_get_by_student_id(self, repo, sample_graph):
        lee = sample_graph.student("Lee")
        assert repo.get_by_student_id(lee.id).id == lee.card.id
        assert repo.get_by_student_id(999) is None

    def test_get_unassigned(self, repo, sample_graph, db_session: Session):
        assert repo.get_unassigned() == []

        spare = repo.add(IdCard(is_active=False))
        db_session.flush()

        assert repo.get_unassigned() == [spare]


class TestProjectRepository:
    @pytest.fixture
    def repo(self, db_session: Session) -> ProjectRepository:
        return ProjectRepository(db_session)

    def test_get_by_student(self, repo, sample_graph):
        jack = sample_graph.student("Jack")
        assert [p.title for p in repo.get_by_student(jack.id)] == [
            "Ant Hill Diorama",
            "Saturn V Poster Presentation",
        ]

    def test_count_by_student(self, repo, sample_graph):
        assert repo.count_by_student(sample_graph.student("Lee").id) == 1
        assert repo.count_by_student(sample_graph.student("Amal").id) == 0

    def test_get_unassigned(self, repo, sample_graph):
        assert repo.get_unassigned() == []


class TestSubjectRepository:
    @pytest.fixture
    def repo(self, db_session: Session) -> SubjectRepository:
        return SubjectRepository(db_session)

    def test_get_by_title(self, repo, sample_graph):
        assert repo.get_by_title("Math").id == sample_graph.subject("Math").id

    def test_get_by_unknown_title_raises(self, repo, sample_graph):
        with pytest.raises(NotFoundError):
            repo.get_by_title("Chemistry")

    def test_get_with_students(self, repo, sample_graph):
        reading = repo.get_with_students(sample_graph.subject("Reading").id)
        assert [s.name for s in reading.students] == ["Jack", "Lee"]
