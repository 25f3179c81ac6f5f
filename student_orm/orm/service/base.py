from abc import ABC, abstractmethod
from typing import Any

from sqlalchemy.orm import Session, sessionmaker

from student_orm.exceptions import SessionNotSetError, UnknownModelError


class BaseService(ABC):
    """Shared plumbing for services.

    A service holds a session factory and opens a fresh Unit of Work for every
    operation. Subclasses choose the Unit of Work type and the mapped classes
    they serve.
    """

    def __init__(self, session_factory: sessionmaker[Session]):
        self.session_factory = session_factory

    @abstractmethod
    def _create_uow(self) -> Any:
        """Build the Unit of Work used by one operation."""
        ...

    @abstractmethod
    def _get_schema_classes(self) -> dict[str, Any]:
        """Mapped classes served by this service, keyed by class name."""
        ...

    def _resolve_model(self, model: type | str) -> type:
        """Accept either a mapped class or its class name."""
        classes = self._get_schema_classes()
        if isinstance(model, str):
            if model not in classes:
                raise UnknownModelError(model)
            return classes[model]
        if model not in classes.values():
            raise UnknownModelError(getattr(model, "__name__", str(model)))
        return model

    def _add(self, obj: list[dict], table_name: str) -> list[int]:
        """
        Insert one row per dictionary of column values.

        Args:
            obj: Column values of each new row.
            table_name: Class name of the target entity, e.g. "Subject".

        Returns:
            Ids of the new rows, in input order.
        """
        cls = self._resolve_model(table_name)

        with self._create_uow() as uow:
            if uow.session is None:
                raise SessionNotSetError
            entities = [cls(**item) for item in obj]
            uow.repository_for(cls).add_all(entities)
            uow.flush()
            ids = [entity.id for entity in entities]
            uow.commit()
            return ids
