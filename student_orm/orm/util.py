"""Utility functions for the ORM layer of student-orm.

Provides flush-time validation of pending entities and helpers for walking
an entity's relationships.
"""

import logging
from typing import Any

from sqlalchemy import event, inspect
from sqlalchemy.orm import Session

from student_orm.exceptions import ValidationFailureError

logger = logging.getLogger("StudentORM")


def required_fields(model_cls: type) -> list[str]:
    """Return the attribute names that must hold a value before insert.

    A column is required when it is NOT NULL, not part of the primary key and
    has neither a client-side nor a server-side default.

    Args:
        model_cls: A mapped ORM class.

    Returns:
        Attribute names in mapper order.
    """
    required = []
    for column_attr in inspect(model_cls).column_attrs:
        for column in column_attr.columns:
            if column.primary_key or column.nullable:
                continue
            if column.default is not None or column.server_default is not None:
                continue
            required.append(column_attr.key)
    return required


def validate_entity(entity: Any) -> None:
    """Check that every required field of the entity is set.

    Args:
        entity: A mapped ORM instance.

    Raises:
        ValidationFailureError: If a required field is None.
    """
    model_cls = type(entity)
    for field in required_fields(model_cls):
        if getattr(entity, field) is None:
            raise ValidationFailureError(model_cls.__name__, field, "required value is missing")


def _validate_pending(session: Session, _flush_context: Any, _instances: Any) -> None:
    for entity in (*session.new, *session.dirty):
        validate_entity(entity)


def register_validation(session: Session) -> None:
    """Validate new and dirty entities before each flush of the given session."""
    if not event.contains(session, "before_flush", _validate_pending):
        event.listen(session, "before_flush", _validate_pending)


def load_relationships(entity: Any) -> Any:
    """Load every relationship reachable from an entity while its session is still open.

    The whole connected graph is walked once, so any path through the returned
    entities stays readable after the session closes.

    Args:
        entity: A persistent ORM instance.

    Returns:
        The same entity.
    """
    visited: set[int] = set()
    pending = [entity]
    while pending:
        current = pending.pop()
        if current is None or id(current) in visited:
            continue
        visited.add(id(current))
        for rel in inspect(type(current)).relationships:
            value = getattr(current, rel.key)
            pending.extend(value if rel.uselist else [value])
    return entity
