"""Catalogs: project codes, task types and links, each a set of unique strings."""

from typing import List

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from worklog.core.errors import NotFoundError, StoreError, ValidationError


def _column(model):
    return getattr(model, model.value_field)


def list_values(db: Session, model) -> List[str]:
    column = _column(model)
    return [row[0] for row in db.query(column).order_by(column.asc()).all()]


def add_value(db: Session, model, value: str) -> str:
    value = (value or "").strip()
    if not value:
        raise ValidationError(f"{model.value_field} is required")

    if db.query(model).filter(_column(model) == value).first():
        raise ValidationError(f"{value} already exists")

    db.add(model(**{model.value_field: value}))
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ValidationError(f"{value} already exists") from e
    except SQLAlchemyError as e:
        db.rollback()
        raise StoreError(f"Could not save {model.value_field}") from e
    return value


def remove_value(db: Session, model, value: str) -> None:
    row = db.query(model).filter(_column(model) == value).first()
    if not row:
        raise NotFoundError(f"{model.value_field} not found")
    try:
        db.delete(row)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise StoreError(f"Could not delete {model.value_field}") from e
