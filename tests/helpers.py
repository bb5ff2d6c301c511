from datetime import datetime, timezone

from sqlalchemy import text
from sqlalchemy.orm import Session

from app.models.employee import Employee


def create_employee(
    db: Session,
    name: str = "John Doe",
    position: str = "Software Developer",
    salary: float = 268999.90,
    deleted: bool = False,
) -> Employee:
    e = Employee(
        name=name,
        position=position,
        salary=salary,
        deleted_at=datetime.now(timezone.utc) if deleted else None,
    )
    db.add(e)
    db.commit()
    db.refresh(e)
    return e


def count_rows(db: Session) -> int:
    return db.query(Employee).count()


def break_storage(db: Session) -> None:
    """Drop the table so every statement fails at the driver."""
    db.execute(text("DROP TABLE employees"))
    db.commit()
