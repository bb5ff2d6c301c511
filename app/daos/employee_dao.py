import logging
from datetime import datetime, timezone

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import NotFoundError, PersistenceError, ValidationError
from app.models.employee import Employee
from app.schemas.employee import EmployeeIn
from app.schemas.pagination import offset_for

logger = logging.getLogger(__name__)


class EmployeeDao:
    """
    Data access for the ``employees`` table.

    Soft-deleted rows (``deleted_at`` set) are filtered out explicitly in
    every read and update. Storage failures surface as ``PersistenceError``
    after the session is rolled back; a missing row surfaces as
    ``NotFoundError``.
    """

    def __init__(self, db: Session):
        self.db = db

    def _active(self):
        return select(Employee).where(Employee.deleted_at.is_(None))

    def _fail(self, action: str, exc: SQLAlchemyError) -> PersistenceError:
        self.db.rollback()
        logger.debug("failed to %s: %s", action, exc)
        return PersistenceError(f"failed to {action}: {exc}")

    def create_employee(self, payload: EmployeeIn) -> Employee:
        # The identifier is always assigned by storage
        employee = Employee(name=payload.name, position=payload.position, salary=payload.salary)
        try:
            self.db.add(employee)
            self.db.commit()
            self.db.refresh(employee)
        except SQLAlchemyError as exc:
            raise self._fail("create employee", exc) from exc

        logger.debug("employee created")
        return employee

    def create_employees(self, payloads: list[EmployeeIn]) -> None:
        employees = [Employee(name=p.name, position=p.position, salary=p.salary) for p in payloads]
        try:
            self.db.add_all(employees)
            self.db.commit()
        except SQLAlchemyError as exc:
            raise self._fail("create employees", exc) from exc

        logger.debug("employees created")

    def get_employee(self, employee_id: int) -> Employee:
        try:
            employee = self.db.execute(
                self._active().where(Employee.id == employee_id)
            ).scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise self._fail("get employee", exc) from exc

        if employee is None:
            logger.debug("failed to get employee: id %s not found", employee_id)
            raise NotFoundError()

        logger.debug("employee retrieved")
        return employee

    def get_employees(self, page: int, limit: int) -> list[Employee]:
        """
        Return one page of active employees in id order.

        ``limit`` is not bounded here; callers that need a cap apply it
        before calling.
        """
        try:
            employees = self.db.execute(
                self._active().order_by(Employee.id.asc()).offset(offset_for(page, limit)).limit(limit)
            ).scalars().all()
        except SQLAlchemyError as exc:
            raise self._fail("get employees", exc) from exc

        logger.debug("employees retrieved")
        return list(employees)

    def update_employee(self, employee_id: int, payload: EmployeeIn) -> Employee:
        if employee_id == 0:
            raise ValidationError("invalid employee ID")
        if employee_id != payload.id:
            raise ValidationError("id and payload don't match")

        try:
            employee = self.db.execute(
                self._active().where(Employee.id == employee_id)
            ).scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise self._fail("find employee for update", exc) from exc

        if employee is None:
            logger.debug("failed to find employee for update: id %s not found", employee_id)
            raise NotFoundError()

        employee.name = payload.name
        employee.position = payload.position
        employee.salary = payload.salary
        employee.updated_at = datetime.now(timezone.utc)
        try:
            self.db.commit()
            self.db.refresh(employee)
        except SQLAlchemyError as exc:
            raise self._fail("update employee", exc) from exc

        logger.debug("employee updated")
        return employee

    def delete_employee(self, employee_id: int) -> None:
        # Matching nothing is not an error
        try:
            self.db.execute(
                update(Employee)
                .where(Employee.id == employee_id, Employee.deleted_at.is_(None))
                .values(deleted_at=datetime.now(timezone.utc))
            )
            self.db.commit()
        except SQLAlchemyError as exc:
            raise self._fail("delete employee", exc) from exc

        logger.debug("employee deleted")
