from app.daos.employee_dao import EmployeeDao
from app.models.employee import Employee
from app.schemas.employee import EmployeeIn


class EmployeeService:
    """Seam for business rules between the HTTP layer and data access. Delegates only."""

    def __init__(self, dao: EmployeeDao):
        self.dao = dao

    def create_employee(self, payload: EmployeeIn) -> Employee:
        return self.dao.create_employee(payload)

    def get_employee(self, employee_id: int) -> Employee:
        return self.dao.get_employee(employee_id)

    def get_employees(self, page: int, limit: int) -> list[Employee]:
        return self.dao.get_employees(page, limit)

    def update_employee(self, employee_id: int, payload: EmployeeIn) -> Employee:
        return self.dao.update_employee(employee_id, payload)

    def delete_employee(self, employee_id: int) -> None:
        return self.dao.delete_employee(employee_id)

    def create_employees(self, payloads: list[EmployeeIn]) -> None:
        return self.dao.create_employees(payloads)
