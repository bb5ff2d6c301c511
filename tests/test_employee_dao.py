from datetime import timedelta

import pytest

from app.core.errors import ErrorKind, NotFoundError, PersistenceError, ValidationError
from app.daos.employee_dao import EmployeeDao
from app.schemas.employee import EmployeeIn
from tests.helpers import break_storage, create_employee


def test_create_assigns_id_and_timestamps(db_session):
    dao = EmployeeDao(db_session)
    e = dao.create_employee(EmployeeIn(name="Rahul Gupta", position="Software Developer", salary=76000.25))
    assert e.id > 0
    assert e.created_at is not None
    assert e.updated_at is not None
    assert e.deleted_at is None


def test_ids_are_not_reused(db_session):
    dao = EmployeeDao(db_session)
    first = dao.create_employee(EmployeeIn(name="A"))
    dao.delete_employee(first.id)
    second = dao.create_employee(EmployeeIn(name="B"))
    assert second.id > first.id


def test_create_many_inserts_all(db_session):
    dao = EmployeeDao(db_session)
    dao.create_employees([EmployeeIn(name=f"E{i}") for i in range(5)])
    assert len(dao.get_employees(1, 100)) == 5


def test_get_missing_raises_not_found(db_session):
    with pytest.raises(NotFoundError) as excinfo:
        EmployeeDao(db_session).get_employee(12345)
    assert excinfo.value.kind == ErrorKind.NOT_FOUND


def test_get_soft_deleted_raises_not_found(db_session):
    emp = create_employee(db_session, deleted=True)
    with pytest.raises(NotFoundError):
        EmployeeDao(db_session).get_employee(emp.id)


def test_get_employees_offsets_by_page(db_session):
    for i in range(5):
        create_employee(db_session, name=f"Employee {i+1}")
    dao = EmployeeDao(db_session)

    assert [e.name for e in dao.get_employees(2, 2)] == ["Employee 3", "Employee 4"]
    assert [e.name for e in dao.get_employees(3, 2)] == ["Employee 5"]


def test_update_validates_ids(db_session):
    dao = EmployeeDao(db_session)
    emp = create_employee(db_session)

    with pytest.raises(ValidationError, match="invalid employee ID"):
        dao.update_employee(0, EmployeeIn(id=0))
    with pytest.raises(ValidationError, match="don't match") as excinfo:
        dao.update_employee(emp.id, EmployeeIn(id=emp.id + 1))
    assert excinfo.value.kind == ErrorKind.VALIDATION


def test_update_advances_updated_at(db_session):
    dao = EmployeeDao(db_session)
    emp = create_employee(db_session, name="Old")
    created_at = emp.created_at
    before = emp.updated_at

    updated = dao.update_employee(emp.id, EmployeeIn(id=emp.id, name="New", salary=1.0))
    assert updated.id == emp.id
    assert updated.name == "New"
    assert updated.salary == 1.0
    assert updated.updated_at >= before
    assert updated.created_at == created_at


def test_update_missing_raises_not_found(db_session):
    with pytest.raises(NotFoundError):
        EmployeeDao(db_session).update_employee(77, EmployeeIn(id=77))


def test_delete_sets_deleted_at(db_session):
    emp = create_employee(db_session)
    EmployeeDao(db_session).delete_employee(emp.id)
    db_session.refresh(emp)
    assert emp.deleted_at is not None


def test_delete_missing_is_noop(db_session):
    EmployeeDao(db_session).delete_employee(31337)


def test_storage_failures_are_persistence_errors(db_session):
    dao = EmployeeDao(db_session)
    break_storage(db_session)

    with pytest.raises(PersistenceError) as excinfo:
        dao.create_employee(EmployeeIn(name="X"))
    assert excinfo.value.kind == ErrorKind.PERSISTENCE

    with pytest.raises(PersistenceError):
        dao.create_employees([EmployeeIn(name="X"), EmployeeIn(name="Y")])
    with pytest.raises(PersistenceError):
        dao.get_employee(1)
    with pytest.raises(PersistenceError):
        dao.get_employees(1, 10)
    with pytest.raises(PersistenceError):
        dao.delete_employee(1)


def test_timestamps_are_utc_aware_after_reload(db_session):
    dao = EmployeeDao(db_session)
    emp = dao.create_employee(EmployeeIn(name="Sunita Gupta"))
    db_session.expire_all()

    reloaded = dao.get_employee(emp.id)
    assert reloaded.created_at.utcoffset() == timedelta(0)
    assert reloaded.updated_at.utcoffset() == timedelta(0)


def test_get_employees_far_page_is_empty(db_session):
    create_employee(db_session)
    assert EmployeeDao(db_session).get_employees(2**62, 10) == []
