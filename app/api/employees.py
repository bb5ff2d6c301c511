import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status
from sqlalchemy.orm import Session

from app.core.config import Settings
from app.core.errors import EmployeeError, ErrorKind
from app.core.tracing import SpanAttributeHook, get_span_hook
from app.daos.employee_dao import EmployeeDao
from app.db.session import get_db
from app.models.employee import Employee
from app.schemas.employee import EmployeeIn, EmployeeOut, ErrorOut, MessageOut
from app.schemas.pagination import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, INT_RE, PageParams, parse_int64, parse_positive_int
from app.seed_data import random_employees
from app.services.employee_service import EmployeeService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])

ERROR_RESPONSES = {
    400: {"model": ErrorOut},
    404: {"model": ErrorOut},
    422: {"model": ErrorOut},
    500: {"model": ErrorOut},
}

STATUS_BY_KIND = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.PERSISTENCE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_employee_service(db: Session = Depends(get_db)) -> EmployeeService:
    return EmployeeService(EmployeeDao(db))


def employee_to_out(e: Employee) -> dict:
    out = EmployeeOut.model_validate(e).model_dump(mode="json", by_alias=True)
    if out.get("deletedAt") is None:
        out.pop("deletedAt", None)
    return out


def parse_id(raw: str) -> int:
    """Path ids are signed 64-bit base-10 integers; anything else is a 400."""
    if not INT_RE.fullmatch(raw):
        raise _fail(status.HTTP_400_BAD_REQUEST, f'invalid employee id "{raw}"')
    value = parse_int64(raw)
    if value is None:
        raise _fail(status.HTTP_400_BAD_REQUEST, f'employee id "{raw}" out of range')
    return value


def _fail(status_code: int, message: str) -> HTTPException:
    logger.error(message)
    return HTTPException(status_code=status_code, detail=message)


def _from_error(exc: EmployeeError, status_code: int | None = None) -> HTTPException:
    return _fail(status_code or STATUS_BY_KIND[exc.kind], exc.message)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    responses={201: {"model": EmployeeOut}, **ERROR_RESPONSES},
)
def create_employee(
    payload: EmployeeIn,
    service: EmployeeService = Depends(get_employee_service),
):
    """Create an employee. The identifier and timestamps are assigned by storage."""
    try:
        employee = service.create_employee(payload)
    except EmployeeError as exc:
        raise _from_error(exc, status.HTTP_500_INTERNAL_SERVER_ERROR)
    return employee_to_out(employee)


@router.post("/random", status_code=status.HTTP_201_CREATED, response_model=MessageOut, responses=ERROR_RESPONSES)
def push_random_employees(service: EmployeeService = Depends(get_employee_service)):
    """
    Insert the fixed sample catalog in one batch.

    Every call appends the catalog again, so repeated calls create duplicates.
    """
    try:
        service.create_employees(random_employees())
    except EmployeeError as exc:
        raise _from_error(exc, status.HTTP_500_INTERNAL_SERVER_ERROR)
    return {"message": "Random employees created"}


@router.get("/{employee_id}", responses={200: {"model": EmployeeOut}, **ERROR_RESPONSES})
def fetch_employee(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
    span_hook: SpanAttributeHook = Depends(get_span_hook),
):
    id_ = parse_id(employee_id)
    try:
        employee = service.get_employee(id_)
    except EmployeeError as exc:
        raise _from_error(exc)

    span_hook("employee.id", str(employee.id))
    return employee_to_out(employee)


@router.get("", responses={200: {"model": list[EmployeeOut]}, **ERROR_RESPONSES})
def fetch_employees(
    page: str | None = Query(default=None, description="Page number, 1-based"),
    page_size: str | None = Query(default=None, description="Results per page"),
    service: EmployeeService = Depends(get_employee_service),
    settings: Settings = Depends(get_app_settings),
):
    """
    List active employees.

    Missing or invalid ``page``/``page_size`` fall back to 1 and 10. The page
    size is unbounded unless ``MAX_PAGE_SIZE`` is configured.
    """
    params = PageParams(
        page=parse_positive_int(page, DEFAULT_PAGE),
        page_size=parse_positive_int(page_size, DEFAULT_PAGE_SIZE),
    )
    if settings.MAX_PAGE_SIZE is not None:
        params.page_size = min(params.page_size, settings.MAX_PAGE_SIZE)

    try:
        employees = service.get_employees(params.page, params.page_size)
    except EmployeeError as exc:
        raise _from_error(exc, status.HTTP_500_INTERNAL_SERVER_ERROR)
    return [employee_to_out(e) for e in employees]


@router.put(
    "/{employee_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=ERROR_RESPONSES,
)
def update_employee(
    employee_id: str,
    payload: EmployeeIn,
    service: EmployeeService = Depends(get_employee_service),
    settings: Settings = Depends(get_app_settings),
):
    """
    Replace name, position and salary. The payload ``id`` must equal the path id.

    An id mismatch answers 500 for compatibility with existing clients, or
    400 when ``STRICT_UPDATE_VALIDATION`` is on.
    """
    id_ = parse_id(employee_id)
    try:
        service.update_employee(id_, payload)
    except EmployeeError as exc:
        if exc.kind == ErrorKind.VALIDATION and not settings.STRICT_UPDATE_VALIDATION:
            raise _from_error(exc, status.HTTP_500_INTERNAL_SERVER_ERROR)
        raise _from_error(exc)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{employee_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=ERROR_RESPONSES,
)
def delete_employee(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
):
    """Soft delete. Deleting a missing or already deleted id still answers 204."""
    id_ = parse_id(employee_id)
    try:
        service.delete_employee(id_)
    except EmployeeError as exc:
        raise _from_error(exc, status.HTTP_500_INTERNAL_SERVER_ERROR)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
