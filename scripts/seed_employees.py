from app.core.config import get_settings
from app.daos.employee_dao import EmployeeDao
from app.db.base import Base
from app.db.session import build_engine, build_session_factory
from app.seed_data import random_employees
from app.services.employee_service import EmployeeService

def main():
    settings = get_settings()
    engine = build_engine(settings)
    Base.metadata.create_all(bind=engine)
    db = build_session_factory(engine)()
    try:
        service = EmployeeService(EmployeeDao(db))
        payloads = random_employees()
        service.create_employees(payloads)
        print(f"Seeded {len(payloads)} employees into {settings.DATABASE_URL}")
    finally:
        db.close()
        engine.dispose()

if __name__ == "__main__":
    main()
