from app.models.employee import Employee

__all__ = ["Employee"]
