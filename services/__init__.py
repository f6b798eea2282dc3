# services/__init__.py
from services.errors import GimnasioError, ClientNotFound, ClassNotFound, ConstraintViolation


__all__ = [
    "GimnasioError",
    "ClientNotFound",
    "ClassNotFound",
    "ConstraintViolation",
]
