# services/errors.py
"""
Errores de dominio que los servicios lanzan antes de tocar la base de datos.

Las violaciones de unicidad o de FK las detecta el motor y llegan como
`sqlalchemy.exc.IntegrityError`; se exponen aquí como `ConstraintViolation`
para que los llamadores no tengan que importar SQLAlchemy.
"""
from sqlalchemy.exc import IntegrityError

ConstraintViolation = IntegrityError


class GimnasioError(Exception):
    """Base de los errores de negocio del gimnasio"""


class ClientNotFound(GimnasioError):
    def __init__(self, id_cliente: int):
        self.id_cliente = id_cliente
        super().__init__(f"Cliente {id_cliente} no encontrado")


class ClassNotFound(GimnasioError):
    def __init__(self, id_clase: int):
        self.id_clase = id_clase
        super().__init__(f"Clase {id_clase} no encontrada")


__all__ = ["GimnasioError", "ClientNotFound", "ClassNotFound", "ConstraintViolation"]
