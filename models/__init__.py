# models/__init__.py
from .plan import Plan
from .client import Cliente
from .trainer import Entrenador
from .gym_class import Clase
from .payment import Pago
from .attendance import Asistencia, LogAsistencia, MENSAJE_LOG_ASISTENCIA
__all__ = [
    "Plan",
    "Cliente",
    "Entrenador",
    "Clase",
    "Pago",
    "Asistencia",
    "LogAsistencia",
    "MENSAJE_LOG_ASISTENCIA",
]
