# routers/__init__.py

from .planes import router as planes_router
from .clientes import router as clientes_router
from .entrenadores import router as entrenadores_router
from .clases import router as clases_router
from .pagos import router as pagos_router
from .asistencias import router as asistencias_router
from .reportes import router as reportes_router

__all__ = [
    "planes_router",
    "clientes_router",
    "entrenadores_router",
    "clases_router",
    "pagos_router",
    "asistencias_router",
    "reportes_router",
]
