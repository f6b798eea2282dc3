# schemas/__init__.py
from schemas.plan import PlanCreate, PlanUpdate, PlanOut
from schemas.client import ClienteCreate, ClienteUpdate, ClienteOut, PlanDeCliente
from schemas.trainer import EntrenadorCreate, EntrenadorUpdate, EntrenadorOut
from schemas.gym_class import ClaseCreate, ClaseUpdate, ClaseOut
from schemas.payment import PagoCreate, PagoOut
from schemas.attendance import AsistenciaCreate, AsistenciaRegistrada, AsistenciaOut, LogAsistenciaOut
from schemas.report import ClienteActivoOut, AsistenciasPorClaseOut, TotalClientesPlan, IngresosOut


__all__ = [
    # Requests
    "PlanCreate",
    "PlanUpdate",
    "ClienteCreate",
    "ClienteUpdate",
    "EntrenadorCreate",
    "EntrenadorUpdate",
    "ClaseCreate",
    "ClaseUpdate",
    "PagoCreate",
    "AsistenciaCreate",

    # Responses
    "PlanOut",
    "ClienteOut",
    "PlanDeCliente",
    "EntrenadorOut",
    "ClaseOut",
    "PagoOut",
    "AsistenciaRegistrada",
    "AsistenciaOut",
    "LogAsistenciaOut",

    # Reportes
    "ClienteActivoOut",
    "AsistenciasPorClaseOut",
    "TotalClientesPlan",
    "IngresosOut",
]
