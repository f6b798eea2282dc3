# schemas/report.py
from pydantic import BaseModel
from datetime import date
from decimal import Decimal


class ClienteActivoOut(BaseModel):
    id_cliente: int
    nombre: str
    email: str
    telefono: str
    id_plan: int
    tipo_plan: str
    duracion_meses: int

    class Config:
        from_attributes = True


class AsistenciasPorClaseOut(BaseModel):
    id_clase: int
    nombre: str
    total_asistencias: int

    class Config:
        from_attributes = True


class TotalClientesPlan(BaseModel):
    id_plan: int
    total_clientes: int


class IngresosOut(BaseModel):
    inicio: date
    fin: date
    total: Decimal
