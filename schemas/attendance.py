# schemas/attendance.py
from pydantic import BaseModel
from typing import Optional
from datetime import date, datetime


class AsistenciaCreate(BaseModel):
    id_cliente: int
    id_clase: int
    fecha: Optional[date] = None  # hoy si no viene


class AsistenciaRegistrada(BaseModel):
    id_asistencia: int
    mensaje: str = "Asistencia registrada"


class AsistenciaOut(BaseModel):
    id_asistencia: int
    id_cliente: int
    id_clase: int
    fecha: date

    class Config:
        from_attributes = True


class LogAsistenciaOut(BaseModel):
    id_log: int
    id_cliente: int
    id_clase: int
    fecha: date
    fecha_log: datetime
    mensaje: str

    class Config:
        from_attributes = True
