# schemas/client.py
from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from datetime import date


class ClienteCreate(BaseModel):
    nombre: str = Field(..., min_length=1, max_length=50)
    email: EmailStr
    telefono: str = Field(..., min_length=1, max_length=15)
    fecha_registro: Optional[date] = None  # hoy si no viene
    id_plan: Optional[int] = None


class ClienteUpdate(BaseModel):
    nombre: Optional[str] = Field(None, min_length=1, max_length=50)
    email: Optional[EmailStr] = None
    telefono: Optional[str] = Field(None, min_length=1, max_length=15)
    id_plan: Optional[int] = None


class ClienteOut(BaseModel):
    id_cliente: int
    nombre: str
    email: str
    telefono: str
    fecha_registro: date
    id_plan: Optional[int] = None

    class Config:
        from_attributes = True


class PlanDeCliente(BaseModel):
    id_cliente: int
    tipo_plan: Optional[str] = None
