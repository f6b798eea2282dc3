# schemas/payment.py
from pydantic import BaseModel, Field
from typing import Optional
from datetime import date
from decimal import Decimal


class PagoCreate(BaseModel):
    id_cliente: int
    monto: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    fecha_pago: Optional[date] = None  # hoy si no viene


class PagoOut(BaseModel):
    id_pago: int
    id_cliente: Optional[int] = None
    monto: Decimal
    fecha_pago: date

    class Config:
        from_attributes = True
