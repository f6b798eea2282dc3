# schemas/plan.py
from pydantic import BaseModel, Field
from typing import Optional
from decimal import Decimal


class PlanCreate(BaseModel):
    tipo: str = Field(..., min_length=1, max_length=50)
    precio: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    duracion_meses: int = Field(..., ge=0, description="0 = plan vencido/inactivo")


class PlanUpdate(BaseModel):
    tipo: Optional[str] = Field(None, min_length=1, max_length=50)
    precio: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)
    duracion_meses: Optional[int] = Field(None, ge=0)


class PlanOut(BaseModel):
    id_plan: int
    tipo: str
    precio: Decimal
    duracion_meses: int

    class Config:
        from_attributes = True
