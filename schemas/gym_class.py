# schemas/gym_class.py
from pydantic import BaseModel, Field
from typing import Optional
from datetime import time


class ClaseCreate(BaseModel):
    nombre: str = Field(..., min_length=1, max_length=50)
    horario: time
    id_entrenador: Optional[int] = None


class ClaseUpdate(BaseModel):
    nombre: Optional[str] = Field(None, min_length=1, max_length=50)
    horario: Optional[time] = None
    id_entrenador: Optional[int] = None


class ClaseOut(BaseModel):
    id_clase: int
    nombre: str
    horario: time
    id_entrenador: Optional[int] = None

    class Config:
        from_attributes = True
