# schemas/trainer.py
from pydantic import BaseModel, EmailStr, Field
from typing import Optional


class EntrenadorCreate(BaseModel):
    nombre: str = Field(..., min_length=1, max_length=50)
    especialidad: Optional[str] = Field(None, max_length=20)
    telefono: str = Field(..., min_length=1, max_length=15)
    email: EmailStr


class EntrenadorUpdate(BaseModel):
    nombre: Optional[str] = Field(None, min_length=1, max_length=50)
    especialidad: Optional[str] = Field(None, max_length=20)
    telefono: Optional[str] = Field(None, min_length=1, max_length=15)
    email: Optional[EmailStr] = None


class EntrenadorOut(BaseModel):
    id_entrenador: int
    nombre: str
    especialidad: Optional[str] = None
    telefono: str
    email: str

    class Config:
        from_attributes = True
