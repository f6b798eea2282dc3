# routers/clases.py
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from typing import List

from utils.dependencies import get_db
from schemas.gym_class import ClaseCreate, ClaseUpdate, ClaseOut
from services.class_service import (
    crear_clase,
    obtener_clase,
    listar_clases,
    actualizar_clase,
    eliminar_clase,
)

router = APIRouter(prefix="/clases", tags=["clases"])


@router.post("", response_model=ClaseOut, status_code=status.HTTP_201_CREATED)
def crear_clase_endpoint(payload: ClaseCreate, db: Session = Depends(get_db)):
    return crear_clase(db, payload)


@router.get("", response_model=List[ClaseOut])
def listar_clases_endpoint(
        id_entrenador: int | None = Query(None, description="Filtra por entrenador"),
        db: Session = Depends(get_db),
):
    return listar_clases(db, id_entrenador)


@router.get("/{id_clase}", response_model=ClaseOut)
def obtener_clase_endpoint(id_clase: int, db: Session = Depends(get_db)):
    clase = obtener_clase(db, id_clase)
    if not clase:
        raise HTTPException(status_code=404, detail="Clase no encontrada")
    return clase


@router.patch("/{id_clase}", response_model=ClaseOut)
def actualizar_clase_endpoint(id_clase: int, payload: ClaseUpdate, db: Session = Depends(get_db)):
    clase = actualizar_clase(db, id_clase, payload)
    if not clase:
        raise HTTPException(status_code=404, detail="Clase no encontrada")
    return clase


@router.delete("/{id_clase}", status_code=status.HTTP_204_NO_CONTENT)
def eliminar_clase_endpoint(id_clase: int, db: Session = Depends(get_db)):
    """Elimina la clase y, en cascada, sus asistencias"""
    if not eliminar_clase(db, id_clase):
        raise HTTPException(status_code=404, detail="Clase no encontrada")
    return None
