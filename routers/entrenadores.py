# routers/entrenadores.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List

from utils.dependencies import get_db
from schemas.trainer import EntrenadorCreate, EntrenadorUpdate, EntrenadorOut
from services.trainer_service import (
    crear_entrenador,
    obtener_entrenador,
    listar_entrenadores,
    actualizar_entrenador,
    eliminar_entrenador,
)

router = APIRouter(prefix="/entrenadores", tags=["entrenadores"])


@router.post("", response_model=EntrenadorOut, status_code=status.HTTP_201_CREATED)
def crear_entrenador_endpoint(payload: EntrenadorCreate, db: Session = Depends(get_db)):
    return crear_entrenador(db, payload)


@router.get("", response_model=List[EntrenadorOut])
def listar_entrenadores_endpoint(db: Session = Depends(get_db)):
    return listar_entrenadores(db)


@router.get("/{id_entrenador}", response_model=EntrenadorOut)
def obtener_entrenador_endpoint(id_entrenador: int, db: Session = Depends(get_db)):
    e = obtener_entrenador(db, id_entrenador)
    if not e:
        raise HTTPException(status_code=404, detail="Entrenador no encontrado")
    return e


@router.patch("/{id_entrenador}", response_model=EntrenadorOut)
def actualizar_entrenador_endpoint(
        id_entrenador: int,
        payload: EntrenadorUpdate,
        db: Session = Depends(get_db),
):
    e = actualizar_entrenador(db, id_entrenador, payload)
    if not e:
        raise HTTPException(status_code=404, detail="Entrenador no encontrado")
    return e


@router.delete("/{id_entrenador}", status_code=status.HTTP_204_NO_CONTENT)
def eliminar_entrenador_endpoint(id_entrenador: int, db: Session = Depends(get_db)):
    if not eliminar_entrenador(db, id_entrenador):
        raise HTTPException(status_code=404, detail="Entrenador no encontrado")
    return None
