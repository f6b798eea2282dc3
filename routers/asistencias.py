# routers/asistencias.py
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from typing import List

from utils.dependencies import get_db
from schemas.attendance import AsistenciaCreate, AsistenciaRegistrada, AsistenciaOut, LogAsistenciaOut
from services.errors import ClientNotFound, ClassNotFound
from services.attendance_service import (
    registrar_asistencia,
    obtener_asistencia,
    listar_asistencias,
    eliminar_asistencia,
    listar_log_asistencias,
)

router = APIRouter(prefix="/asistencias", tags=["asistencias"])


@router.post("", response_model=AsistenciaRegistrada, status_code=status.HTTP_201_CREATED)
def registrar_asistencia_endpoint(payload: AsistenciaCreate, db: Session = Depends(get_db)):
    """
    Registra la asistencia de un cliente a una clase.
    404 si el cliente (se comprueba primero) o la clase no existen.
    """
    try:
        id_asistencia = registrar_asistencia(db, payload.id_cliente, payload.id_clase, payload.fecha)
    except ClientNotFound:
        raise HTTPException(status_code=404, detail="Cliente no encontrado")
    except ClassNotFound:
        raise HTTPException(status_code=404, detail="Clase no encontrada")

    return AsistenciaRegistrada(id_asistencia=id_asistencia)


@router.get("", response_model=List[AsistenciaOut])
def listar_asistencias_endpoint(
        id_cliente: int | None = Query(None),
        id_clase: int | None = Query(None),
        db: Session = Depends(get_db),
):
    return listar_asistencias(db, id_cliente, id_clase)


@router.get("/log", response_model=List[LogAsistenciaOut])
def listar_log_endpoint(
        id_cliente: int | None = Query(None),
        db: Session = Depends(get_db),
):
    """Bitácora de asistencias (solo lectura)"""
    return listar_log_asistencias(db, id_cliente)


@router.get("/{id_asistencia}", response_model=AsistenciaOut)
def obtener_asistencia_endpoint(id_asistencia: int, db: Session = Depends(get_db)):
    asistencia = obtener_asistencia(db, id_asistencia)
    if not asistencia:
        raise HTTPException(status_code=404, detail="Asistencia no encontrada")
    return asistencia


@router.delete("/{id_asistencia}", status_code=status.HTTP_204_NO_CONTENT)
def eliminar_asistencia_endpoint(id_asistencia: int, db: Session = Depends(get_db)):
    if not eliminar_asistencia(db, id_asistencia):
        raise HTTPException(status_code=404, detail="Asistencia no encontrada")
    return None
