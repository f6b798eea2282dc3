# routers/pagos.py
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from typing import List

from utils.dependencies import get_db
from schemas.payment import PagoCreate, PagoOut
from services.payment_service import (
    crear_pago,
    obtener_pago,
    obtener_pagos,
    eliminar_pago,
)

router = APIRouter(prefix="/pagos", tags=["pagos"])


@router.post("", response_model=PagoOut, status_code=status.HTTP_201_CREATED)
def crear_pago_endpoint(payload: PagoCreate, db: Session = Depends(get_db)):
    """Registra un pago de un cliente"""
    return crear_pago(db, payload)


@router.get("", response_model=List[PagoOut])
def obtener_pagos_endpoint(
        id_cliente: int | None = Query(None, description="ID del cliente"),
        limite: int = Query(100, ge=1, le=1000),
        db: Session = Depends(get_db),
):
    """Historial de pagos, del más reciente al más antiguo"""
    return obtener_pagos(db, id_cliente, limite)


@router.get("/{id_pago}", response_model=PagoOut)
def obtener_pago_endpoint(id_pago: int, db: Session = Depends(get_db)):
    """Obtiene detalles de un pago específico"""
    pago = obtener_pago(db, id_pago)
    if not pago:
        raise HTTPException(status_code=404, detail="Pago no encontrado")

    return pago


@router.delete("/{id_pago}", status_code=status.HTTP_204_NO_CONTENT)
def eliminar_pago_endpoint(id_pago: int, db: Session = Depends(get_db)):
    if not eliminar_pago(db, id_pago):
        raise HTTPException(status_code=404, detail="Pago no encontrado")
    return None
