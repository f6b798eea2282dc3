# routers/reportes.py
from datetime import date

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List

from utils.dependencies import get_db
from schemas.report import ClienteActivoOut, AsistenciasPorClaseOut, IngresosOut
from services.report_service import (
    clientes_activos,
    asistencias_por_clase,
    ingresos_totales,
)

router = APIRouter(prefix="/reportes", tags=["reportes"])


@router.get("/clientes-activos", response_model=List[ClienteActivoOut])
def clientes_activos_endpoint(db: Session = Depends(get_db)):
    """Clientes con plan vigente (duración > 0 meses)"""
    return clientes_activos(db)


@router.get("/asistencias-por-clase", response_model=List[AsistenciasPorClaseOut])
def asistencias_por_clase_endpoint(db: Session = Depends(get_db)):
    """Asistencias por clase, incluidas las clases sin asistencias"""
    return asistencias_por_clase(db)


@router.get("/ingresos", response_model=IngresosOut)
def ingresos_endpoint(
        inicio: date = Query(..., description="Fecha inicial (incluida)"),
        fin: date = Query(..., description="Fecha final (incluida)"),
        db: Session = Depends(get_db),
):
    """Ingresos por pagos entre dos fechas"""
    return IngresosOut(inicio=inicio, fin=fin, total=ingresos_totales(db, inicio, fin))
