# routers/planes.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List

from utils.dependencies import get_db
from schemas.plan import PlanCreate, PlanUpdate, PlanOut
from schemas.report import TotalClientesPlan
from services.plan_service import (
    crear_plan,
    obtener_plan,
    listar_planes,
    actualizar_plan,
    eliminar_plan,
)
from services.report_service import total_clientes_plan

router = APIRouter(prefix="/planes", tags=["planes"])


@router.post("", response_model=PlanOut, status_code=status.HTTP_201_CREATED)
def crear_plan_endpoint(payload: PlanCreate, db: Session = Depends(get_db)):
    """Crea un plan de suscripción"""
    return crear_plan(db, payload)


@router.get("", response_model=List[PlanOut])
def listar_planes_endpoint(db: Session = Depends(get_db)):
    return listar_planes(db)


@router.get("/{id_plan}", response_model=PlanOut)
def obtener_plan_endpoint(id_plan: int, db: Session = Depends(get_db)):
    plan = obtener_plan(db, id_plan)
    if not plan:
        raise HTTPException(status_code=404, detail="Plan no encontrado")
    return plan


@router.patch("/{id_plan}", response_model=PlanOut)
def actualizar_plan_endpoint(id_plan: int, payload: PlanUpdate, db: Session = Depends(get_db)):
    plan = actualizar_plan(db, id_plan, payload)
    if not plan:
        raise HTTPException(status_code=404, detail="Plan no encontrado")
    return plan


@router.delete("/{id_plan}", status_code=status.HTTP_204_NO_CONTENT)
def eliminar_plan_endpoint(id_plan: int, db: Session = Depends(get_db)):
    """Elimina un plan sin clientes asociados"""
    if not eliminar_plan(db, id_plan):
        raise HTTPException(status_code=404, detail="Plan no encontrado")
    return None


@router.get("/{id_plan}/clientes/total", response_model=TotalClientesPlan)
def total_clientes_plan_endpoint(id_plan: int, db: Session = Depends(get_db)):
    """Cantidad de clientes en el plan (0 si el plan no existe)"""
    return TotalClientesPlan(id_plan=id_plan, total_clientes=total_clientes_plan(db, id_plan))
