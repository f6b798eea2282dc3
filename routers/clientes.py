# routers/clientes.py
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from typing import List

from utils.dependencies import get_db
from schemas.client import ClienteCreate, ClienteUpdate, ClienteOut, PlanDeCliente
from services.client_service import (
    crear_cliente,
    obtener_cliente,
    listar_clientes,
    actualizar_cliente,
    eliminar_cliente,
)
from services.report_service import plan_de_cliente

router = APIRouter(prefix="/clientes", tags=["clientes"])


@router.post("", response_model=ClienteOut, status_code=status.HTTP_201_CREATED)
def crear_cliente_endpoint(payload: ClienteCreate, db: Session = Depends(get_db)):
    """Registra un cliente (email único)"""
    return crear_cliente(db, payload)


@router.get("", response_model=List[ClienteOut])
def listar_clientes_endpoint(
        id_plan: int | None = Query(None, description="Filtra por plan"),
        db: Session = Depends(get_db),
):
    return listar_clientes(db, id_plan)


@router.get("/{id_cliente}", response_model=ClienteOut)
def obtener_cliente_endpoint(id_cliente: int, db: Session = Depends(get_db)):
    cliente = obtener_cliente(db, id_cliente)
    if not cliente:
        raise HTTPException(status_code=404, detail="Cliente no encontrado")
    return cliente


@router.patch("/{id_cliente}", response_model=ClienteOut)
def actualizar_cliente_endpoint(id_cliente: int, payload: ClienteUpdate, db: Session = Depends(get_db)):
    """Actualiza datos o cambia el plan del cliente"""
    cliente = actualizar_cliente(db, id_cliente, payload)
    if not cliente:
        raise HTTPException(status_code=404, detail="Cliente no encontrado")
    return cliente


@router.delete("/{id_cliente}", status_code=status.HTTP_204_NO_CONTENT)
def eliminar_cliente_endpoint(id_cliente: int, db: Session = Depends(get_db)):
    """Elimina el cliente y, en cascada, sus asistencias"""
    if not eliminar_cliente(db, id_cliente):
        raise HTTPException(status_code=404, detail="Cliente no encontrado")
    return None


@router.get("/{id_cliente}/plan", response_model=PlanDeCliente)
def plan_de_cliente_endpoint(id_cliente: int, db: Session = Depends(get_db)):
    """Tipo de plan actual del cliente (null si no tiene o no existe)"""
    return PlanDeCliente(id_cliente=id_cliente, tipo_plan=plan_de_cliente(db, id_cliente))
