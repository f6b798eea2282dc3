# services/payment_service.py
import logging
from datetime import date

from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from sqlalchemy import desc
from models.payment import Pago
from schemas.payment import PagoCreate

logger = logging.getLogger(__name__)


def crear_pago(db: Session, data: PagoCreate) -> Pago:
    """Registra un pago; el monto no se valida contra el precio del plan"""
    pago = Pago(
        id_cliente=data.id_cliente,
        monto=data.monto,
        fecha_pago=data.fecha_pago or date.today(),
    )
    try:
        db.add(pago)
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning("Pago rechazado: cliente %s inexistente", data.id_cliente)
        raise
    db.refresh(pago)
    logger.info("Pago %s registrado: cliente=%s monto=%s", pago.id_pago, pago.id_cliente, pago.monto)
    return pago


def obtener_pago(db: Session, id_pago: int) -> Pago | None:
    """Obtiene un pago específico"""
    return db.query(Pago).filter(Pago.id_pago == id_pago).first()


def obtener_pagos(
        db: Session,
        id_cliente: int | None = None,
        limite: int = 100
) -> list[Pago]:
    """Obtiene los pagos más recientes, opcionalmente de un cliente"""
    query = db.query(Pago)

    if id_cliente is not None:
        query = query.filter(Pago.id_cliente == id_cliente)

    return query.order_by(desc(Pago.fecha_pago), desc(Pago.id_pago)).limit(limite).all()


def eliminar_pago(db: Session, id_pago: int) -> bool:
    """Elimina un pago (corrección administrativa)"""
    pago = obtener_pago(db, id_pago)
    if not pago:
        return False

    db.delete(pago)
    db.commit()
    logger.info("Pago %s eliminado", id_pago)
    return True
