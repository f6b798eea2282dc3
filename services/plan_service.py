# services/plan_service.py
import logging

from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from models.plan import Plan
from schemas.plan import PlanCreate, PlanUpdate

logger = logging.getLogger(__name__)


def crear_plan(db: Session, data: PlanCreate) -> Plan:
    """Crea un plan de suscripción"""
    plan = Plan(**data.model_dump())
    db.add(plan)
    db.commit()
    db.refresh(plan)
    logger.info("Plan creado: id=%s tipo=%s", plan.id_plan, plan.tipo)
    return plan


def obtener_plan(db: Session, id_plan: int) -> Plan | None:
    return db.query(Plan).filter(Plan.id_plan == id_plan).first()


def listar_planes(db: Session) -> list[Plan]:
    return db.query(Plan).order_by(Plan.id_plan).all()


def actualizar_plan(db: Session, id_plan: int, data: PlanUpdate) -> Plan | None:
    """Actualiza solo los campos enviados"""
    plan = obtener_plan(db, id_plan)
    if not plan:
        return None

    for campo, valor in data.model_dump(exclude_unset=True).items():
        if valor is not None:
            setattr(plan, campo, valor)

    db.add(plan)
    db.commit()
    db.refresh(plan)
    logger.info("Plan %s actualizado", id_plan)
    return plan


def eliminar_plan(db: Session, id_plan: int) -> bool:
    """Elimina un plan; falla con IntegrityError si algún cliente lo referencia"""
    plan = obtener_plan(db, id_plan)
    if not plan:
        return False

    try:
        db.delete(plan)
        db.commit()
    except IntegrityError:
        db.rollback()
        raise
    logger.info("Plan %s eliminado", id_plan)
    return True
