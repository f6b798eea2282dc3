# services/class_service.py
import logging

from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from models.gym_class import Clase
from schemas.gym_class import ClaseCreate, ClaseUpdate

logger = logging.getLogger(__name__)

CAMPOS_ANULABLES = {"id_entrenador"}


def crear_clase(db: Session, data: ClaseCreate) -> Clase:
    """Publica una clase; entrenador inexistente -> IntegrityError"""
    clase = Clase(**data.model_dump())
    try:
        db.add(clase)
        db.commit()
    except IntegrityError:
        db.rollback()
        raise
    db.refresh(clase)
    logger.info("Clase creada: id=%s nombre=%s", clase.id_clase, clase.nombre)
    return clase


def obtener_clase(db: Session, id_clase: int) -> Clase | None:
    return db.query(Clase).filter(Clase.id_clase == id_clase).first()


def listar_clases(db: Session, id_entrenador: int | None = None) -> list[Clase]:
    """Lista clases por horario, opcionalmente de un entrenador"""
    query = db.query(Clase)

    if id_entrenador is not None:
        query = query.filter(Clase.id_entrenador == id_entrenador)

    return query.order_by(Clase.horario, Clase.id_clase).all()


def actualizar_clase(db: Session, id_clase: int, data: ClaseUpdate) -> Clase | None:
    clase = obtener_clase(db, id_clase)
    if not clase:
        return None

    for campo, valor in data.model_dump(exclude_unset=True).items():
        if valor is None and campo not in CAMPOS_ANULABLES:
            continue
        setattr(clase, campo, valor)

    try:
        db.add(clase)
        db.commit()
    except IntegrityError:
        db.rollback()
        raise
    db.refresh(clase)
    logger.info("Clase %s actualizada", id_clase)
    return clase


def eliminar_clase(db: Session, id_clase: int) -> bool:
    """Elimina la clase; sus asistencias caen por ON DELETE CASCADE"""
    clase = obtener_clase(db, id_clase)
    if not clase:
        return False

    db.delete(clase)
    db.commit()
    logger.info("Clase %s eliminada", id_clase)
    return True
