# services/trainer_service.py
import logging

from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from models.trainer import Entrenador
from schemas.trainer import EntrenadorCreate, EntrenadorUpdate

logger = logging.getLogger(__name__)

CAMPOS_ANULABLES = {"especialidad"}


def crear_entrenador(db: Session, data: EntrenadorCreate) -> Entrenador:
    e = Entrenador(
        nombre=data.nombre,
        especialidad=data.especialidad,
        telefono=data.telefono,
        email=str(data.email),
    )
    try:
        db.add(e); db.commit()
    except IntegrityError:
        db.rollback()
        raise
    db.refresh(e)
    logger.info("Entrenador creado: id=%s nombre=%s", e.id_entrenador, e.nombre)
    return e


def obtener_entrenador(db: Session, id_entrenador: int) -> Entrenador | None:
    return db.query(Entrenador).filter(Entrenador.id_entrenador == id_entrenador).first()


def listar_entrenadores(db: Session) -> list[Entrenador]:
    return db.query(Entrenador).order_by(Entrenador.id_entrenador).all()


def actualizar_entrenador(db: Session, id_entrenador: int, data: EntrenadorUpdate) -> Entrenador | None:
    e = obtener_entrenador(db, id_entrenador)
    if not e:
        return None

    for campo, valor in data.model_dump(exclude_unset=True).items():
        if valor is None and campo not in CAMPOS_ANULABLES:
            continue
        setattr(e, campo, str(valor) if campo == "email" else valor)

    try:
        db.add(e); db.commit()
    except IntegrityError:
        db.rollback()
        raise
    db.refresh(e)
    logger.info("Entrenador %s actualizado", id_entrenador)
    return e


def eliminar_entrenador(db: Session, id_entrenador: int) -> bool:
    """Falla con IntegrityError si todavía dicta clases"""
    e = obtener_entrenador(db, id_entrenador)
    if not e:
        return False

    try:
        db.delete(e); db.commit()
    except IntegrityError:
        db.rollback()
        raise
    logger.info("Entrenador %s eliminado", id_entrenador)
    return True
