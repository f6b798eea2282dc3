# services/attendance_service.py
"""
Registro de asistencias.

`registrar_asistencia` es la vía de alta con validación: comprueba que el
cliente y la clase existan (en ese orden) antes de insertar, de modo que el
llamador distingue `ClientNotFound` de `ClassNotFound`. La fila de
`log_asistencias` la escribe el trigger de la base de datos dentro de la misma
transacción, así que un INSERT que no pase por aquí también queda registrado.
"""
import logging
from datetime import date

from sqlalchemy.orm import Session
from sqlalchemy import desc
from models.client import Cliente
from models.gym_class import Clase
from models.attendance import Asistencia, LogAsistencia
from services.errors import ClientNotFound, ClassNotFound

logger = logging.getLogger(__name__)


def registrar_asistencia(
        db: Session,
        id_cliente: int,
        id_clase: int,
        fecha: date | None = None
) -> int:
    """
    Registra que un cliente asistió a una clase y devuelve el id de la asistencia.

    Lanza ClientNotFound / ClassNotFound sin modificar nada. Validación, INSERT
    y bitácora se confirman juntos o se revierten juntos.
    """
    try:
        # bloqueo compartido: nadie borra el cliente ni la clase entre la
        # comprobación y el INSERT (SQLite lo ignora)
        cliente = db.query(Cliente.id_cliente) \
            .filter(Cliente.id_cliente == id_cliente) \
            .with_for_update(read=True) \
            .first()
        if cliente is None:
            raise ClientNotFound(id_cliente)

        clase = db.query(Clase.id_clase) \
            .filter(Clase.id_clase == id_clase) \
            .with_for_update(read=True) \
            .first()
        if clase is None:
            raise ClassNotFound(id_clase)

        asistencia = Asistencia(
            id_cliente=id_cliente,
            id_clase=id_clase,
            fecha=fecha or date.today(),
        )
        db.add(asistencia)
        db.flush()
        id_asistencia = asistencia.id_asistencia
        db.commit()
    except (ClientNotFound, ClassNotFound) as e:
        db.rollback()
        logger.warning("Asistencia rechazada: %s", e)
        raise
    except Exception:
        db.rollback()
        logger.exception("Error registrando asistencia cliente=%s clase=%s", id_cliente, id_clase)
        raise

    logger.info(
        "Asistencia %s registrada: cliente=%s clase=%s fecha=%s",
        id_asistencia, id_cliente, id_clase, asistencia.fecha,
    )
    return id_asistencia


def obtener_asistencia(db: Session, id_asistencia: int) -> Asistencia | None:
    return db.query(Asistencia).filter(Asistencia.id_asistencia == id_asistencia).first()


def listar_asistencias(
        db: Session,
        id_cliente: int | None = None,
        id_clase: int | None = None
) -> list[Asistencia]:
    """Lista asistencias, filtrando por cliente y/o clase"""
    query = db.query(Asistencia)

    if id_cliente is not None:
        query = query.filter(Asistencia.id_cliente == id_cliente)
    if id_clase is not None:
        query = query.filter(Asistencia.id_clase == id_clase)

    return query.order_by(desc(Asistencia.fecha), desc(Asistencia.id_asistencia)).all()


def eliminar_asistencia(db: Session, id_asistencia: int) -> bool:
    """Borra la asistencia; la bitácora no se toca"""
    asistencia = obtener_asistencia(db, id_asistencia)
    if not asistencia:
        return False

    db.delete(asistencia)
    db.commit()
    logger.info("Asistencia %s eliminada", id_asistencia)
    return True


def listar_log_asistencias(db: Session, id_cliente: int | None = None) -> list[LogAsistencia]:
    """Bitácora de altas de asistencia, en orden de inserción"""
    query = db.query(LogAsistencia)

    if id_cliente is not None:
        query = query.filter(LogAsistencia.id_cliente == id_cliente)

    return query.order_by(LogAsistencia.id_log).all()
