# services/client_service.py
import logging
from datetime import date

from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from models.client import Cliente
from schemas.client import ClienteCreate, ClienteUpdate

logger = logging.getLogger(__name__)

CAMPOS_ANULABLES = {"id_plan"}


def crear_cliente(db: Session, data: ClienteCreate) -> Cliente:
    """Registra un cliente; email duplicado o plan inexistente -> IntegrityError"""
    cliente = Cliente(
        nombre=data.nombre,
        email=str(data.email),
        telefono=data.telefono,
        fecha_registro=data.fecha_registro or date.today(),
        id_plan=data.id_plan,
    )
    try:
        db.add(cliente)
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning("No se pudo registrar el cliente %s", data.email)
        raise
    db.refresh(cliente)
    logger.info("Cliente registrado: id=%s", cliente.id_cliente)
    return cliente


def obtener_cliente(db: Session, id_cliente: int) -> Cliente | None:
    return db.query(Cliente).filter(Cliente.id_cliente == id_cliente).first()


def listar_clientes(db: Session, id_plan: int | None = None) -> list[Cliente]:
    """Lista clientes, opcionalmente filtrados por plan"""
    query = db.query(Cliente)

    if id_plan is not None:
        query = query.filter(Cliente.id_plan == id_plan)

    return query.order_by(Cliente.id_cliente).all()


def actualizar_cliente(db: Session, id_cliente: int, data: ClienteUpdate) -> Cliente | None:
    """Actualiza datos del cliente (incluido el cambio de plan)"""
    cliente = obtener_cliente(db, id_cliente)
    if not cliente:
        return None

    for campo, valor in data.model_dump(exclude_unset=True).items():
        if valor is None and campo not in CAMPOS_ANULABLES:
            continue
        setattr(cliente, campo, str(valor) if campo == "email" else valor)

    try:
        db.add(cliente)
        db.commit()
    except IntegrityError:
        db.rollback()
        raise
    db.refresh(cliente)
    logger.info("Cliente %s actualizado", id_cliente)
    return cliente


def eliminar_cliente(db: Session, id_cliente: int) -> bool:
    """Elimina el cliente; sus asistencias caen por ON DELETE CASCADE"""
    cliente = obtener_cliente(db, id_cliente)
    if not cliente:
        return False

    try:
        db.delete(cliente)
        db.commit()
    except IntegrityError:
        # pagos asociados (sin cascada)
        db.rollback()
        raise
    logger.info("Cliente %s eliminado", id_cliente)
    return True
