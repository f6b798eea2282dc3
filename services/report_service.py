# services/report_service.py
"""
Vistas de reporte y funciones escalares. Todo es de solo lectura y se
recalcula en cada llamada.
"""
from datetime import date
from decimal import Decimal

from sqlalchemy.orm import Session
from sqlalchemy import func
from models.plan import Plan
from models.client import Cliente
from models.gym_class import Clase
from models.payment import Pago
from models.attendance import Asistencia


def clientes_activos(db: Session) -> list[dict]:
    """Clientes con un plan vigente (duracion_meses > 0); sin plan o plan en 0 quedan fuera"""
    rows = db.query(
        Cliente.id_cliente,
        Cliente.nombre,
        Cliente.email,
        Cliente.telefono,
        Plan.id_plan,
        Plan.tipo.label("tipo_plan"),
        Plan.duracion_meses,
    ) \
        .select_from(Cliente) \
        .join(Plan, Cliente.id_plan == Plan.id_plan) \
        .filter(Plan.duracion_meses > 0) \
        .order_by(Cliente.id_cliente) \
        .all()

    return [dict(r._mapping) for r in rows]


def asistencias_por_clase(db: Session) -> list[dict]:
    """Total de asistencias por clase, incluidas las clases sin asistencias (0)"""
    rows = db.query(
        Clase.id_clase,
        Clase.nombre,
        func.count(Asistencia.id_asistencia).label("total_asistencias"),
    ) \
        .select_from(Clase) \
        .outerjoin(Asistencia, Asistencia.id_clase == Clase.id_clase) \
        .group_by(Clase.id_clase, Clase.nombre) \
        .order_by(Clase.id_clase) \
        .all()

    return [dict(r._mapping) for r in rows]


def plan_de_cliente(db: Session, id_cliente: int) -> str | None:
    """Tipo del plan del cliente; None si no tiene plan o no existe"""
    row = db.query(Plan.tipo) \
        .join(Cliente, Cliente.id_plan == Plan.id_plan) \
        .filter(Cliente.id_cliente == id_cliente) \
        .first()
    return row[0] if row else None


def total_clientes_plan(db: Session, id_plan: int) -> int:
    """Clientes que referencian el plan; 0 si ninguno o si el plan no existe"""
    total = db.query(func.count(Cliente.id_cliente)) \
        .filter(Cliente.id_plan == id_plan) \
        .scalar()
    return total or 0


def ingresos_totales(db: Session, inicio: date, fin: date) -> Decimal:
    """Suma de pagos con fecha_pago en [inicio, fin]; 0 (no None) si no hay pagos"""
    total = db.query(func.sum(Pago.monto)) \
        .filter(Pago.fecha_pago.between(inicio, fin)) \
        .scalar()
    if total is None:
        return Decimal("0.00")
    return Decimal(total).quantize(Decimal("0.01"))
