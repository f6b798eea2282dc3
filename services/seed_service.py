# services/seed_service.py
"""
Datos iniciales del gimnasio (planes, entrenadores, clases y un histórico
mínimo de clientes, pagos y asistencias).

Los montos de los pagos no cuadran con los precios de los planes: es histórico
cargado tal cual, no se valida.
"""
import logging
from datetime import date, time
from decimal import Decimal

from sqlalchemy.orm import Session
from models.plan import Plan
from models.client import Cliente
from models.trainer import Entrenador
from models.gym_class import Clase
from models.payment import Pago
from models.attendance import Asistencia

logger = logging.getLogger(__name__)

PLANES = [
    {"id_plan": 1, "tipo": "Mensual", "precio": Decimal("80000.00"), "duracion_meses": 1},
    {"id_plan": 2, "tipo": "Trimestral", "precio": Decimal("220000.00"), "duracion_meses": 3},
    {"id_plan": 3, "tipo": "Semestral", "precio": Decimal("400000.00"), "duracion_meses": 6},
    {"id_plan": 4, "tipo": "Anual", "precio": Decimal("750000.00"), "duracion_meses": 12},
    {"id_plan": 5, "tipo": "Vencido", "precio": Decimal("0.00"), "duracion_meses": 0},
]

CLIENTES = [
    {"id_cliente": 1, "nombre": "Ana Gómez", "email": "ana.gomez@gmail.com",
     "telefono": "3001234567", "fecha_registro": date(2024, 12, 1), "id_plan": 1},
    {"id_cliente": 2, "nombre": "Carlos Pérez", "email": "carlos.perez@gmail.com",
     "telefono": "3012345678", "fecha_registro": date(2025, 1, 5), "id_plan": 2},
    {"id_cliente": 3, "nombre": "Laura Martínez", "email": "laura.martinez@hotmail.com",
     "telefono": "3023456789", "fecha_registro": date(2025, 1, 20), "id_plan": 3},
    {"id_cliente": 4, "nombre": "Jorge Ramírez", "email": "jorge.ramirez@yahoo.com",
     "telefono": "3034567890", "fecha_registro": date(2025, 2, 1), "id_plan": 4},
    {"id_cliente": 5, "nombre": "Sofía Torres", "email": "sofia.torres@gmail.com",
     "telefono": "3045678901", "fecha_registro": date(2023, 6, 15), "id_plan": 5},
    {"id_cliente": 6, "nombre": "Diego Herrera", "email": "diego.herrera@outlook.com",
     "telefono": "3056789012", "fecha_registro": date(2025, 2, 10), "id_plan": None},
]

ENTRENADORES = [
    {"id_entrenador": 1, "nombre": "Miguel Rojas", "especialidad": "Spinning",
     "telefono": "3101112233", "email": "miguel.rojas@gimnasiomiller.com"},
    {"id_entrenador": 2, "nombre": "Valentina Cruz", "especialidad": "Yoga",
     "telefono": "3112223344", "email": "valentina.cruz@gimnasiomiller.com"},
    {"id_entrenador": 3, "nombre": "Andrés Castro", "especialidad": "CrossFit",
     "telefono": "3123334455", "email": "andres.castro@gimnasiomiller.com"},
]

CLASES = [
    {"id_clase": 1, "nombre": "Spinning", "horario": time(7, 0), "id_entrenador": 1},
    {"id_clase": 2, "nombre": "Yoga", "horario": time(9, 0), "id_entrenador": 2},
    {"id_clase": 3, "nombre": "CrossFit", "horario": time(18, 0), "id_entrenador": 3},
    {"id_clase": 4, "nombre": "Pilates", "horario": time(19, 30), "id_entrenador": None},
]

PAGOS = [
    {"id_pago": 1, "id_cliente": 1, "monto": Decimal("280000.00"), "fecha_pago": date(2024, 12, 15)},
    {"id_pago": 2, "id_cliente": 2, "monto": Decimal("220000.00"), "fecha_pago": date(2025, 1, 10)},
    {"id_pago": 3, "id_cliente": 3, "monto": Decimal("350000.00"), "fecha_pago": date(2025, 1, 25)},
    {"id_pago": 4, "id_cliente": 4, "monto": Decimal("750000.00"), "fecha_pago": date(2025, 2, 5)},
]

ASISTENCIAS = [
    {"id_asistencia": 1, "id_cliente": 1, "id_clase": 1, "fecha": date(2025, 2, 10)},
    {"id_asistencia": 2, "id_cliente": 2, "id_clase": 2, "fecha": date(2025, 2, 11)},
    {"id_asistencia": 3, "id_cliente": 3, "id_clase": 1, "fecha": date(2025, 2, 12)},
    {"id_asistencia": 4, "id_cliente": 4, "id_clase": 3, "fecha": date(2025, 2, 13)},
]


def cargar_datos_iniciales(db: Session) -> bool:
    """Carga los datos semilla una sola vez; devuelve False si ya había planes"""
    if db.query(Plan.id_plan).first() is not None:
        logger.info("Datos iniciales ya cargados, se omite la carga")
        return False

    try:
        # por lotes, respetando el orden de las FKs
        for modelo, filas in (
            (Plan, PLANES),
            (Entrenador, ENTRENADORES),
            (Cliente, CLIENTES),
            (Clase, CLASES),
            (Pago, PAGOS),
            (Asistencia, ASISTENCIAS),
        ):
            db.add_all(modelo(**fila) for fila in filas)
            db.flush()
        db.commit()
    except Exception:
        db.rollback()
        logger.exception("Error cargando datos iniciales")
        raise

    logger.info(
        "Datos iniciales cargados: %d planes, %d clientes, %d clases",
        len(PLANES), len(CLIENTES), len(CLASES),
    )
    return True
