import logging
from datetime import date, time
from decimal import Decimal

import pytest

from schemas.plan import PlanCreate, PlanUpdate
from schemas.client import ClienteCreate, ClienteUpdate
from schemas.trainer import EntrenadorCreate, EntrenadorUpdate
from schemas.gym_class import ClaseCreate, ClaseUpdate
from schemas.payment import PagoCreate
from services.errors import ConstraintViolation
from services.plan_service import crear_plan, actualizar_plan, eliminar_plan, listar_planes
from services.client_service import (
    crear_cliente,
    obtener_cliente,
    listar_clientes,
    actualizar_cliente,
    eliminar_cliente,
)
from services.trainer_service import crear_entrenador, actualizar_entrenador, eliminar_entrenador
from services.class_service import crear_clase, actualizar_clase, listar_clases
from services.payment_service import crear_pago, obtener_pagos
from services.seed_service import cargar_datos_iniciales
from services.report_service import clientes_activos


def test_seed_loads_only_once(db):
    assert cargar_datos_iniciales(db) is False
    assert len(listar_planes(db)) == 5


def test_create_client_defaults_registration_date(db):
    cliente = crear_cliente(db, ClienteCreate(
        nombre="Marta Ríos", email="marta.rios@gmail.com", telefono="3200000000", id_plan=2,
    ))

    assert cliente.id_cliente == 7
    assert cliente.fecha_registro == date.today()
    assert [c.id_cliente for c in listar_clientes(db, id_plan=2)] == [2, 7]


def test_duplicate_client_email_is_a_constraint_violation(db):
    with pytest.raises(ConstraintViolation):
        crear_cliente(db, ClienteCreate(
            nombre="Otra Ana", email="ana.gomez@gmail.com", telefono="3200000001",
        ))

    assert len(listar_clientes(db)) == 6


def test_client_with_unknown_plan_is_rejected(db):
    with pytest.raises(ConstraintViolation):
        crear_cliente(db, ClienteCreate(
            nombre="Sin Plan", email="sin.plan@gmail.com", telefono="3200000002", id_plan=99,
        ))


def test_duplicate_trainer_email_is_rejected(db):
    with pytest.raises(ConstraintViolation):
        crear_entrenador(db, EntrenadorCreate(
            nombre="Clon", telefono="3109999999", email="miguel.rojas@gimnasiomiller.com",
        ))


def test_change_client_plan(db):
    cliente = actualizar_cliente(db, 6, ClienteUpdate(id_plan=3))
    assert cliente.id_plan == 3
    assert 6 in [c["id_cliente"] for c in clientes_activos(db)]

    cliente = actualizar_cliente(db, 6, ClienteUpdate(id_plan=None))
    assert cliente.id_plan is None


def test_update_ignores_null_required_fields(db):
    cliente = actualizar_cliente(db, 1, ClienteUpdate(nombre=None, telefono="3000000000"))
    assert cliente.nombre == "Ana Gómez"
    assert cliente.telefono == "3000000000"


def test_update_missing_client_returns_none(db):
    assert actualizar_cliente(db, 999, ClienteUpdate(nombre="X")) is None


def test_delete_client_with_payments_is_rejected(db):
    with pytest.raises(ConstraintViolation):
        eliminar_cliente(db, 1)

    assert obtener_cliente(db, 1) is not None


def test_delete_client_without_payments(db):
    assert eliminar_cliente(db, 6) is True
    assert obtener_cliente(db, 6) is None
    assert eliminar_cliente(db, 6) is False


def test_delete_plan_in_use_is_rejected(db):
    with pytest.raises(ConstraintViolation):
        eliminar_plan(db, 1)


def test_plan_crud(db):
    plan = crear_plan(db, PlanCreate(tipo="Estudiante", precio=Decimal("60000"), duracion_meses=1))
    plan = actualizar_plan(db, plan.id_plan, PlanUpdate(precio=Decimal("65000.50")))

    assert plan.precio == Decimal("65000.50")
    assert plan.tipo == "Estudiante"
    assert eliminar_plan(db, plan.id_plan) is True


def test_trainer_with_classes_cannot_be_deleted(db):
    with pytest.raises(ConstraintViolation):
        eliminar_entrenador(db, 1)


def test_trainer_changes_are_logged(db, caplog):
    with caplog.at_level(logging.INFO, logger="services.trainer_service"):
        e = crear_entrenador(db, EntrenadorCreate(
            nombre="Paula Gil", telefono="3107778899", email="paula.gil@gimnasiomiller.com",
        ))
        actualizar_entrenador(db, e.id_entrenador, EntrenadorUpdate(especialidad="Pilates"))
        eliminar_entrenador(db, e.id_entrenador)

    assert f"Entrenador creado: id={e.id_entrenador}" in caplog.text
    assert f"Entrenador {e.id_entrenador} actualizado" in caplog.text
    assert f"Entrenador {e.id_entrenador} eliminado" in caplog.text


def test_class_crud_and_filter(db):
    clase = crear_clase(db, ClaseCreate(nombre="Boxeo", horario=time(6, 0), id_entrenador=3))

    assert [c.id_clase for c in listar_clases(db, id_entrenador=3)] == [5, 3]
    assert listar_clases(db)[0].nombre == "Boxeo"

    clase = actualizar_clase(db, clase.id_clase, ClaseUpdate(id_entrenador=None))
    assert clase.id_entrenador is None


def test_class_with_unknown_trainer_is_rejected(db):
    with pytest.raises(ConstraintViolation):
        crear_clase(db, ClaseCreate(nombre="Fantasma", horario=time(20, 0), id_entrenador=99))


def test_payment_amount_is_free_form(db):
    pago = crear_pago(db, PagoCreate(id_cliente=5, monto=Decimal("12345.67"), fecha_pago=date(2025, 3, 1)))

    assert pago.monto == Decimal("12345.67")
    assert [p.id_pago for p in obtener_pagos(db, id_cliente=5)] == [pago.id_pago]


def test_payment_for_unknown_client_is_rejected(db):
    with pytest.raises(ConstraintViolation):
        crear_pago(db, PagoCreate(id_cliente=999, monto=Decimal("1000")))
