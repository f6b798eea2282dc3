from decimal import Decimal


def test_read_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["nombre"] == "GimnasioMiller API"


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_register_attendance(client):
    response = client.post("/asistencias", json={"id_cliente": 1, "id_clase": 1, "fecha": "2025-03-01"})
    assert response.status_code == 201
    id_asistencia = response.json()["id_asistencia"]

    data = client.get(f"/asistencias/{id_asistencia}").json()
    assert data == {"id_asistencia": id_asistencia, "id_cliente": 1, "id_clase": 1, "fecha": "2025-03-01"}

    log = client.get("/asistencias/log", params={"id_cliente": 1}).json()
    assert len(log) == 2
    assert log[-1]["fecha"] == "2025-03-01"
    assert log[-1]["id_clase"] == 1
    assert log[-1]["mensaje"] == "Nueva asistencia registrada"


def test_register_attendance_unknown_client(client):
    response = client.post("/asistencias", json={"id_cliente": 999, "id_clase": 1, "fecha": "2025-02-20"})
    assert response.status_code == 404
    assert response.json()["detail"] == "Cliente no encontrado"
    assert len(client.get("/asistencias").json()) == 4
    assert len(client.get("/asistencias/log").json()) == 4


def test_register_attendance_unknown_class(client):
    response = client.post("/asistencias", json={"id_cliente": 1, "id_clase": 999})
    assert response.status_code == 404
    assert response.json()["detail"] == "Clase no encontrada"


def test_register_attendance_both_missing_reports_client(client):
    response = client.post("/asistencias", json={"id_cliente": 999, "id_clase": 999})
    assert response.json()["detail"] == "Cliente no encontrado"


def test_register_attendance_requires_ids(client):
    response = client.post("/asistencias", json={"id_clase": 1})
    assert response.status_code == 422


def test_active_clients_report(client):
    response = client.get("/reportes/clientes-activos")
    assert response.status_code == 200
    assert [c["id_cliente"] for c in response.json()] == [1, 2, 3, 4]


def test_attendance_by_class_report(client):
    data = client.get("/reportes/asistencias-por-clase").json()
    totales = {r["id_clase"]: r["total_asistencias"] for r in data}
    assert totales[4] == 0
    assert totales[1] == 2


def test_revenue_report(client):
    response = client.get("/reportes/ingresos", params={"inicio": "2024-01-01", "fin": "2024-12-31"})
    assert response.status_code == 200
    assert Decimal(str(response.json()["total"])) == Decimal("280000.00")

    response = client.get("/reportes/ingresos", params={"inicio": "2030-01-01", "fin": "2030-12-31"})
    assert Decimal(str(response.json()["total"])) == 0


def test_plan_of_client_endpoint(client):
    assert client.get("/clientes/1/plan").json() == {"id_cliente": 1, "tipo_plan": "Mensual"}
    assert client.get("/clientes/6/plan").json()["tipo_plan"] is None
    assert client.get("/clientes/999/plan").json()["tipo_plan"] is None


def test_client_count_for_plan_endpoint(client):
    assert client.get("/planes/2/clientes/total").json() == {"id_plan": 2, "total_clientes": 1}
    assert client.get("/planes/99/clientes/total").json()["total_clientes"] == 0


def test_create_client_and_duplicate_email(client):
    payload = {"nombre": "Marta Ríos", "email": "marta.rios@gmail.com", "telefono": "3200000000", "id_plan": 1}
    response = client.post("/clientes", json=payload)
    assert response.status_code == 201
    assert response.json()["id_plan"] == 1

    response = client.post("/clientes", json=payload)
    assert response.status_code == 409
    assert response.json()["detail"] == "Conflicto de integridad"


def test_invalid_email_is_rejected(client):
    response = client.post("/clientes", json={"nombre": "X", "email": "no-es-email", "telefono": "1"})
    assert response.status_code == 422


def test_change_plan_via_patch(client):
    response = client.patch("/clientes/6", json={"id_plan": 2})
    assert response.status_code == 200
    assert response.json()["id_plan"] == 2
    assert client.get("/planes/2/clientes/total").json()["total_clientes"] == 2


def test_delete_client_with_payments_conflicts(client):
    assert client.delete("/clientes/1").status_code == 409
    assert client.get("/clientes/1").status_code == 200


def test_delete_client_cascades_attendance(client):
    nuevo = client.post("/clientes", json={
        "nombre": "Luis Mora", "email": "luis.mora@gmail.com", "telefono": "3201111111",
    }).json()
    client.post("/asistencias", json={"id_cliente": nuevo["id_cliente"], "id_clase": 2})

    assert client.delete(f"/clientes/{nuevo['id_cliente']}").status_code == 204
    assert client.get("/asistencias", params={"id_cliente": nuevo["id_cliente"]}).json() == []
    assert len(client.get("/asistencias/log", params={"id_cliente": nuevo["id_cliente"]}).json()) == 1


def test_missing_entities_return_404(client):
    assert client.get("/planes/99").status_code == 404
    assert client.get("/clientes/99").status_code == 404
    assert client.get("/entrenadores/99").status_code == 404
    assert client.get("/clases/99").status_code == 404
    assert client.get("/pagos/99").status_code == 404
    assert client.get("/asistencias/99").status_code == 404
    assert client.delete("/pagos/99").status_code == 404


def test_trainer_and_class_endpoints(client):
    entrenador = client.post("/entrenadores", json={
        "nombre": "Paula León", "especialidad": "Funcional", "telefono": "3134445566",
        "email": "paula.leon@gimnasiomiller.com",
    })
    assert entrenador.status_code == 201
    id_entrenador = entrenador.json()["id_entrenador"]

    clase = client.post("/clases", json={"nombre": "Funcional", "horario": "17:00:00", "id_entrenador": id_entrenador})
    assert clase.status_code == 201

    clases = client.get("/clases", params={"id_entrenador": id_entrenador}).json()
    assert [c["nombre"] for c in clases] == ["Funcional"]

    assert client.post("/clases", json={"nombre": "X", "horario": "08:00:00", "id_entrenador": 99}).status_code == 409


def test_payments_endpoints(client):
    response = client.post("/pagos", json={"id_cliente": 2, "monto": "99000.00", "fecha_pago": "2025-03-01"})
    assert response.status_code == 201
    id_pago = response.json()["id_pago"]

    pagos = client.get("/pagos", params={"id_cliente": 2}).json()
    assert [p["id_pago"] for p in pagos] == [id_pago, 2]

    assert client.post("/pagos", json={"id_cliente": 999, "monto": "1.00"}).status_code == 409
    assert client.delete(f"/pagos/{id_pago}").status_code == 204


def test_plan_endpoints(client):
    response = client.post("/planes", json={"tipo": "Estudiante", "precio": "60000.00", "duracion_meses": 1})
    assert response.status_code == 201
    id_plan = response.json()["id_plan"]

    response = client.patch(f"/planes/{id_plan}", json={"duracion_meses": 0})
    assert response.json()["duracion_meses"] == 0

    assert client.delete("/planes/1").status_code == 409
    assert client.delete(f"/planes/{id_plan}").status_code == 204
    assert len(client.get("/planes").json()) == 5
