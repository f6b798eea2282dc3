# scripts/init_db.py
"""
Script para inicializar la base de datos del gimnasio.

Uso:
    python scripts/init_db.py create
    python scripts/init_db.py seed
    python scripts/init_db.py drop
"""

import logging
from pathlib import Path

# Agregar el directorio padre al path
import sys

sys.path.insert(0, str(Path(__file__).parent.parent))

from config.database import Base, SessionLocal, engine
from config.logging_config import setup_logging

# Importar todos los modelos para que se registren en Base.metadata (y el trigger)
import models  # noqa: F401
from services.seed_service import cargar_datos_iniciales

logger = logging.getLogger("init_db")


def init_db():
    """Crea todas las tablas y el trigger de la bitácora"""
    logger.info("Creando tablas en la base de datos...")
    Base.metadata.create_all(bind=engine)
    logger.info("Tablas disponibles: %s", ", ".join(sorted(Base.metadata.tables.keys())))


def seed_db():
    """Crea el esquema si falta y carga los datos iniciales"""
    init_db()
    db = SessionLocal()
    try:
        if cargar_datos_iniciales(db):
            logger.info("Datos iniciales cargados")
    finally:
        db.close()


def drop_db():
    """Elimina todas las tablas (SOLO PARA DESARROLLO)"""
    respuesta = input("¿Seguro que deseas eliminar todas las tablas? (s/n): ")
    if respuesta.lower() != 's':
        logger.info("Operación cancelada")
        return

    logger.info("Eliminando tablas...")
    Base.metadata.drop_all(bind=engine)
    logger.info("Tablas eliminadas")


if __name__ == "__main__":
    import argparse

    setup_logging()

    parser = argparse.ArgumentParser(description="Gestión de base de datos")
    parser.add_argument("action", choices=["create", "seed", "drop"], help="Acción a ejecutar")

    args = parser.parse_args()

    try:
        if args.action == "create":
            init_db()
        elif args.action == "seed":
            seed_db()
        elif args.action == "drop":
            drop_db()
    finally:
        engine.dispose()
