from __future__ import annotations
from sqlalchemy.orm import Session
from typing import Generator

from config.database import SessionLocal

# -------------------------------
# Sesión de base de datos
# -------------------------------
def get_db() -> Generator[Session, None, None]:
    """Una sesión por request; se cierra siempre al terminar"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
