# models/trainer.py
from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from config.database import Base


class Entrenador(Base):
    __tablename__ = "entrenadores"

    id_entrenador: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nombre: Mapped[str] = mapped_column(String(50), nullable=False)
    especialidad: Mapped[str | None] = mapped_column(String(20), nullable=True)
    telefono: Mapped[str] = mapped_column(String(15), nullable=False)
    email: Mapped[str] = mapped_column(String(100), unique=True, index=True, nullable=False)
