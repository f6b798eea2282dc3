# models/gym_class.py
from datetime import time

from sqlalchemy import Integer, String, Time, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from config.database import Base


class Clase(Base):
    __tablename__ = "clases"

    id_clase: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nombre: Mapped[str] = mapped_column(String(50), nullable=False)
    horario: Mapped[time] = mapped_column(Time, nullable=False)
    id_entrenador: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("entrenadores.id_entrenador"),
        nullable=True,
        index=True
    )
