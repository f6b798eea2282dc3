# models/client.py
from datetime import date

from sqlalchemy import Integer, String, Date, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from config.database import Base


class Cliente(Base):
    __tablename__ = "clientes"

    id_cliente: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nombre: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str] = mapped_column(String(100), unique=True, index=True, nullable=False)
    telefono: Mapped[str] = mapped_column(String(15), nullable=False)
    fecha_registro: Mapped[date] = mapped_column(Date, default=date.today, nullable=False)
    id_plan: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("planes.id_plan"),
        nullable=True,
        index=True
    )

    # Sin relationship(): las asistencias se borran por ON DELETE CASCADE en la BD

    def __repr__(self):
        return f"<Cliente(id_cliente={self.id_cliente}, email={self.email}, id_plan={self.id_plan})>"
