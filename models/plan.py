# models/plan.py
from decimal import Decimal

from sqlalchemy import Integer, String, Numeric
from sqlalchemy.orm import Mapped, mapped_column
from config.database import Base


class Plan(Base):
    __tablename__ = "planes"

    id_plan: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    tipo: Mapped[str] = mapped_column(String(50), nullable=False)
    precio: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    # 0 meses = plan vencido / inactivo
    duracion_meses: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self):
        return f"<Plan(id_plan={self.id_plan}, tipo={self.tipo}, duracion_meses={self.duracion_meses})>"
