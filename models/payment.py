# models/payment.py
from datetime import date
from decimal import Decimal

from sqlalchemy import Integer, Numeric, Date, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from config.database import Base


class Pago(Base):
    __tablename__ = "pagos"

    id_pago: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id_cliente: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("clientes.id_cliente"),
        nullable=True,
        index=True
    )
    # monto libre: no se valida contra el precio del plan
    monto: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    fecha_pago: Mapped[date] = mapped_column(Date, nullable=False, index=True)
