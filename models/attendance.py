# models/attendance.py
"""
Asistencias y su bitácora.

Cada INSERT en `asistencias` deja una fila en `log_asistencias` mediante un
trigger AFTER INSERT que se instala junto con el esquema (create_all). Al
vivir en la base de datos, el registro no depende de qué código hizo el
INSERT: el servicio, un script o SQL directo.
"""
from datetime import date, datetime

from sqlalchemy import DDL, Integer, Date, DateTime, ForeignKey, String, event, text
from sqlalchemy.orm import Mapped, mapped_column
from config.database import Base

MENSAJE_LOG_ASISTENCIA = "Nueva asistencia registrada"
TRIGGER_LOG_ASISTENCIA = "trg_asistencias_log"


class Asistencia(Base):
    __tablename__ = "asistencias"

    id_asistencia: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id_cliente: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("clientes.id_cliente", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    id_clase: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("clases.id_clase", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    fecha: Mapped[date] = mapped_column(Date, default=date.today, nullable=False)

    def __repr__(self):
        return (
            f"<Asistencia("
            f"id_asistencia={self.id_asistencia}, "
            f"id_cliente={self.id_cliente}, "
            f"id_clase={self.id_clase}, "
            f"fecha={self.fecha}"
            f")>"
        )


class LogAsistencia(Base):
    __tablename__ = "log_asistencias"

    # Sin FKs: la bitácora sobrevive al borrado en cascada de clientes/clases
    id_log: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id_cliente: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    id_clase: Mapped[int] = mapped_column(Integer, nullable=False)
    fecha: Mapped[date] = mapped_column(Date, nullable=False)
    fecha_log: Mapped[datetime] = mapped_column(DateTime, server_default=text("CURRENT_TIMESTAMP"), nullable=False)
    mensaje: Mapped[str] = mapped_column(
        String(100),
        server_default=MENSAJE_LOG_ASISTENCIA,
        nullable=False
    )


_INSERT_LOG = (
    "INSERT INTO log_asistencias (id_cliente, id_clase, fecha, mensaje) "
    f"VALUES (NEW.id_cliente, NEW.id_clase, NEW.fecha, '{MENSAJE_LOG_ASISTENCIA}')"
)

_TRIGGER_SQLITE = DDL(
    f"CREATE TRIGGER IF NOT EXISTS {TRIGGER_LOG_ASISTENCIA} "
    "AFTER INSERT ON asistencias FOR EACH ROW "
    f"BEGIN {_INSERT_LOG}; END"
)

_TRIGGER_MYSQL = DDL(
    f"CREATE TRIGGER {TRIGGER_LOG_ASISTENCIA} "
    "AFTER INSERT ON asistencias FOR EACH ROW "
    f"{_INSERT_LOG}"
)

def _se_creo_asistencias(ddl, target, bind, tables=None, **kw):
    return tables is None or any(t.name == Asistencia.__tablename__ for t in tables)


# after_create de la metadata: ambas tablas ya existen cuando se crea el trigger
event.listen(
    Base.metadata,
    "after_create",
    _TRIGGER_SQLITE.execute_if(dialect="sqlite", callable_=_se_creo_asistencias),
)
event.listen(
    Base.metadata,
    "after_create",
    _TRIGGER_MYSQL.execute_if(dialect="mysql", callable_=_se_creo_asistencias),
)
