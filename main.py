# main.py

import datetime
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from config.logging_config import setup_logging
from routers import (
    planes_router,
    clientes_router,
    entrenadores_router,
    clases_router,
    pagos_router,
    asistencias_router,
    reportes_router,
)

setup_logging()
logger = logging.getLogger(__name__)

# ============================================================
# CONFIGURACIÓN
# ============================================================

app = FastAPI(
    title="GimnasioMiller API",
    version="1.0.0",
    description="API para gestión de planes, clientes, clases, pagos y asistencias"
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:4200",
        "http://127.0.0.1:4200",
        "http://localhost:3000",
    ],
    allow_credentials=True,
    allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)


# ============================================================
# MANEJO DE ERRORES
# ============================================================

@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    """Email duplicado, FK inexistente o borrado con dependientes -> 409"""
    logger.warning("Violación de integridad en %s %s: %s", request.method, request.url.path, exc.orig)
    return JSONResponse(
        status_code=409,
        content={"detail": "Conflicto de integridad", "error": str(exc.orig)},
    )


# ============================================================
# INCLUIR ROUTERS
# ============================================================

for router in (
    planes_router,
    clientes_router,
    entrenadores_router,
    clases_router,
    pagos_router,
    asistencias_router,
    reportes_router,
):
    app.include_router(router)
    logger.debug("Router registrado: %s", router.prefix)

logger.info("Routers registrados: %d rutas", len(app.routes))


# ============================================================
# RUTAS BÁSICAS
# ============================================================


@app.get("/")
def read_root():
    """Ruta raíz de la API"""
    return {
        "nombre": "GimnasioMiller API",
        "version": "1.0.0",
        "documentacion": "/docs",
        "redoc": "/redoc",
    }


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "ok", "timestamp": datetime.datetime.utcnow().isoformat()}


# ============================================================
# EJECUCIÓN
# ============================================================

if __name__ == "__main__":
    import uvicorn

    logger.info("Documentación disponible en: http://127.0.0.1:8000/docs")
    uvicorn.run("main:app", host="127.0.0.1", port=8000, reload=True)
