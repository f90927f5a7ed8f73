# -*- coding: utf-8 -*-
"""
Archivo principal de la aplicación FastAPI para la gestión de la academia.
"""

import os
import logging
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from src.models import profesor, aula, curso, clase_curso, alumno, recibo, factura
from src.routes import (profesores_fastapi, aulas_fastapi, cursos_fastapi, clases_fastapi,
                        alumnos_fastapi, recibos_fastapi, facturas_fastapi)
from src.database import engine, Base
from src.store import RegistroNoEncontrado

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    filename='app.log'
)

# Crea las tablas en la base de datos
try:
    Base.metadata.create_all(bind=engine)
    logging.info("Tablas creadas correctamente")
except Exception as e:
    logging.error(f"Error al crear las tablas: {e}")
    raise

env = os.getenv("ENVIRONMENT", "development")

docs_url = "/docs" if env != "production" else None
redoc_url = "/redoc" if env != "production" else None

app = FastAPI(
    title="API Academia",
    description="API de gestión de la academia: horas de profesores y cobros de facturas",
    version="1.0.0",
    docs_url=docs_url,
    redoc_url=redoc_url,
    openapi_url="/openapi.json" if env != "production" else None
)

frontend_url = os.getenv("FRONTEND_URL", "http://localhost:5173")

origins = [
    frontend_url,
    "http://localhost:5173",
    "http://localhost",
    "http://127.0.0.1",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(RegistroNoEncontrado)
async def registro_no_encontrado_handler(request: Request, exc: RegistroNoEncontrado):
    logging.warning(f"{request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})

# Montaje de los routers
app.include_router(profesores_fastapi.router, prefix="/api/v1/profesores")
app.include_router(aulas_fastapi.router, prefix="/api/v1/aulas")
app.include_router(cursos_fastapi.router, prefix="/api/v1/cursos")
app.include_router(clases_fastapi.router, prefix="/api/v1/clases")
app.include_router(alumnos_fastapi.router, prefix="/api/v1/alumnos")
app.include_router(recibos_fastapi.router, prefix="/api/v1/recibos")
app.include_router(facturas_fastapi.router, prefix="/api/v1/facturas")


@app.get("/", tags=["Root"])
async def root():
    return {
        "mensaje": "API Academia - Sistema de gestión",
        "documentacion": "/docs",
        "endpoints": [
            {"profesores": "/api/v1/profesores"},
            {"aulas": "/api/v1/aulas"},
            {"cursos": "/api/v1/cursos"},
            {"clases": "/api/v1/clases"},
            {"alumnos": "/api/v1/alumnos"},
            {"recibos": "/api/v1/recibos"},
            {"facturas": "/api/v1/facturas"}
        ]
    }
