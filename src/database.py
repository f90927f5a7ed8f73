# -*- coding: utf-8 -*-
"""
Configuración de la base de datos SQLAlchemy para la API de la academia.

La API y el script resumen_horas.py abren el mismo motor a partir de
DATABASE_URL, así que la lectura de la URL y la creación del engine viven aquí.
"""

import os
from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

URL_POR_DEFECTO = "sqlite:///./database/academia.db"


def leer_database_url() -> str:
    """URL de conexión desde el entorno (o .env), con SQLite local por defecto."""
    load_dotenv()
    url = os.environ.get("DATABASE_URL") or URL_POR_DEFECTO
    # Algunos proveedores siguen entregando el prefijo antiguo de PostgreSQL
    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql://", 1)
    return url


def crear_engine(url: str):
    if not url.startswith("sqlite"):
        # pool_pre_ping descarta conexiones muertas; pool_recycle las renueva cada hora
        return create_engine(url, pool_pre_ping=True, pool_recycle=3600)

    connect_args = {"check_same_thread": False}
    if url in ("sqlite://", "sqlite:///:memory:"):
        # En memoria cada conexión es una base distinta: se comparte una sola
        return create_engine(url, connect_args=connect_args, poolclass=StaticPool)

    # SQLite no crea la carpeta del fichero por sí solo
    carpeta = os.path.dirname(url.replace("sqlite:///", "", 1))
    if carpeta:
        os.makedirs(carpeta, exist_ok=True)
    return create_engine(url, connect_args=connect_args)


DATABASE_URL = leer_database_url()

engine = crear_engine(DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

# Devuelve una sesión de base de datos (se usa con Depends)
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
