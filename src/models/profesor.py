# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para la entidad Profesor.
"""

from sqlalchemy import Column, Integer, String, Boolean, Float
from src.database import Base

class Profesor(Base):
    __tablename__ = 'profesores'

    id = Column(Integer, primary_key=True, index=True)
    nombre = Column(String(100), nullable=False)
    apellidos = Column(String(150), nullable=True)
    email = Column(String(100), unique=True, index=True, nullable=True)
    activo = Column(Boolean, default=True)
    horas_contrato = Column(Float, nullable=True)  # Horas semanales de contrato
