# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para la entidad Alumno.
"""

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from src.database import Base

class Alumno(Base):
    __tablename__ = "alumnos"

    id = Column(Integer, primary_key=True, index=True)
    nombre = Column(String(100), index=True, nullable=False)
    apellidos = Column(String(150), nullable=True)
    email = Column(String(100), unique=True, index=True, nullable=True)
    fecha_alta = Column(DateTime, default=datetime.utcnow)

    recibos = relationship("Recibo", back_populates="alumno")
