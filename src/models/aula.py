# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para la entidad Aula.
"""

from sqlalchemy import Column, Integer, String
from src.database import Base

class Aula(Base):
    __tablename__ = 'aulas'

    id = Column(Integer, primary_key=True, index=True)
    nombre = Column(String(100), nullable=False)
    ubicacion = Column(String(150), nullable=False)  # Centro o dirección donde está el aula
    capacidad = Column(Integer, nullable=True)
