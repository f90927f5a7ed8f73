# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para la entidad Curso.
"""

from sqlalchemy import Column, Integer, String, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from src.database import Base

class Curso(Base):
    __tablename__ = 'cursos'

    id = Column(Integer, primary_key=True, index=True)
    nombre = Column(String(100), nullable=False)
    nivel = Column(String(50), nullable=True)
    modalidad = Column(String(20), default='Presencial')  # 'Presencial', 'Online' o 'Híbrido'
    activo = Column(Boolean, default=True)

    # Profesor y aula por defecto; cada clase puede sobrescribirlos
    profesor_id = Column(Integer, ForeignKey('profesores.id'), nullable=True)
    aula_id = Column(Integer, ForeignKey('aulas.id'), nullable=True)

    profesor = relationship("Profesor")
    aula = relationship("Aula")
    clases = relationship("ClaseCurso", back_populates="curso")
