# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para ClaseCurso: cada sesión programada de un curso.
"""

import uuid
from sqlalchemy import Column, String, Date, Boolean, Integer, ForeignKey, Text
from sqlalchemy.orm import relationship
from src.database import Base

class ClaseCurso(Base):
    __tablename__ = 'clases_curso'

    id = Column(String(32), primary_key=True, default=lambda: uuid.uuid4().hex)
    curso_id = Column(Integer, ForeignKey('cursos.id'), nullable=False, index=True)
    fecha = Column(Date, nullable=False, index=True)
    hora_inicio = Column(String(5), nullable=False)  # "HH:MM"
    hora_fin = Column(String(5), nullable=False)     # "HH:MM"
    profesor_id = Column(Integer, ForeignKey('profesores.id'), nullable=False, index=True)
    es_sustitucion = Column(Boolean, default=False)
    estado = Column(String(20), default='Pendiente')  # 'Pendiente', 'Hecha' o 'Anulada'

    # Si están vacíos se usan los del curso
    aula_id = Column(Integer, ForeignKey('aulas.id'), nullable=True)
    modalidad = Column(String(20), nullable=True)

    comentario_interno = Column(Text, nullable=True)

    curso = relationship("Curso", back_populates="clases")
