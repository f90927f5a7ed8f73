# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para la entidad Recibo.
"""

from sqlalchemy import Column, Integer, String, Date, Float, ForeignKey
from sqlalchemy.orm import relationship
from src.database import Base

class Recibo(Base):
    __tablename__ = "recibos"

    id = Column(Integer, primary_key=True, index=True)
    codigo_recibo = Column(String(30), nullable=True)
    alumno_id = Column(Integer, ForeignKey("alumnos.id"), nullable=False, index=True)
    curso_id = Column(Integer, ForeignKey("cursos.id"), nullable=False, index=True)
    concepto = Column(String(255), nullable=True)
    importe = Column(Float, nullable=False)
    fecha_recibo = Column(Date, nullable=False)

    # fecha_pago solo existe cuando estado == 'Cobrado'
    estado = Column(String(20), default='Pendiente')
    fecha_pago = Column(Date, nullable=True)

    # fecha_domiciliacion solo existe cuando forma_pago == 'Domiciliado'
    forma_pago = Column(String(30), default='Domiciliado')
    fecha_domiciliacion = Column(Date, nullable=True)

    factura_id = Column(Integer, ForeignKey("facturas.id"), nullable=True, index=True)

    alumno = relationship("Alumno", back_populates="recibos")
    curso = relationship("Curso")
