# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para la entidad Factura.
"""

from sqlalchemy import Column, Integer, String, Date, Float, JSON
from src.database import Base

class Factura(Base):
    __tablename__ = "facturas"

    id = Column(Integer, primary_key=True, index=True)
    codigo_factura = Column(String(30), unique=True, index=True, nullable=True)
    fecha = Column(Date, nullable=False)
    concepto = Column(String(255), nullable=True)
    importe_total = Column(Float, nullable=False)
    estado = Column(String(20), default='Pending')  # 'Pending' o 'Paid'

    # Cobro directo de la factura (cuando no hay recibos vinculados)
    fecha_pago = Column(Date, nullable=True)
    forma_pago = Column(String(30), nullable=True)

    # Ids de recibos en el orden en que se vincularon
    recibos_vinculados = Column(JSON, default=list)
