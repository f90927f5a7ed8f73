# -*- coding: utf-8 -*-
"""
Schemas Pydantic para la entidad Factura.
"""

from datetime import date
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

EstadoFactura = Literal['Pending', 'Paid']


class FacturaBase(BaseModel):
    codigo_factura: Optional[str] = Field(None, max_length=30)
    fecha: date
    concepto: Optional[str] = Field(None, max_length=255)
    importe_total: float = Field(..., ge=0)
    estado: EstadoFactura = 'Pending'
    fecha_pago: Optional[date] = None
    forma_pago: Optional[str] = Field(None, max_length=30)
    recibos_vinculados: List[int] = Field(default_factory=list)


class FacturaCreate(FacturaBase):
    pass


class FacturaRead(FacturaBase):
    id: int

    class Config:
        from_attributes = True


class FacturaCobro(BaseModel):
    """Datos del cobro directo de una factura sin recibos."""
    fecha_pago: Optional[date] = None
    forma_pago: str = Field('Domiciliado', max_length=30)
