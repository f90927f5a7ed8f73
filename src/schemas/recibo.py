# -*- coding: utf-8 -*-
"""
Schemas Pydantic para la entidad Recibo.
"""

from datetime import date
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, model_validator

EstadoRecibo = Literal['Pendiente', 'Cobrado', 'Devuelto']
FormaPago = Literal['Domiciliado', 'Tarjeta', 'Efectivo', 'Transferencia', 'Otro']


class ReciboBase(BaseModel):
    codigo_recibo: Optional[str] = Field(None, max_length=30)
    alumno_id: int
    curso_id: int
    concepto: Optional[str] = Field(None, max_length=255)
    importe: float = Field(..., ge=0)
    fecha_recibo: date
    estado: EstadoRecibo = 'Pendiente'
    fecha_pago: Optional[date] = None
    forma_pago: FormaPago = 'Domiciliado'
    fecha_domiciliacion: Optional[date] = None
    factura_id: Optional[int] = None


class ReciboCreate(ReciboBase):

    @model_validator(mode='after')
    def comprobar_fechas(self):
        if (self.estado == 'Cobrado') != (self.fecha_pago is not None):
            raise ValueError("fecha_pago es obligatoria si y solo si el recibo está Cobrado")
        if (self.forma_pago == 'Domiciliado') != (self.fecha_domiciliacion is not None):
            raise ValueError("fecha_domiciliacion es obligatoria si y solo si la forma de pago es Domiciliado")
        return self


class ReciboRead(ReciboBase):
    id: int

    class Config:
        from_attributes = True


class ReciboPaginated(BaseModel):
    total: int
    recibos: List[ReciboRead]
