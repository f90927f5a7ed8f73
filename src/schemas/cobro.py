# -*- coding: utf-8 -*-
"""
Schemas Pydantic de los cobros de una factura.

Un cobro sale de un recibo vinculado (origen 'receipt') o del pago directo
de la propia factura (origen 'invoice').
"""

from datetime import date
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field


class CobroBase(BaseModel):
    unique_id: str
    id: int
    fecha: date
    importe: float
    forma_pago: Optional[str] = None
    comentario: str


class CobroRecibo(CobroBase):
    origen: Literal['receipt'] = 'receipt'


class CobroDirecto(CobroBase):
    origen: Literal['invoice'] = 'invoice'


Cobro = Annotated[Union[CobroRecibo, CobroDirecto], Field(discriminator='origen')]


class CobrosFactura(BaseModel):
    factura_id: int
    codigo_factura: Optional[str] = None
    importe_total: float
    total_cobrado: float
    pendiente: float
    sobrepagado: bool
    cobros: List[Cobro]
