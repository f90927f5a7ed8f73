# -*- coding: utf-8 -*-
"""
Schemas Pydantic para la entidad Profesor.
"""

from pydantic import BaseModel, Field
from typing import Optional

class ProfesorBase(BaseModel):
    nombre: str = Field(..., max_length=100)
    apellidos: Optional[str] = Field(None, max_length=150)
    email: Optional[str] = Field(None, max_length=100)
    activo: bool = True
    horas_contrato: Optional[float] = Field(None, ge=0)

class ProfesorCreate(ProfesorBase):
    pass

class ProfesorRead(ProfesorBase):
    id: int

    class Config:
        from_attributes = True
