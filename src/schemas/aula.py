# -*- coding: utf-8 -*-
"""
Schemas Pydantic para la entidad Aula.
"""

from pydantic import BaseModel, Field
from typing import Optional

class AulaBase(BaseModel):
    nombre: str = Field(..., max_length=100)
    ubicacion: str = Field(..., max_length=150)
    capacidad: Optional[int] = Field(None, ge=0)

class AulaCreate(AulaBase):
    pass

class AulaRead(AulaBase):
    id: int

    class Config:
        from_attributes = True
