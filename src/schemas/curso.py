# -*- coding: utf-8 -*-
"""
Schemas Pydantic para la entidad Curso.
"""

from pydantic import BaseModel, Field
from typing import Literal, Optional

class CursoBase(BaseModel):
    nombre: str = Field(..., max_length=100)
    nivel: Optional[str] = Field(None, max_length=50)
    modalidad: Literal['Presencial', 'Online', 'Híbrido'] = 'Presencial'
    activo: bool = True
    profesor_id: Optional[int] = None
    aula_id: Optional[int] = None

class CursoCreate(CursoBase):
    pass

class CursoRead(CursoBase):
    id: int

    class Config:
        from_attributes = True
