# -*- coding: utf-8 -*-
"""
Schemas Pydantic para la entidad Alumno.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional

class AlumnoBase(BaseModel):
    nombre: str = Field(..., max_length=100)
    apellidos: Optional[str] = Field(None, max_length=150)
    email: Optional[str] = Field(None, max_length=100)

    @field_validator('email', mode='before')
    @classmethod
    def empty_str_to_none(cls, v):
        """Convierte cadenas vacías en None antes de validar."""
        if isinstance(v, str) and v.strip() == '':
            return None
        return v

class AlumnoCreate(AlumnoBase):
    pass

class AlumnoRead(AlumnoBase):
    id: int

    class Config:
        from_attributes = True
