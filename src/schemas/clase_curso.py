# -*- coding: utf-8 -*-
"""
Schemas Pydantic para ClaseCurso (sesiones programadas de un curso).
"""

from datetime import date
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

EstadoClase = Literal['Pendiente', 'Hecha', 'Anulada']
ModalidadClase = Literal['Presencial', 'Online']

# "HH:MM" en 24 horas
PATRON_HORA = r"^([01]\d|2[0-3]):[0-5]\d$"


class ClaseCursoBase(BaseModel):
    curso_id: int
    fecha: date
    hora_inicio: str = Field(..., pattern=PATRON_HORA)
    hora_fin: str = Field(..., pattern=PATRON_HORA)
    profesor_id: int
    es_sustitucion: bool = False
    estado: EstadoClase = 'Pendiente'
    aula_id: Optional[int] = None
    modalidad: Optional[ModalidadClase] = None
    comentario_interno: Optional[str] = None


class ClaseCursoCreate(ClaseCursoBase):

    @model_validator(mode='after')
    def comprobar_horario(self):
        # Con el formato HH:MM la comparación de cadenas equivale a la horaria
        if self.hora_inicio >= self.hora_fin:
            raise ValueError("La hora de inicio debe ser anterior a la hora de fin")
        return self


class ClaseCursoUpdate(BaseModel):
    """Cambios de una clase ya programada: estado, profesor, sustitución, aula o modalidad."""
    estado: Optional[EstadoClase] = None
    profesor_id: Optional[int] = None
    es_sustitucion: Optional[bool] = None
    aula_id: Optional[int] = None
    modalidad: Optional[ModalidadClase] = None
    comentario_interno: Optional[str] = None

    @field_validator('estado', 'profesor_id', 'es_sustitucion')
    @classmethod
    def no_nulo(cls, v, info):
        # Se pueden omitir, pero no vaciar: la clase siempre los tiene
        if v is None:
            raise ValueError(f"{info.field_name} no puede ser nulo")
        return v


class ClaseCursoRead(ClaseCursoBase):
    id: str

    class Config:
        from_attributes = True
