# -*- coding: utf-8 -*-
"""
Schemas Pydantic del resumen mensual de horas de un profesor.
"""

from pydantic import BaseModel, Field, computed_field
from typing import List


class HorasCurso(BaseModel):
    curso_id: int
    nombre_curso: str
    horas: float = 0.0
    horas_sustitucion: float = 0.0
    ubicacion: str = 'N/A'


class ResumenHoras(BaseModel):
    profesor_id: int
    anio: int
    mes: int
    total_horas: float = 0.0
    total_horas_sustitucion: float = 0.0
    clases_por_curso: List[HorasCurso] = Field(default_factory=list)

    # Referencias que no se pudieron resolver
    clases_descartadas: List[str] = Field(default_factory=list)
    cursos_sin_aula: List[int] = Field(default_factory=list)

    @computed_field
    @property
    def datos_consistentes(self) -> bool:
        return not self.clases_descartadas and not self.cursos_sin_aula
