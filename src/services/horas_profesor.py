# -*- coding: utf-8 -*-
"""
Resumen mensual de horas impartidas por un profesor.

Solo cuentan las clases marcadas como "Hecha" dentro del mes. Las horas de
sustitución se contabilizan aparte y no forman parte de total_horas.
"""

import calendar
import logging
from datetime import date
from typing import Dict, Iterable, Tuple

from dateutil.relativedelta import relativedelta

from src.schemas.aula import AulaRead
from src.schemas.clase_curso import ClaseCursoRead
from src.schemas.curso import CursoRead
from src.schemas.horas import HorasCurso, ResumenHoras

UBICACION_DESCONOCIDA = 'N/A'


def _a_minutos(hhmm: str) -> int:
    horas, minutos = hhmm.strip().split(":")
    return int(horas) * 60 + int(minutos)


def calcular_duracion(hora_inicio: str, hora_fin: str) -> float:
    """
    Duración en horas entre dos horas "HH:MM" (1.5 para 1h 30m).

    No se valida que el fin sea posterior al inicio: un horario mal
    introducido devuelve una duración negativa.
    """
    return (_a_minutos(hora_fin) - _a_minutos(hora_inicio)) / 60


def limites_mes(fecha_referencia: date) -> Tuple[date, date]:
    """Primer y último día (ambos incluidos) del mes de fecha_referencia."""
    ultimo = calendar.monthrange(fecha_referencia.year, fecha_referencia.month)[1]
    return (
        date(fecha_referencia.year, fecha_referencia.month, 1),
        date(fecha_referencia.year, fecha_referencia.month, ultimo),
    )


def desplazar_mes(fecha_referencia: date, meses: int) -> date:
    """Mes anterior (meses=-1) o siguiente (meses=1) a fecha_referencia."""
    return fecha_referencia + relativedelta(months=meses)


def resumen_horas_mes(
    profesor_id: int,
    fecha_referencia: date,
    clases: Iterable[ClaseCursoRead],
    cursos: Iterable[CursoRead],
    aulas: Iterable[AulaRead],
) -> ResumenHoras:
    primer_dia, ultimo_dia = limites_mes(fecha_referencia)
    resumen = ResumenHoras(
        profesor_id=profesor_id,
        anio=fecha_referencia.year,
        mes=fecha_referencia.month,
    )

    cursos_por_id = {c.id: c for c in cursos}
    aulas_por_id = {a.id: a for a in aulas}

    # 1. Clases del profesor, hechas y dentro del mes
    relevantes = [
        c for c in clases
        if c.profesor_id == profesor_id
        and c.estado == 'Hecha'
        and primer_dia <= c.fecha <= ultimo_dia
    ]

    # 2. Agrupa por curso en el orden en que aparecen
    por_curso: Dict[int, HorasCurso] = {}
    for clase in relevantes:
        curso = cursos_por_id.get(clase.curso_id)
        if curso is None:
            logging.warning(f"Clase {clase.id} sin curso {clase.curso_id}. Se descarta del resumen.")
            resumen.clases_descartadas.append(clase.id)
            continue

        if curso.id not in por_curso:
            aula = aulas_por_id.get(clase.aula_id or curso.aula_id)
            if aula is None and curso.id not in resumen.cursos_sin_aula:
                resumen.cursos_sin_aula.append(curso.id)
            por_curso[curso.id] = HorasCurso(
                curso_id=curso.id,
                nombre_curso=curso.nombre,
                ubicacion=aula.ubicacion if aula and aula.ubicacion else UBICACION_DESCONOCIDA,
            )

        duracion = calcular_duracion(clase.hora_inicio, clase.hora_fin)
        if clase.es_sustitucion:
            por_curso[curso.id].horas_sustitucion += duracion
        else:
            por_curso[curso.id].horas += duracion

    # 3. Totales generales
    resumen.clases_por_curso = list(por_curso.values())
    resumen.total_horas = sum((item.horas for item in resumen.clases_por_curso), 0.0)
    resumen.total_horas_sustitucion = sum((item.horas_sustitucion for item in resumen.clases_por_curso), 0.0)
    return resumen
