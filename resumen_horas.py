# -*- coding: utf-8 -*-
"""
Imprime el resumen mensual de horas de un profesor leyendo la base de datos.

Uso:
    python resumen_horas.py --profesor 3
    python resumen_horas.py --profesor 3 --month 2 --year 2025
"""

import logging
import argparse
from datetime import date
from sqlalchemy.orm import sessionmaker

from src.database import crear_engine, leer_database_url
from src.models import profesor, aula, curso, clase_curso, alumno, recibo, factura
from src.services.horas_profesor import resumen_horas_mes
from src.store import SqlAlchemyStore

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Resumen mensual de horas de un profesor')
    parser.add_argument('--profesor', type=int, required=True, help='ID del profesor')
    parser.add_argument('--month', type=int, help='Mes de referencia (1-12)')
    parser.add_argument('--year', type=int, help='Año de referencia (ej: 2025)')
    return parser.parse_args(argv)


def formatear_resumen(resumen, nombre_profesor: str) -> str:
    lineas = [
        f"{nombre_profesor} - {resumen.mes:02d}/{resumen.anio}",
        f"Total horas: {resumen.total_horas:.2f}",
        f"Total horas sustitución: {resumen.total_horas_sustitucion:.2f}",
    ]
    if not resumen.clases_por_curso:
        lineas.append("No hay horas registradas para este mes.")
    for item in resumen.clases_por_curso:
        sustitucion = f"Sí ({item.horas_sustitucion:.2f}h)" if item.horas_sustitucion > 0 else "No"
        lineas.append(f"- {item.nombre_curso}: {item.horas:.2f}h | Sustitución: {sustitucion} | {item.ubicacion}")
    return "\n".join(lineas)


def main(argv=None):
    args = parse_args(argv)

    hoy = date.today()
    try:
        referencia = date(args.year or hoy.year, args.month or hoy.month, 1)
    except ValueError:
        logging.error("Fecha inválida en los parámetros.")
        return 1

    engine = crear_engine(leer_database_url())
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = SessionLocal()
    try:
        store = SqlAlchemyStore(db)
        db_profesor = store.get_profesor(args.profesor)
        if db_profesor is None:
            logging.error(f"Profesor {args.profesor} no encontrado.")
            return 1

        resumen = resumen_horas_mes(
            db_profesor.id,
            referencia,
            store.list_clases(profesor_id=db_profesor.id),
            store.list_cursos(),
            store.list_aulas(),
        )
        if not resumen.datos_consistentes:
            logging.warning(
                f"Datos incompletos: clases sin curso {resumen.clases_descartadas}, "
                f"cursos sin aula {resumen.cursos_sin_aula}"
            )
        print(formatear_resumen(resumen, f"{db_profesor.nombre} {db_profesor.apellidos or ''}".strip()))
    finally:
        db.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
