# -*- coding: utf-8 -*-
"""
Rutas FastAPI para Profesores y su resumen mensual de horas.
"""
from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
import logging

from src.database import get_db
from src.models.profesor import Profesor
from src.schemas.profesor import ProfesorCreate, ProfesorRead
from src.schemas.horas import ResumenHoras
from src.services.horas_profesor import desplazar_mes, resumen_horas_mes
from src.store import SqlAlchemyStore

router = APIRouter(
    tags=["Profesores"],
    responses={404: {"description": "No encontrado"}},
)

@router.post("", response_model=ProfesorRead, status_code=status.HTTP_201_CREATED)
def create_profesor(profesor: ProfesorCreate, db: Session = Depends(get_db)):
    db_profesor = Profesor(**profesor.model_dump())
    db.add(db_profesor)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logging.error(f"Error de integridad al guardar profesor: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Ya existe un profesor con ese email")
    db.refresh(db_profesor)
    return db_profesor

@router.get("", response_model=List[ProfesorRead])
def read_profesores(activo: Optional[bool] = None, db: Session = Depends(get_db)):
    query = db.query(Profesor)
    if activo is not None:
        query = query.filter(Profesor.activo == activo)
    return query.order_by(Profesor.nombre, Profesor.apellidos).all()

@router.get("/{profesor_id}", response_model=ProfesorRead)
def read_profesor(profesor_id: int, db: Session = Depends(get_db)):
    db_profesor = db.query(Profesor).filter(Profesor.id == profesor_id).first()
    if db_profesor is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profesor no encontrado")
    return db_profesor

@router.get("/{profesor_id}/horas", response_model=ResumenHoras)
def read_horas_profesor(
    profesor_id: int,
    fecha: Optional[date] = None,
    desplazamiento: int = 0,
    db: Session = Depends(get_db)
):
    """
    Resumen de horas del mes que contiene `fecha` (hoy si no se indica).
    `desplazamiento` navega a meses anteriores (-1) o siguientes (1).
    """
    store = SqlAlchemyStore(db)
    if store.get_profesor(profesor_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profesor no encontrado")

    referencia = fecha or date.today()
    if desplazamiento:
        referencia = desplazar_mes(referencia, desplazamiento)

    return resumen_horas_mes(
        profesor_id,
        referencia,
        store.list_clases(profesor_id=profesor_id),
        store.list_cursos(),
        store.list_aulas(),
    )
