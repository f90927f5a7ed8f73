# -*- coding: utf-8 -*-
"""
Rutas FastAPI para las clases (sesiones) de los cursos.
"""
from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from pydantic import ValidationError
import logging

from src.database import get_db
from src.models.aula import Aula
from src.models.clase_curso import ClaseCurso
from src.models.curso import Curso
from src.models.profesor import Profesor
from src.schemas.clase_curso import ClaseCursoCreate, ClaseCursoRead, ClaseCursoUpdate
from src.store import SqlAlchemyStore

router = APIRouter(
    tags=["Clases"],
    responses={404: {"description": "No encontrado"}},
)

def _comprobar_referencias(db: Session, profesor_id: Optional[int] = None, aula_id: Optional[int] = None):
    if profesor_id is not None and not db.query(Profesor).filter(Profesor.id == profesor_id).first():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Profesor con ID {profesor_id} no encontrado")
    if aula_id is not None and not db.query(Aula).filter(Aula.id == aula_id).first():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Aula con ID {aula_id} no encontrada")

@router.post("", response_model=ClaseCursoRead, status_code=status.HTTP_201_CREATED)
def create_clase(clase: ClaseCursoCreate, db: Session = Depends(get_db)):
    """
    Añade una clase manual a un curso.
    """
    if not db.query(Curso).filter(Curso.id == clase.curso_id).first():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Curso con ID {clase.curso_id} no encontrado")
    _comprobar_referencias(db, clase.profesor_id, clase.aula_id)

    db_clase = ClaseCurso(**clase.model_dump())
    db.add(db_clase)
    db.commit()
    db.refresh(db_clase)
    return db_clase

@router.get("", response_model=List[ClaseCursoRead])
def read_clases(
    curso_id: Optional[int] = None,
    profesor_id: Optional[int] = None,
    estado: Optional[str] = None,
    desde: Optional[date] = None,
    hasta: Optional[date] = None,
    db: Session = Depends(get_db)
):
    query = db.query(ClaseCurso)
    if curso_id:
        query = query.filter(ClaseCurso.curso_id == curso_id)
    if profesor_id:
        query = query.filter(ClaseCurso.profesor_id == profesor_id)
    if estado:
        query = query.filter(ClaseCurso.estado == estado)
    if desde:
        query = query.filter(ClaseCurso.fecha >= desde)
    if hasta:
        query = query.filter(ClaseCurso.fecha <= hasta)
    return query.order_by(ClaseCurso.fecha, ClaseCurso.hora_inicio).all()

@router.put("/{clase_id}", response_model=ClaseCursoRead)
def update_clase(clase_id: str, clase_update: ClaseCursoUpdate, db: Session = Depends(get_db)):
    """
    Cambia el estado, el profesor, la sustitución, el aula o la modalidad de una clase.
    """
    db_clase = db.query(ClaseCurso).filter(ClaseCurso.id == clase_id).first()
    if db_clase is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Clase no encontrada")

    update_data = clase_update.model_dump(exclude_unset=True)
    _comprobar_referencias(db, update_data.get("profesor_id"), update_data.get("aula_id"))

    actual = ClaseCursoRead.model_validate(db_clase)
    if "estado" in update_data and update_data["estado"] != actual.estado:
        logging.info(f"Clase {clase_id}: {actual.estado} -> {update_data['estado']}")

    # Se valida el registro completo antes de guardarlo
    try:
        nueva = ClaseCursoRead.model_validate({**actual.model_dump(), **update_data})
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=e.errors(include_url=False, include_context=False, include_input=False))
    return SqlAlchemyStore(db).update_clase(nueva)
