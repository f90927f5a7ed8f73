# -*- coding: utf-8 -*-
"""
Rutas FastAPI para Cursos.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from src.database import get_db
from src.models.aula import Aula
from src.models.curso import Curso
from src.models.profesor import Profesor
from src.schemas.curso import CursoCreate, CursoRead

router = APIRouter(
    tags=["Cursos"],
    responses={404: {"description": "No encontrado"}},
)

@router.post("", response_model=CursoRead, status_code=status.HTTP_201_CREATED)
def create_curso(curso: CursoCreate, db: Session = Depends(get_db)):
    """
    Crea un curso. El profesor y el aula por defecto deben existir.
    """
    if curso.profesor_id:
        if not db.query(Profesor).filter(Profesor.id == curso.profesor_id).first():
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Profesor con ID {curso.profesor_id} no encontrado")
    if curso.aula_id:
        if not db.query(Aula).filter(Aula.id == curso.aula_id).first():
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Aula con ID {curso.aula_id} no encontrada")

    db_curso = Curso(**curso.model_dump())
    db.add(db_curso)
    db.commit()
    db.refresh(db_curso)
    return db_curso

@router.get("", response_model=List[CursoRead])
def read_cursos(
    activo: Optional[bool] = None,
    profesor_id: Optional[int] = None,
    nivel: Optional[str] = None,
    db: Session = Depends(get_db)
):
    query = db.query(Curso)
    if activo is not None:
        query = query.filter(Curso.activo == activo)
    if profesor_id:
        query = query.filter(Curso.profesor_id == profesor_id)
    if nivel:
        query = query.filter(Curso.nivel.ilike(f"%{nivel}%"))
    return query.order_by(Curso.nombre).all()

@router.get("/{curso_id}", response_model=CursoRead)
def read_curso(curso_id: int, db: Session = Depends(get_db)):
    db_curso = db.query(Curso).filter(Curso.id == curso_id).first()
    if db_curso is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Curso no encontrado")
    return db_curso
