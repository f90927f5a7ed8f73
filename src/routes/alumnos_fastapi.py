# -*- coding: utf-8 -*-
"""
Rutas FastAPI para Alumnos.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
import logging

from src.database import get_db
from src.models.alumno import Alumno
from src.schemas.alumno import AlumnoCreate, AlumnoRead

router = APIRouter(
    tags=["Alumnos"],
    responses={404: {"description": "No encontrado"}},
)

@router.post("", response_model=AlumnoRead, status_code=status.HTTP_201_CREATED)
def create_alumno(alumno: AlumnoCreate, db: Session = Depends(get_db)):
    db_alumno = Alumno(**alumno.model_dump())
    db.add(db_alumno)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logging.error(f"Error de integridad al guardar alumno: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Ya existe un alumno con ese email")
    db.refresh(db_alumno)
    return db_alumno

@router.get("", response_model=List[AlumnoRead])
def read_alumnos(busca: Optional[str] = None, db: Session = Depends(get_db)):
    query = db.query(Alumno)
    if busca:
        query = query.filter(Alumno.nombre.ilike(f"%{busca}%") | Alumno.apellidos.ilike(f"%{busca}%"))
    return query.order_by(Alumno.nombre).all()
