# -*- coding: utf-8 -*-
"""
Rutas FastAPI para Aulas.
"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from src.database import get_db
from src.models.aula import Aula
from src.schemas.aula import AulaCreate, AulaRead

router = APIRouter(
    tags=["Aulas"],
    responses={404: {"description": "No encontrado"}},
)

@router.post("", response_model=AulaRead, status_code=status.HTTP_201_CREATED)
def create_aula(aula: AulaCreate, db: Session = Depends(get_db)):
    db_aula = Aula(**aula.model_dump())
    db.add(db_aula)
    db.commit()
    db.refresh(db_aula)
    return db_aula

@router.get("", response_model=List[AulaRead])
def read_aulas(db: Session = Depends(get_db)):
    return db.query(Aula).order_by(Aula.ubicacion, Aula.nombre).all()
