# -*- coding: utf-8 -*-
"""
Rutas FastAPI para Recibos.
"""
from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from src.database import get_db
from src.models.alumno import Alumno
from src.models.curso import Curso
from src.models.recibo import Recibo
from src.schemas.recibo import ReciboCreate, ReciboPaginated, ReciboRead
from src.services.cobros_factura import alternar_estado_recibo
from src.store import SqlAlchemyStore

router = APIRouter(
    tags=["Recibos"],
    responses={404: {"description": "No encontrado"}},
)

@router.post("", response_model=ReciboRead, status_code=status.HTTP_201_CREATED)
def create_recibo(recibo: ReciboCreate, db: Session = Depends(get_db)):
    if not db.query(Alumno).filter(Alumno.id == recibo.alumno_id).first():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Alumno no encontrado")
    if not db.query(Curso).filter(Curso.id == recibo.curso_id).first():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Curso no encontrado")

    db_recibo = Recibo(**recibo.model_dump())
    db.add(db_recibo)
    db.commit()
    db.refresh(db_recibo)
    return db_recibo

@router.get("", response_model=ReciboPaginated)
def read_recibos(
    skip: int = 0,
    limit: int = 50,
    estado: Optional[str] = None,
    alumno_id: Optional[int] = None,
    curso_id: Optional[int] = None,
    db: Session = Depends(get_db)
):
    """
    Lista recibos filtrados por estado, alumno o curso, del más reciente al más antiguo.
    """
    query = db.query(Recibo)
    if estado:
        query = query.filter(Recibo.estado == estado)
    if alumno_id:
        query = query.filter(Recibo.alumno_id == alumno_id)
    if curso_id:
        query = query.filter(Recibo.curso_id == curso_id)

    # Cuenta el total ANTES de aplicar limit/offset
    total = query.count()
    recibos = query.order_by(Recibo.fecha_recibo.desc(), Recibo.id.desc()).offset(skip).limit(limit).all()
    return {"total": total, "recibos": recibos}

@router.get("/{recibo_id}", response_model=ReciboRead)
def read_recibo(recibo_id: int, db: Session = Depends(get_db)):
    db_recibo = db.query(Recibo).filter(Recibo.id == recibo_id).first()
    if db_recibo is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Recibo no encontrado")
    return db_recibo

@router.post("/{recibo_id}/alternar-estado", response_model=ReciboRead)
def alternar_estado(recibo_id: int, db: Session = Depends(get_db)):
    """
    Marca el recibo como Cobrado (con fecha de hoy) o lo devuelve a Pendiente.
    """
    store = SqlAlchemyStore(db)
    recibo = store.get_recibo(recibo_id)
    if recibo is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Recibo no encontrado")
    return store.update_recibo(alternar_estado_recibo(recibo, date.today()))
