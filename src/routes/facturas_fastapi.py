# -*- coding: utf-8 -*-
"""
Rutas FastAPI para Facturas y sus cobros.
"""
from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
import logging

from src.database import get_db
from src.models.factura import Factura
from src.models.recibo import Recibo
from src.schemas.cobro import CobrosFactura
from src.schemas.factura import FacturaCobro, FacturaCreate, FacturaRead
from src.services.cobros_factura import cobrar_factura, cobros_de_factura, revertir_cobro
from src.store import SqlAlchemyStore

router = APIRouter(
    tags=["Facturas"],
    responses={404: {"description": "No encontrado"}},
)

def _get_factura_or_404(store: SqlAlchemyStore, factura_id: int) -> FacturaRead:
    factura = store.get_factura(factura_id)
    if factura is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Factura no encontrada")
    return factura

@router.post("", response_model=FacturaRead, status_code=status.HTTP_201_CREATED)
def create_factura(factura: FacturaCreate, db: Session = Depends(get_db)):
    """
    Crea una factura. Los recibos vinculados quedan apuntando a ella.
    """
    # Un recibo solo puede aparecer una vez; se conserva el orden de vinculación
    factura.recibos_vinculados = list(dict.fromkeys(factura.recibos_vinculados))

    recibos = []
    if factura.recibos_vinculados:
        recibos = db.query(Recibo).filter(Recibo.id.in_(factura.recibos_vinculados)).all()
        encontrados = {r.id for r in recibos}
        faltan = [rid for rid in factura.recibos_vinculados if rid not in encontrados]
        if faltan:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Recibos no encontrados: {faltan}")
        ya_facturados = sorted(r.id for r in recibos if r.factura_id is not None)
        if ya_facturados:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Recibos ya vinculados a otra factura: {ya_facturados}")

    db_factura = Factura(**factura.model_dump())
    db.add(db_factura)
    try:
        db.flush()
        for recibo in recibos:
            recibo.factura_id = db_factura.id
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logging.error(f"Error de integridad al guardar factura: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Ya existe una factura con ese código")
    db.refresh(db_factura)
    return db_factura

@router.get("", response_model=List[FacturaRead])
def read_facturas(estado: Optional[str] = None, db: Session = Depends(get_db)):
    query = db.query(Factura)
    if estado:
        query = query.filter(Factura.estado == estado)
    return query.order_by(Factura.fecha.desc(), Factura.id.desc()).all()

@router.get("/{factura_id}", response_model=FacturaRead)
def read_factura(factura_id: int, db: Session = Depends(get_db)):
    return _get_factura_or_404(SqlAlchemyStore(db), factura_id)

@router.get("/{factura_id}/cobros", response_model=CobrosFactura)
def read_cobros_factura(factura_id: int, busqueda: Optional[str] = None, db: Session = Depends(get_db)):
    """
    Cobros registrados de la factura con el total cobrado y el importe pendiente.
    """
    store = SqlAlchemyStore(db)
    factura = _get_factura_or_404(store, factura_id)
    return cobros_de_factura(factura, store, busqueda)

@router.delete("/{factura_id}/cobros/{unique_id}", response_model=CobrosFactura)
def delete_cobro_factura(factura_id: int, unique_id: str, db: Session = Depends(get_db)):
    """
    Borra un cobro: el recibo o la factura de origen vuelve a estar pendiente.
    """
    store = SqlAlchemyStore(db)
    factura = _get_factura_or_404(store, factura_id)

    cobro = next((c for c in cobros_de_factura(factura, store).cobros if c.unique_id == unique_id), None)
    if cobro is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="El cobro no figura entre los de esta factura")

    revertir_cobro(cobro, store)
    return cobros_de_factura(_get_factura_or_404(store, factura_id), store)

@router.post("/{factura_id}/cobrar", response_model=FacturaRead)
def cobrar(factura_id: int, datos: FacturaCobro, db: Session = Depends(get_db)):
    """
    Cobro directo de una factura sin recibos vinculados.
    """
    store = SqlAlchemyStore(db)
    factura = _get_factura_or_404(store, factura_id)
    try:
        cobrada = cobrar_factura(factura, datos.fecha_pago or date.today(), datos.forma_pago)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return store.update_factura(cobrada)
