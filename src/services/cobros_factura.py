# -*- coding: utf-8 -*-
"""
Cobros de una factura.

Los cobros se reconstruyen a partir de los recibos vinculados o, si la
factura no tiene recibos, de su propio pago directo. Las dos fuentes son
excluyentes: con recibos vinculados el estado de la factura no se consulta.
"""

import logging
from datetime import date
from typing import Iterable, List, Optional

from src.schemas.cobro import Cobro, CobroDirecto, CobroRecibo, CobrosFactura
from src.schemas.factura import FacturaRead
from src.schemas.recibo import ReciboRead
from src.store import DomainStore, RegistroNoEncontrado

FORMA_PAGO_POR_DEFECTO = 'Domiciliado'
COMENTARIO_COBRO_DIRECTO = 'Cobro directo factura'


def _comentario_recibo(recibo: ReciboRead) -> str:
    if recibo.codigo_recibo:
        return f"Recibo {recibo.codigo_recibo}"
    return f"Recibo del {recibo.fecha_recibo.strftime('%d/%m/%Y')}"


def listar_cobros(
    factura: FacturaRead,
    recibos: Iterable[ReciboRead],
    busqueda: Optional[str] = None,
) -> List[Cobro]:
    """
    Cobros de la factura ordenados por fecha descendente.

    busqueda filtra, sin distinguir mayúsculas, por comentario o forma de pago.
    """
    cobros: List[Cobro] = []

    if factura.recibos_vinculados:
        recibos_por_id = {r.id: r for r in recibos}
        for recibo_id in factura.recibos_vinculados:
            recibo = recibos_por_id.get(recibo_id)
            if recibo is None or recibo.estado != 'Cobrado':
                continue
            cobros.append(CobroRecibo(
                unique_id=f"receipt-{recibo.id}",
                id=recibo.id,
                fecha=recibo.fecha_pago or recibo.fecha_recibo,
                importe=recibo.importe,
                forma_pago=recibo.forma_pago,
                comentario=_comentario_recibo(recibo),
            ))
    elif factura.estado == 'Paid':
        cobros.append(CobroDirecto(
            unique_id=f"invoice-{factura.id}",
            id=factura.id,
            fecha=factura.fecha_pago or factura.fecha,
            importe=factura.importe_total,
            forma_pago=factura.forma_pago or FORMA_PAGO_POR_DEFECTO,
            comentario=COMENTARIO_COBRO_DIRECTO,
        ))

    if busqueda:
        termino = busqueda.lower()
        cobros = [
            c for c in cobros
            if termino in c.comentario.lower() or termino in (c.forma_pago or '').lower()
        ]

    # sort es estable: a igual fecha se mantiene el orden de vinculación
    cobros.sort(key=lambda c: c.fecha, reverse=True)
    return cobros


def resumir_cobros(factura: FacturaRead, cobros: List[Cobro]) -> CobrosFactura:
    """
    Totales de la factura. El pendiente no se limita a cero: si es negativo
    la factura está sobrepagada.
    """
    total_cobrado = sum((c.importe for c in cobros), 0.0)
    pendiente = factura.importe_total - total_cobrado
    return CobrosFactura(
        factura_id=factura.id,
        codigo_factura=factura.codigo_factura,
        importe_total=factura.importe_total,
        total_cobrado=total_cobrado,
        pendiente=pendiente,
        sobrepagado=pendiente < 0,
        cobros=cobros,
    )


def cobros_de_factura(factura: FacturaRead, store: DomainStore, busqueda: Optional[str] = None) -> CobrosFactura:
    recibos = store.list_recibos(ids=list(factura.recibos_vinculados)) if factura.recibos_vinculados else []
    return resumir_cobros(factura, listar_cobros(factura, recibos, busqueda))


def revertir_cobro(cobro: Cobro, store: DomainStore):
    """
    Deshace un cobro devolviendo a pendiente el registro del que sale.

    Solo se modifica ese registro; el resto de recibos y el estado de la
    factura (si el cobro es de un recibo) no cambian.
    """
    if cobro.origen == 'receipt':
        recibo = store.get_recibo(cobro.id)
        if recibo is None:
            raise RegistroNoEncontrado("Recibo", cobro.id)
        logging.info(f"Revirtiendo cobro del recibo {recibo.id} a Pendiente")
        return store.update_recibo(recibo.model_copy(update={
            "estado": 'Pendiente',
            "fecha_pago": None,
        }))

    factura = store.get_factura(cobro.id)
    if factura is None:
        raise RegistroNoEncontrado("Factura", cobro.id)
    logging.info(f"Revirtiendo cobro directo de la factura {factura.id} a Pending")
    return store.update_factura(factura.model_copy(update={
        "estado": 'Pending',
        "fecha_pago": None,
        "forma_pago": None,
    }))


def alternar_estado_recibo(recibo: ReciboRead, hoy: date) -> ReciboRead:
    """Cobrado pasa a Pendiente; cualquier otro estado pasa a Cobrado con fecha de hoy."""
    if recibo.estado == 'Cobrado':
        return recibo.model_copy(update={"estado": 'Pendiente', "fecha_pago": None})
    return recibo.model_copy(update={"estado": 'Cobrado', "fecha_pago": hoy})


def cobrar_factura(factura: FacturaRead, fecha: date, forma_pago: str = FORMA_PAGO_POR_DEFECTO) -> FacturaRead:
    """Registra el cobro directo de una factura."""
    if factura.estado == 'Paid':
        raise ValueError("Esta factura ya está cobrada.")
    if factura.recibos_vinculados:
        raise ValueError("La factura tiene recibos vinculados; se cobra a través de ellos.")
    return factura.model_copy(update={
        "estado": 'Paid',
        "fecha_pago": fecha,
        "forma_pago": forma_pago,
    })
