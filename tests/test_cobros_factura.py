from datetime import date

import pytest

from conftest import MemoryStore, make_factura, make_recibo
from src.services.cobros_factura import (
    alternar_estado_recibo,
    cobrar_factura,
    cobros_de_factura,
    listar_cobros,
    resumir_cobros,
    revertir_cobro,
)
from src.store import RegistroNoEncontrado


def test_solo_recibos_cobrados_generan_cobro():
    recibos = [
        make_recibo(1, importe=50, estado="Cobrado", fecha_pago=date(2025, 3, 10)),
        make_recibo(2, importe=70, estado="Pendiente"),
    ]
    factura = make_factura(importe_total=120, recibos=[1, 2])

    cobros = listar_cobros(factura, recibos)
    resumen = resumir_cobros(factura, cobros)

    assert len(cobros) == 1
    assert cobros[0].importe == 50
    assert cobros[0].origen == "receipt"
    assert cobros[0].unique_id == "receipt-1"
    assert resumen.total_cobrado == 50
    assert resumen.pendiente == 70
    assert not resumen.sobrepagado


def test_cobro_directo_de_factura_sin_recibos():
    factura = make_factura(importe_total=120, estado="Paid")

    cobros = listar_cobros(factura, [])

    assert len(cobros) == 1
    cobro = cobros[0]
    assert cobro.origen == "invoice"
    assert cobro.importe == 120
    assert cobro.comentario == "Cobro directo factura"
    assert cobro.forma_pago == "Domiciliado"
    assert cobro.fecha == factura.fecha


def test_cobro_directo_usa_fecha_y_forma_de_pago_propias():
    factura = make_factura(estado="Paid", fecha_pago=date(2025, 4, 2), forma_pago="Tarjeta")
    cobro = listar_cobros(factura, [])[0]
    assert cobro.fecha == date(2025, 4, 2)
    assert cobro.forma_pago == "Tarjeta"


def test_recibos_vinculados_tienen_prioridad_sobre_estado_factura():
    recibos = [make_recibo(1, estado="Pendiente")]
    factura = make_factura(estado="Paid", recibos=[1])

    assert listar_cobros(factura, recibos) == []


def test_factura_pendiente_sin_recibos_no_tiene_cobros():
    assert listar_cobros(make_factura(), []) == []


def test_fecha_y_comentario_de_recibo():
    recibos = [
        make_recibo(1, estado="Cobrado", fecha_pago=date(2025, 3, 2), codigo="2025/0001"),
        make_recibo(2, estado="Cobrado", fecha_pago=None, fecha_recibo=date(2025, 3, 5)),
    ]
    cobros = listar_cobros(make_factura(recibos=[1, 2]), recibos)

    # Orden descendente por fecha
    assert [c.id for c in cobros] == [2, 1]
    assert cobros[0].fecha == date(2025, 3, 5)
    assert cobros[0].comentario == "Recibo del 05/03/2025"
    assert cobros[1].comentario == "Recibo 2025/0001"


def test_busqueda_por_comentario_o_forma_de_pago():
    recibos = [
        make_recibo(1, estado="Cobrado", fecha_pago=date(2025, 3, 2), codigo="A-1", forma_pago="Tarjeta"),
        make_recibo(2, estado="Cobrado", fecha_pago=date(2025, 3, 3), codigo="B-2", forma_pago="Efectivo"),
    ]
    factura = make_factura(recibos=[1, 2])

    assert [c.id for c in listar_cobros(factura, recibos, "tarjeta")] == [1]
    assert [c.id for c in listar_cobros(factura, recibos, "b-2")] == [2]


def test_listar_cobros_es_idempotente():
    recibos = [
        make_recibo(1, estado="Cobrado", fecha_pago=date(2025, 3, 2)),
        make_recibo(2, estado="Cobrado", fecha_pago=date(2025, 3, 2)),
        make_recibo(3, estado="Cobrado", fecha_pago=date(2025, 3, 9)),
    ]
    factura = make_factura(recibos=[1, 2, 3])

    primera = [c.model_dump_json() for c in listar_cobros(factura, recibos)]
    segunda = [c.model_dump_json() for c in listar_cobros(factura, recibos)]

    assert primera == segunda
    assert [c.id for c in listar_cobros(factura, recibos)] == [3, 1, 2]


def test_pendiente_negativo_si_sobrepagada():
    recibos = [
        make_recibo(1, importe=100, estado="Cobrado", fecha_pago=date(2025, 3, 2)),
        make_recibo(2, importe=50, estado="Cobrado", fecha_pago=date(2025, 3, 3)),
    ]
    factura = make_factura(importe_total=120, recibos=[1, 2])

    resumen = resumir_cobros(factura, listar_cobros(factura, recibos))

    assert resumen.pendiente == -30
    assert resumen.sobrepagado


def test_revertir_cobro_de_recibo_solo_toca_ese_recibo():
    recibos = [
        make_recibo(1, estado="Cobrado", fecha_pago=date(2025, 3, 2)),
        make_recibo(2, estado="Cobrado", fecha_pago=date(2025, 3, 3)),
    ]
    factura = make_factura(estado="Paid", recibos=[1, 2])
    store = MemoryStore(recibos=recibos, facturas=[factura])

    cobro = next(c for c in listar_cobros(factura, recibos) if c.id == 1)
    revertir_cobro(cobro, store)

    assert store.recibos[1].estado == "Pendiente"
    assert store.recibos[1].fecha_pago is None
    assert store.recibos[2].estado == "Cobrado"
    assert store.facturas[1].estado == "Paid"
    assert store.escrituras == [("recibo", 1)]


def test_revertir_cobro_directo():
    factura = make_factura(estado="Paid", fecha_pago=date(2025, 3, 2), forma_pago="Tarjeta")
    store = MemoryStore(facturas=[factura])

    revertir_cobro(listar_cobros(factura, [])[0], store)

    revertida = store.facturas[1]
    assert revertida.estado == "Pending"
    assert revertida.fecha_pago is None
    assert revertida.forma_pago is None
    assert cobros_de_factura(revertida, store).cobros == []


def test_revertir_cobro_de_recibo_inexistente():
    recibos = [make_recibo(1, estado="Cobrado", fecha_pago=date(2025, 3, 2))]
    factura = make_factura(recibos=[1])
    cobro = listar_cobros(factura, recibos)[0]

    with pytest.raises(RegistroNoEncontrado):
        revertir_cobro(cobro, MemoryStore())


def test_alternar_estado_recibo():
    recibo = make_recibo(1, estado="Cobrado", fecha_pago=date(2025, 3, 2))

    pendiente = alternar_estado_recibo(recibo, date(2025, 3, 20))
    assert pendiente.estado == "Pendiente"
    assert pendiente.fecha_pago is None

    cobrado = alternar_estado_recibo(pendiente, date(2025, 3, 20))
    assert cobrado.estado == "Cobrado"
    assert cobrado.fecha_pago == date(2025, 3, 20)


def test_recibo_devuelto_no_genera_cobro():
    recibos = [
        make_recibo(1, importe=50, estado="Devuelto", fecha_pago=None),
        make_recibo(2, importe=70, estado="Cobrado", fecha_pago=date(2025, 3, 6)),
    ]
    factura = make_factura(importe_total=120, recibos=[1, 2])

    cobros = listar_cobros(factura, recibos)
    resumen = resumir_cobros(factura, cobros)

    assert [c.unique_id for c in cobros] == ["receipt-2"]
    assert resumen.total_cobrado == 70
    assert resumen.pendiente == 50


def test_alternar_recibo_devuelto_lo_cobra():
    recibo = make_recibo(1, estado="Devuelto")

    cobrado = alternar_estado_recibo(recibo, date(2025, 3, 20))

    assert cobrado.estado == "Cobrado"
    assert cobrado.fecha_pago == date(2025, 3, 20)
    assert recibo.estado == "Devuelto"


def test_cobrar_factura():
    cobrada = cobrar_factura(make_factura(), date(2025, 3, 20), "Transferencia")
    assert cobrada.estado == "Paid"
    assert cobrada.fecha_pago == date(2025, 3, 20)
    assert cobrada.forma_pago == "Transferencia"

    with pytest.raises(ValueError):
        cobrar_factura(cobrada, date(2025, 3, 21))

    with pytest.raises(ValueError):
        cobrar_factura(make_factura(recibos=[1]), date(2025, 3, 21))
