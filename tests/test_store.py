from datetime import date

import pytest

from conftest import make_recibo
from src.models.alumno import Alumno
from src.models.curso import Curso
from src.models.factura import Factura
from src.models.recibo import Recibo
from src.store import RegistroNoEncontrado, SqlAlchemyStore


@pytest.fixture
def datos(db_session):
    db_session.add(Alumno(id=1, nombre="Lucía"))
    db_session.add(Curso(id=1, nombre="Inglés B1"))
    db_session.add(Recibo(id=1, alumno_id=1, curso_id=1, importe=50, fecha_recibo=date(2025, 3, 1),
                          estado="Cobrado", fecha_pago=date(2025, 3, 4), forma_pago="Tarjeta"))
    db_session.add(Recibo(id=2, alumno_id=1, curso_id=1, importe=50, fecha_recibo=date(2025, 4, 1),
                          estado="Pendiente", forma_pago="Tarjeta"))
    db_session.add(Factura(id=1, codigo_factura="F-1", fecha=date(2025, 3, 5), importe_total=100,
                           recibos_vinculados=[2, 1]))
    db_session.commit()
    return SqlAlchemyStore(db_session)


def test_lecturas_devuelven_schemas(datos):
    factura = datos.get_factura(1)
    assert factura.recibos_vinculados == [2, 1]
    assert [r.id for r in datos.list_recibos(ids=[1])] == [1]
    assert datos.get_recibo(99) is None
    assert datos.get_factura(99) is None


def test_update_recibo_sustituye_el_registro(datos, db_session):
    recibo = datos.get_recibo(1)
    datos.update_recibo(recibo.model_copy(update={"estado": "Pendiente", "fecha_pago": None}))

    db_recibo = db_session.query(Recibo).filter(Recibo.id == 1).first()
    assert db_recibo.estado == "Pendiente"
    assert db_recibo.fecha_pago is None
    assert db_session.query(Recibo).filter(Recibo.id == 2).first().estado == "Pendiente"


def test_update_factura_guarda_lista_de_recibos(datos):
    factura = datos.get_factura(1)
    actualizada = datos.update_factura(factura.model_copy(update={"recibos_vinculados": [1]}))
    assert actualizada.recibos_vinculados == [1]
    assert datos.get_factura(1).recibos_vinculados == [1]


def test_update_de_registro_inexistente(datos):
    with pytest.raises(RegistroNoEncontrado):
        datos.update_recibo(make_recibo(99))
