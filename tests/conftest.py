import os
from datetime import date

import pytest

# Antes de importar la app: nada de ficheros de base de datos en los tests
os.environ["DATABASE_URL"] = "sqlite://"

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from main import app
from src.database import Base, get_db
from src.schemas.aula import AulaRead
from src.schemas.clase_curso import ClaseCursoRead
from src.schemas.curso import CursoRead
from src.schemas.factura import FacturaRead
from src.schemas.recibo import ReciboRead
from src.store import RegistroNoEncontrado


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


class MemoryStore:
    """DomainStore en memoria para probar los servicios sin base de datos."""

    def __init__(self, recibos=(), facturas=()):
        self.recibos = {r.id: r for r in recibos}
        self.facturas = {f.id: f for f in facturas}
        self.escrituras = []

    def get_recibo(self, recibo_id):
        return self.recibos.get(recibo_id)

    def list_recibos(self, ids=None):
        return [r for r in self.recibos.values() if ids is None or r.id in ids]

    def get_factura(self, factura_id):
        return self.facturas.get(factura_id)

    def update_recibo(self, recibo):
        if recibo.id not in self.recibos:
            raise RegistroNoEncontrado("Recibo", recibo.id)
        self.recibos[recibo.id] = recibo
        self.escrituras.append(("recibo", recibo.id))
        return recibo

    def update_factura(self, factura):
        if factura.id not in self.facturas:
            raise RegistroNoEncontrado("Factura", factura.id)
        self.facturas[factura.id] = factura
        self.escrituras.append(("factura", factura.id))
        return factura


def make_clase(id, curso_id=1, fecha=date(2025, 3, 5), inicio="09:00", fin="10:00",
               profesor_id=7, sustitucion=False, estado="Hecha", aula_id=None):
    return ClaseCursoRead(
        id=id, curso_id=curso_id, fecha=fecha, hora_inicio=inicio, hora_fin=fin,
        profesor_id=profesor_id, es_sustitucion=sustitucion, estado=estado, aula_id=aula_id,
    )


def make_curso(id, nombre, aula_id=None, profesor_id=7):
    return CursoRead(id=id, nombre=nombre, aula_id=aula_id, profesor_id=profesor_id)


def make_aula(id, ubicacion):
    return AulaRead(id=id, nombre=f"Aula {id}", ubicacion=ubicacion)


def make_recibo(id, importe=50.0, estado="Pendiente", fecha_pago=None, codigo=None,
                fecha_recibo=date(2025, 3, 1), forma_pago="Efectivo", factura_id=None):
    return ReciboRead(
        id=id, codigo_recibo=codigo, alumno_id=1, curso_id=1, importe=importe,
        fecha_recibo=fecha_recibo, estado=estado, fecha_pago=fecha_pago,
        forma_pago=forma_pago, factura_id=factura_id,
    )


def make_factura(id=1, importe_total=120.0, estado="Pending", recibos=(), fecha=date(2025, 3, 1),
                 fecha_pago=None, forma_pago=None):
    return FacturaRead(
        id=id, codigo_factura=f"F2025/{id:04d}", fecha=fecha, importe_total=importe_total,
        estado=estado, fecha_pago=fecha_pago, forma_pago=forma_pago,
        recibos_vinculados=list(recibos),
    )
