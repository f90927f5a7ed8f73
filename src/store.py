# -*- coding: utf-8 -*-
"""
Acceso a los datos de la academia para los servicios de horas y cobros.

Los servicios no consultan la base de datos directamente: reciben un
``DomainStore`` con lecturas por colección y comandos que guardan el
registro completo. Lo que cruza esta interfaz son schemas Pydantic de
lectura, nunca instancias del ORM.
"""

from typing import List, Optional, Protocol

from sqlalchemy.orm import Session

from src.models.aula import Aula
from src.models.clase_curso import ClaseCurso
from src.models.curso import Curso
from src.models.factura import Factura
from src.models.profesor import Profesor
from src.models.recibo import Recibo
from src.schemas.aula import AulaRead
from src.schemas.clase_curso import ClaseCursoRead
from src.schemas.curso import CursoRead
from src.schemas.factura import FacturaRead
from src.schemas.profesor import ProfesorRead
from src.schemas.recibo import ReciboRead


class RegistroNoEncontrado(LookupError):
    """El registro que se quiere actualizar no existe."""

    def __init__(self, entidad: str, registro_id):
        self.entidad = entidad
        self.registro_id = registro_id
        super().__init__(f"{entidad} {registro_id} no encontrado")


class DomainStore(Protocol):

    def get_profesor(self, profesor_id: int) -> Optional[ProfesorRead]:
        ...

    def list_clases(self, profesor_id: Optional[int] = None) -> List[ClaseCursoRead]:
        ...

    def list_cursos(self) -> List[CursoRead]:
        ...

    def list_aulas(self) -> List[AulaRead]:
        ...

    def get_recibo(self, recibo_id: int) -> Optional[ReciboRead]:
        ...

    def list_recibos(self, ids: Optional[List[int]] = None) -> List[ReciboRead]:
        ...

    def get_factura(self, factura_id: int) -> Optional[FacturaRead]:
        ...

    def update_recibo(self, recibo: ReciboRead) -> ReciboRead:
        """Sustituye el recibo guardado por ``recibo``."""
        ...

    def update_factura(self, factura: FacturaRead) -> FacturaRead:
        """Sustituye la factura guardada por ``factura``."""
        ...

    def update_clase(self, clase: ClaseCursoRead) -> ClaseCursoRead:
        """Sustituye la clase guardada por ``clase``."""
        ...


class SqlAlchemyStore:
    """Implementación de DomainStore sobre una sesión SQLAlchemy."""

    def __init__(self, db: Session):
        self.db = db

    # --- Lecturas ---

    def get_profesor(self, profesor_id: int) -> Optional[ProfesorRead]:
        db_profesor = self.db.query(Profesor).filter(Profesor.id == profesor_id).first()
        return ProfesorRead.model_validate(db_profesor) if db_profesor else None

    def list_clases(self, profesor_id: Optional[int] = None) -> List[ClaseCursoRead]:
        query = self.db.query(ClaseCurso)
        if profesor_id is not None:
            query = query.filter(ClaseCurso.profesor_id == profesor_id)
        clases = query.order_by(ClaseCurso.fecha, ClaseCurso.hora_inicio).all()
        return [ClaseCursoRead.model_validate(c) for c in clases]

    def list_cursos(self) -> List[CursoRead]:
        return [CursoRead.model_validate(c) for c in self.db.query(Curso).order_by(Curso.id).all()]

    def list_aulas(self) -> List[AulaRead]:
        return [AulaRead.model_validate(a) for a in self.db.query(Aula).order_by(Aula.id).all()]

    def get_recibo(self, recibo_id: int) -> Optional[ReciboRead]:
        db_recibo = self.db.query(Recibo).filter(Recibo.id == recibo_id).first()
        return ReciboRead.model_validate(db_recibo) if db_recibo else None

    def list_recibos(self, ids: Optional[List[int]] = None) -> List[ReciboRead]:
        query = self.db.query(Recibo)
        if ids is not None:
            query = query.filter(Recibo.id.in_(ids))
        return [ReciboRead.model_validate(r) for r in query.order_by(Recibo.id).all()]

    def get_factura(self, factura_id: int) -> Optional[FacturaRead]:
        db_factura = self.db.query(Factura).filter(Factura.id == factura_id).first()
        return FacturaRead.model_validate(db_factura) if db_factura else None

    # --- Comandos ---

    def _replace(self, model, entidad: str, registro):
        db_obj = self.db.query(model).filter(model.id == registro.id).first()
        if db_obj is None:
            raise RegistroNoEncontrado(entidad, registro.id)
        for key, value in registro.model_dump(exclude={"id"}).items():
            setattr(db_obj, key, value)
        self.db.commit()
        self.db.refresh(db_obj)
        return db_obj

    def update_recibo(self, recibo: ReciboRead) -> ReciboRead:
        return ReciboRead.model_validate(self._replace(Recibo, "Recibo", recibo))

    def update_factura(self, factura: FacturaRead) -> FacturaRead:
        return FacturaRead.model_validate(self._replace(Factura, "Factura", factura))

    def update_clase(self, clase: ClaseCursoRead) -> ClaseCursoRead:
        return ClaseCursoRead.model_validate(self._replace(ClaseCurso, "Clase", clase))
