from typing import List, Optional
import logging

from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..models.client import Client as DBClient
from ..schemas.client import ClientCreate, ClientUpdate
from ..schemas.common import OperationResult
from ..utils.formatting import only_digits

logger = logging.getLogger(__name__)


class ClientService:
    """Capa de datos de clientes: lectura y escritura sobre la tabla clients."""

    @staticmethod
    def list_clients(db: Session, search: Optional[str] = None) -> List[DBClient]:
        """
        Lista los clientes ordenados por nombre.
        La búsqueda compara nombre y email sin distinguir mayúsculas, y los dígitos del CPF/CNPJ.
        """
        query = db.query(DBClient)

        if search:
            pattern = f"%{search.strip()}%"
            filtros = [DBClient.name.ilike(pattern), DBClient.email.ilike(pattern)]
            digits = only_digits(search)
            if digits:
                filtros.append(DBClient.cpf_cnpj.contains(digits))
            query = query.filter(or_(*filtros))

        return query.order_by(DBClient.name, DBClient.id).all()

    @staticmethod
    def get_client(db: Session, client_id: int) -> Optional[DBClient]:
        return db.query(DBClient).filter(DBClient.id == client_id).first()

    @staticmethod
    def create_client(db: Session, client_data: ClientCreate) -> OperationResult:
        try:
            new_client = DBClient(**client_data.to_storage())
            db.add(new_client)
            db.commit()
            db.refresh(new_client)
            logger.info("Cliente %s creado (id=%s)", new_client.name, new_client.id)
            return OperationResult.ok(new_client)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error("Error al crear cliente %s: %s", client_data.name, e)
            return OperationResult.fail(str(e))

    @staticmethod
    def update_client(db: Session, db_client: DBClient, client_data: ClientUpdate) -> OperationResult:
        try:
            for campo, valor in client_data.to_storage().items():
                setattr(db_client, campo, valor)
            db.add(db_client)
            db.commit()
            db.refresh(db_client)
            logger.info("Cliente %s actualizado", db_client.id)
            return OperationResult.ok(db_client)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error("Error al actualizar cliente %s: %s", db_client.id, e)
            return OperationResult.fail(str(e))

    @staticmethod
    def delete_client(db: Session, db_client: DBClient) -> OperationResult:
        # Los pedidos históricos no se tocan; si la base los protege con la FK, el borrado falla aquí
        client_id = db_client.id
        try:
            db.delete(db_client)
            db.commit()
            logger.info("Cliente %s eliminado", client_id)
            return OperationResult.ok()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error("Error al eliminar cliente %s: %s", client_id, e)
            return OperationResult.fail(str(e))
