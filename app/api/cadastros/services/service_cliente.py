from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from fastapi import HTTPException, status

from app.api.cadastros.repositories.repo_cliente import ClienteRepository
from app.api.cadastros.schemas.schema_cliente import ClienteCreate, ClienteUpdate
from app.utils.logger import logger
from app.utils.telefone import normalizar_telefone


class ClienteService:
    def __init__(self, db: Session, empresa_id: int):
        self.repo = ClienteRepository(db, empresa_id)

    def get(self, cliente_id: int):
        cli = self.repo.get_by_id(cliente_id)
        if not cli:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Cliente não encontrado")
        return cli

    def list(self, search: str | None = None, skip: int = 0, limit: int = 50):
        return self.repo.list(search=search, skip=skip, limit=limit)

    def _checar_duplicados(self, telefone: str | None, email: str | None, ignorar_id: int | None = None):
        if telefone:
            existente = self.repo.get_by_telefone(telefone)
            if existente and existente.id != ignorar_id:
                raise HTTPException(status.HTTP_400_BAD_REQUEST, "Telefone já cadastrado")
        if email:
            existente = self.repo.get_by_email(email)
            if existente and existente.id != ignorar_id:
                raise HTTPException(status.HTTP_400_BAD_REQUEST, "E-mail já cadastrado")

    def create(self, data: ClienteCreate):
        dados = data.model_dump(exclude_unset=True)
        dados["telefone"] = normalizar_telefone(dados.get("telefone"))
        self._checar_duplicados(dados.get("telefone"), dados.get("email"))
        try:
            cliente = self.repo.create(**dados)
        except IntegrityError as err:
            raise HTTPException(status.HTTP_409_CONFLICT, "Cliente já cadastrado") from err
        logger.info(f"[Clientes] Criado id={cliente.id}")
        return cliente

    def update(self, cliente_id: int, data: ClienteUpdate):
        db_obj = self.get(cliente_id)
        dados = data.model_dump(exclude_unset=True)
        if "telefone" in dados:
            dados["telefone"] = normalizar_telefone(dados["telefone"])
        self._checar_duplicados(dados.get("telefone"), dados.get("email"), ignorar_id=cliente_id)
        try:
            return self.repo.update(db_obj, **dados)
        except IntegrityError as err:
            raise HTTPException(status.HTTP_409_CONFLICT, "Cliente já cadastrado") from err

    def delete(self, cliente_id: int) -> None:
        self.repo.delete(self.get(cliente_id))
