from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.api.integracoes.clients.evolution_client import EvolutionClient
from app.api.integracoes.models.model_whatsapp_instancia import WhatsAppInstanciaModel
from app.api.integracoes.repositories.repo_whatsapp_instancia import WhatsAppInstanciaRepository
from app.api.integracoes.schemas.schema_whatsapp import WhatsAppInstanciaCreate, WhatsAppInstanciaUpdate
from app.utils.logger import logger


def criar_evolution_client(instancia: Optional[WhatsAppInstanciaModel] = None) -> EvolutionClient:
    """Credenciais da instância sobrepõem as globais (EVOLUTION_API_URL/KEY)."""
    if instancia is None:
        return EvolutionClient()
    return EvolutionClient(base_url=instancia.base_url or None, api_key=instancia.api_key or None)


class WhatsAppInstanciaService:
    """Configurações das instâncias WhatsApp da empresa; só uma fica ativa."""

    def __init__(self, db: Session, empresa_id: int):
        self.db = db
        self.empresa_id = empresa_id
        self.repo = WhatsAppInstanciaRepository(db, empresa_id)

    def list(self):
        return self.repo.list()

    def get(self, instancia_id: int) -> WhatsAppInstanciaModel:
        instancia = self.repo.get(instancia_id)
        if not instancia:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Instância não encontrada")
        return instancia

    def get_por_nome(self, instance_name: str) -> Optional[WhatsAppInstanciaModel]:
        return self.repo.get_by_nome(instance_name)

    def get_ativa(self) -> Optional[WhatsAppInstanciaModel]:
        return self.repo.get_ativa()

    def create(self, payload: WhatsAppInstanciaCreate) -> WhatsAppInstanciaModel:
        if self.repo.get_by_nome(payload.instance_name):
            raise HTTPException(status.HTTP_409_CONFLICT, "Já existe uma instância com esse nome")
        data = payload.model_dump()
        if data["ativo"]:
            self.repo.desativar_todas()
        elif not self.repo.get_ativa():
            # primeira instância cadastrada fica ativa
            data["ativo"] = True
        instancia = self.repo.add(WhatsAppInstanciaModel(**data))
        self.db.commit()
        logger.info(f"[WhatsApp] Instância criada - {instancia.instance_name} (ativa={instancia.ativo})")
        return instancia

    def update(self, instancia_id: int, payload: WhatsAppInstanciaUpdate) -> WhatsAppInstanciaModel:
        instancia = self.get(instancia_id)
        data = payload.model_dump(exclude_unset=True)
        ativar = data.pop("ativo", None)
        for key, value in data.items():
            setattr(instancia, key, value)
        if ativar is True:
            self.repo.desativar_todas()
            instancia.ativo = True
        elif ativar is False:
            instancia.ativo = False
        self.db.commit()
        self.db.refresh(instancia)
        return instancia

    def ativar(self, instancia_id: int) -> WhatsAppInstanciaModel:
        instancia = self.get(instancia_id)
        self.repo.desativar_todas()
        instancia.ativo = True
        self.db.commit()
        self.db.refresh(instancia)
        return instancia

    def delete(self, instancia_id: int) -> None:
        instancia = self.get(instancia_id)
        estava_ativa = instancia.ativo
        self.repo.delete(instancia)
        if estava_ativa:
            # promove a mais recente
            restantes = self.repo.list()
            if restantes:
                restantes[0].ativo = True
        self.db.commit()

    def registrar_estado(self, instance_name: str, estado: Optional[str]) -> None:
        instancia = self.repo.get_by_nome(instance_name)
        if instancia and estado and instancia.last_state != estado:
            instancia.last_state = estado
            self.db.commit()
