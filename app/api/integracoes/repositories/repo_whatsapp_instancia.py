from typing import List, Optional

from sqlalchemy import desc
from sqlalchemy.orm import Session

from app.api.integracoes.models.model_whatsapp_instancia import WhatsAppInstanciaModel


class WhatsAppInstanciaRepository:
    def __init__(self, db: Session, empresa_id: int):
        self.db = db
        self.empresa_id = empresa_id

    def _query(self):
        return self.db.query(WhatsAppInstanciaModel).filter(WhatsAppInstanciaModel.empresa_id == self.empresa_id)

    def list(self) -> List[WhatsAppInstanciaModel]:
        return self._query().order_by(desc(WhatsAppInstanciaModel.created_at), desc(WhatsAppInstanciaModel.id)).all()

    def get(self, instancia_id: int) -> Optional[WhatsAppInstanciaModel]:
        return self._query().filter(WhatsAppInstanciaModel.id == instancia_id).first()

    def get_by_nome(self, instance_name: str) -> Optional[WhatsAppInstanciaModel]:
        return self._query().filter(WhatsAppInstanciaModel.instance_name == instance_name).first()

    def get_ativa(self) -> Optional[WhatsAppInstanciaModel]:
        return self._query().filter(WhatsAppInstanciaModel.ativo.is_(True)).first()

    def desativar_todas(self) -> None:
        # sem commit: quem chama fecha a transação
        self._query().update({WhatsAppInstanciaModel.ativo: False}, synchronize_session="fetch")

    def add(self, instancia: WhatsAppInstanciaModel) -> WhatsAppInstanciaModel:
        instancia.empresa_id = self.empresa_id
        self.db.add(instancia)
        self.db.flush()
        return instancia

    def delete(self, instancia: WhatsAppInstanciaModel) -> None:
        self.db.delete(instancia)
        self.db.flush()
