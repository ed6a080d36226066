from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey, Text, UniqueConstraint

from app.database.db_connection import Base
from app.utils.database_utils import now_trimmed


class WhatsAppInstanciaModel(Base):
    """Instância da Evolution API por empresa. Apenas uma ativa por empresa."""

    __tablename__ = "whatsapp_instancias"
    __table_args__ = (
        UniqueConstraint("empresa_id", "instance_name", name="uq_whatsapp_instancias_empresa_nome"),
        {"schema": "integracoes"},
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    empresa_id = Column(Integer, ForeignKey("cadastros.empresas.id", ondelete="CASCADE"), nullable=False, index=True)
    instance_name = Column(String(100), nullable=False)
    base_url = Column(String(255), nullable=True)  # vazio = EVOLUTION_API_URL
    api_key = Column(Text, nullable=True)  # vazio = EVOLUTION_API_KEY
    ativo = Column(Boolean, nullable=False, default=False, index=True)
    last_state = Column(String(30), nullable=True)

    created_at = Column(DateTime, default=now_trimmed, nullable=False)
    updated_at = Column(DateTime, default=now_trimmed, onupdate=now_trimmed, nullable=False)

    @property
    def possui_api_key(self) -> bool:
        return bool(self.api_key)
