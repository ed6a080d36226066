from sqlalchemy import Column, String, Boolean, DateTime, Integer, Text, ForeignKey, Index, UniqueConstraint
from pydantic import ConfigDict

from app.database.db_connection import Base
from app.utils.database_utils import now_trimmed


class ClienteModel(Base):
    __tablename__ = "clientes"
    __table_args__ = (
        UniqueConstraint("empresa_id", "telefone", name="uq_clientes_empresa_telefone"),
        Index("idx_clientes_empresa_email", "empresa_id", "email"),
        {"schema": "cadastros"},
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    empresa_id = Column(Integer, ForeignKey("cadastros.empresas.id", ondelete="CASCADE"), nullable=False, index=True)
    nome = Column(String(100), nullable=False)
    cpf = Column(String(14), nullable=True)
    telefone = Column(String(20), nullable=True)  # somente dígitos, com 55
    email = Column(String(100), nullable=True)
    foto = Column(String(500), nullable=True)
    observacoes = Column(Text, nullable=True)
    origem = Column(String(20), nullable=False, default="manual")  # manual | google

    cep = Column(String(10), nullable=True)
    rua = Column(String(120), nullable=True)
    numero = Column(String(20), nullable=True)
    complemento = Column(String(100), nullable=True)
    bairro = Column(String(80), nullable=True)
    cidade = Column(String(80), nullable=True)
    estado = Column(String(2), nullable=True)

    ativo = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=now_trimmed, nullable=False)
    updated_at = Column(DateTime, default=now_trimmed, onupdate=now_trimmed, nullable=False)

    model_config = ConfigDict(from_attributes=True)
