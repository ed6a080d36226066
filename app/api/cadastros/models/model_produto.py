import enum

from sqlalchemy import Column, String, Boolean, DateTime, Integer, Text, Numeric, ForeignKey, JSON, Enum as SAEnum

from app.database.db_connection import Base
from app.utils.database_utils import now_trimmed


class CategoriaProduto(str, enum.Enum):
    BOLO = "Bolo"
    ADICIONAL = "Adicional"
    SERVICO = "Serviço"


CategoriaProdutoEnum = SAEnum(
    "Bolo", "Adicional", "Serviço",
    name="produto_categoria_enum",
    create_type=False,
    schema="cadastros",
)


class ProdutoModel(Base):
    __tablename__ = "produtos"
    __table_args__ = {"schema": "cadastros"}

    id = Column(Integer, primary_key=True, autoincrement=True)
    empresa_id = Column(Integer, ForeignKey("cadastros.empresas.id", ondelete="CASCADE"), nullable=False, index=True)
    nome = Column(String(120), nullable=False)
    categoria = Column(CategoriaProdutoEnum, nullable=False, default="Bolo")
    preco = Column(Numeric(18, 2), nullable=False, default=0)
    descricao = Column(Text, nullable=True)
    foto = Column(String(500), nullable=True)
    tamanhos = Column(JSON, nullable=True)  # ["15cm", "20cm"]
    precos_por_tamanho = Column(JSON, nullable=True)  # {"15cm": 120.0, "20cm": 180.0}
    tempo_producao = Column(Integer, nullable=True)  # horas
    ativo = Column(Boolean, nullable=False, default=True)

    created_at = Column(DateTime, default=now_trimmed, nullable=False)
    updated_at = Column(DateTime, default=now_trimmed, onupdate=now_trimmed, nullable=False)
