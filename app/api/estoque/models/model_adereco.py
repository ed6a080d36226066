from sqlalchemy import (
    Column, Integer, String, Date, DateTime, Boolean, ForeignKey, Numeric, Text, Index,
)
from sqlalchemy.orm import relationship

from app.database.db_connection import Base
from app.utils.database_utils import now_trimmed


class AderecoModel(Base):
    """Adereços e materiais de decoração (topos, velas, fitas, bases...)."""
    __tablename__ = "aderecos"
    __table_args__ = (
        Index("idx_aderecos_empresa_nome", "empresa_id", "nome"),
        {"schema": "estoque"},
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    empresa_id = Column(Integer, ForeignKey("cadastros.empresas.id", ondelete="CASCADE"), nullable=False)
    nome = Column(String(120), nullable=False)
    categoria = Column(String(60), nullable=True)
    fornecedor_id = Column(Integer, ForeignKey("cadastros.fornecedores.id", ondelete="SET NULL"), nullable=True)
    preco = Column(Numeric(18, 2), nullable=False, default=0)
    unidade = Column(String(10), nullable=False, default="un")
    estoque = Column(Integer, nullable=False, default=0)
    estoque_min = Column(Integer, nullable=False, default=0)
    descricao = Column(Text, nullable=True)
    ativo = Column(Boolean, nullable=False, default=True)

    created_at = Column(DateTime, default=now_trimmed, nullable=False)
    updated_at = Column(DateTime, default=now_trimmed, onupdate=now_trimmed, nullable=False)

    @property
    def estoque_baixo(self) -> bool:
        return (self.estoque or 0) <= (self.estoque_min or 0)


class CompraAderecoModel(Base):
    __tablename__ = "compras_aderecos"
    __table_args__ = (
        Index("idx_compras_aderecos_empresa_data", "empresa_id", "data"),
        {"schema": "estoque"},
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    empresa_id = Column(Integer, ForeignKey("cadastros.empresas.id", ondelete="CASCADE"), nullable=False)
    adereco_id = Column(Integer, ForeignKey("estoque.aderecos.id", ondelete="CASCADE"), nullable=False)
    data = Column(Date, nullable=False)
    quantidade = Column(Integer, nullable=False)
    valor_unitario = Column(Numeric(18, 2), nullable=False)
    valor_total = Column(Numeric(18, 2), nullable=False)
    fornecedor_id = Column(Integer, ForeignKey("cadastros.fornecedores.id", ondelete="SET NULL"), nullable=True)
    observacoes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=now_trimmed, nullable=False)

    adereco = relationship("AderecoModel", lazy="joined")

    @property
    def adereco_nome(self):
        return self.adereco.nome if self.adereco else None


class AderecoPedidoModel(Base):
    """Adereço vinculado a um pedido."""
    __tablename__ = "aderecos_pedidos"
    __table_args__ = (
        Index("idx_aderecos_pedidos_pedido", "pedido_id"),
        {"schema": "estoque"},
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    pedido_id = Column(Integer, ForeignKey("pedidos.pedidos.id", ondelete="CASCADE"), nullable=False)
    adereco_id = Column(Integer, ForeignKey("estoque.aderecos.id", ondelete="CASCADE"), nullable=False)
    quantidade = Column(Integer, nullable=False, default=1)
    reservado = Column(Boolean, nullable=False, default=False)
    observacoes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=now_trimmed, nullable=False)

    pedido = relationship("PedidoModel", back_populates="aderecos")
    adereco = relationship("AderecoModel", lazy="joined")

    @property
    def adereco_nome(self):
        return self.adereco.nome if self.adereco else None
