from sqlalchemy import (
    Column, Integer, String, Date, DateTime, ForeignKey, Numeric, Text,
    Enum as SAEnum, Index, UniqueConstraint,
)
from sqlalchemy.orm import relationship

from app.database.db_connection import Base
from app.utils.database_utils import now_trimmed

TipoCategoriaFinanceiraEnum = SAEnum(
    "Receita", "DespesaVariavel", "DespesaFixa",
    name="categoria_financeira_tipo_enum",
    create_type=False,
    schema="financeiro",
)

TipoTransacaoEnum = SAEnum(
    "Receita", "Despesa",
    name="transacao_tipo_enum",
    create_type=False,
    schema="financeiro",
)

CATEGORIAS_FINANCEIRAS_PADRAO = [
    ("Vendas", "Receita"),
    ("Encomendas", "Receita"),
    ("Outras Receitas", "Receita"),
    ("Ingredientes", "DespesaVariavel"),
    ("Embalagens", "DespesaVariavel"),
    ("Entregas", "DespesaVariavel"),
    ("Compras", "DespesaVariavel"),
    ("Insumos Gerais", "DespesaVariavel"),
    ("Aluguel", "DespesaFixa"),
    ("Energia", "DespesaFixa"),
    ("Água", "DespesaFixa"),
    ("Internet", "DespesaFixa"),
    ("Salários", "DespesaFixa"),
]


class CategoriaFinanceiraModel(Base):
    __tablename__ = "categorias_financeiras"
    __table_args__ = (
        UniqueConstraint("empresa_id", "nome", name="uq_categorias_financeiras_empresa_nome"),
        {"schema": "financeiro"},
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    empresa_id = Column(Integer, ForeignKey("cadastros.empresas.id", ondelete="CASCADE"), nullable=False, index=True)
    nome = Column(String(80), nullable=False)
    tipo = Column(TipoCategoriaFinanceiraEnum, nullable=False)
    created_at = Column(DateTime, default=now_trimmed, nullable=False)
    updated_at = Column(DateTime, default=now_trimmed, onupdate=now_trimmed, nullable=False)


class TransacaoModel(Base):
    __tablename__ = "transacoes"
    __table_args__ = (
        Index("idx_transacoes_empresa_data", "empresa_id", "data"),
        {"schema": "financeiro"},
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    empresa_id = Column(Integer, ForeignKey("cadastros.empresas.id", ondelete="CASCADE"), nullable=False)
    tipo = Column(TipoTransacaoEnum, nullable=False)
    descricao = Column(String(255), nullable=False)
    valor = Column(Numeric(18, 2), nullable=False)
    data = Column(Date, nullable=False)
    categoria_id = Column(Integer, ForeignKey("financeiro.categorias_financeiras.id", ondelete="SET NULL"), nullable=True)
    forma_pagamento = Column(String(30), nullable=True)
    status = Column(String(20), nullable=False, default="Confirmada")
    pedido_id = Column(Integer, ForeignKey("pedidos.pedidos.id", ondelete="SET NULL"), nullable=True)
    conta_id = Column(Integer, ForeignKey("financeiro.contas.id", ondelete="SET NULL"), nullable=True)
    observacoes = Column(Text, nullable=True)

    created_at = Column(DateTime, default=now_trimmed, nullable=False)
    updated_at = Column(DateTime, default=now_trimmed, onupdate=now_trimmed, nullable=False)

    categoria = relationship("CategoriaFinanceiraModel", lazy="joined")

    @property
    def categoria_nome(self):
        return self.categoria.nome if self.categoria else None
