from sqlalchemy import (
    Column, Integer, String, Date, DateTime, ForeignKey, Numeric, Text, JSON,
    Enum as SAEnum, Index, UniqueConstraint,
)
from sqlalchemy.orm import relationship

from app.database.db_connection import Base
from app.utils.database_utils import now_trimmed
from .model_item_base import ItemLinhaMixin

# ENUMs do PostgreSQL no schema pedidos
PedidoStatusSAEnum = SAEnum(
    "Pagamento Pendente", "Aguardando Produção", "Em Produção", "Pronto",
    "Saiu para Entrega", "Entregue", "Cancelado",
    name="pedido_status_enum",
    create_type=False,
    schema="pedidos",
)

TipoEntregaSAEnum = SAEnum(
    "Entrega", "Retirada",
    name="tipo_entrega_enum",
    create_type=False,
    schema="pedidos",
)

PrioridadeSAEnum = SAEnum(
    "Normal", "Urgente",
    name="pedido_prioridade_enum",
    create_type=False,
    schema="pedidos",
)

StatusPagamentoSAEnum = SAEnum(
    "Pago", "Pendente", "Parcial",
    name="status_pagamento_enum",
    create_type=False,
    schema="pedidos",
)


class PedidoModel(Base):
    """
    Encomenda de um cliente.

    Os dados do cliente (nome/telefone/email) são um snapshot do momento da criação.
    Valores: valor_total = soma dos subtotais + taxa_entrega; saldo_pendente = valor_total - valor_pago.
    """
    __tablename__ = "pedidos"
    __table_args__ = (
        UniqueConstraint("empresa_id", "numero", name="uq_pedidos_empresa_numero"),
        Index("idx_pedidos_empresa_status", "empresa_id", "status"),
        Index("idx_pedidos_empresa_data_entrega", "empresa_id", "data_entrega"),
        {"schema": "pedidos"},
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    empresa_id = Column(Integer, ForeignKey("cadastros.empresas.id", ondelete="CASCADE"), nullable=False)
    numero = Column(Integer, nullable=False)
    orcamento_id = Column(Integer, ForeignKey("pedidos.orcamentos.id", ondelete="SET NULL"), nullable=True)

    # Cliente (snapshot)
    cliente_id = Column(Integer, ForeignKey("cadastros.clientes.id", ondelete="SET NULL"), nullable=True)
    cliente_nome = Column(String(100), nullable=False)
    cliente_telefone = Column(String(20), nullable=True)
    cliente_email = Column(String(100), nullable=True)

    # Entrega
    data_entrega = Column(Date, nullable=False)
    hora_entrega = Column(String(5), nullable=True)  # HH:MM
    tipo_entrega = Column(TipoEntregaSAEnum, nullable=False, default="Retirada")
    endereco = Column(JSON, nullable=True)  # {cep, rua, numero, complemento, bairro, cidade, estado}
    taxa_entrega = Column(Numeric(18, 2), nullable=False, default=0)
    distancia = Column(Numeric(10, 3), nullable=True)
    instrucoes = Column(Text, nullable=True)

    # Decoração
    decoracao_descricao = Column(Text, nullable=True)
    decoracao_imagens = Column(JSON, nullable=True)
    decoracao_observacoes = Column(Text, nullable=True)
    observacoes = Column(Text, nullable=True)

    # Financeiro
    valor_total = Column(Numeric(18, 2), nullable=False, default=0)
    valor_pago = Column(Numeric(18, 2), nullable=False, default=0)
    saldo_pendente = Column(Numeric(18, 2), nullable=False, default=0)
    forma_pagamento = Column(String(30), nullable=True)
    status_pagamento = Column(StatusPagamentoSAEnum, nullable=False, default="Pendente")

    status = Column(PedidoStatusSAEnum, nullable=False, default="Pagamento Pendente")
    prioridade = Column(PrioridadeSAEnum, nullable=False, default="Normal")

    created_at = Column(DateTime, default=now_trimmed, nullable=False)
    updated_at = Column(DateTime, default=now_trimmed, onupdate=now_trimmed, nullable=False)

    itens = relationship(
        "PedidoItemModel",
        back_populates="pedido",
        cascade="all, delete-orphan",
        order_by="PedidoItemModel.id",
    )
    historico = relationship(
        "PedidoHistoricoModel",
        back_populates="pedido",
        cascade="all, delete-orphan",
        order_by="PedidoHistoricoModel.id",
    )
    aderecos = relationship(
        "AderecoPedidoModel",
        back_populates="pedido",
        cascade="all, delete-orphan",
    )


class PedidoItemModel(ItemLinhaMixin, Base):
    __tablename__ = "pedidos_itens"
    __table_args__ = (
        Index("idx_pedidos_itens_pedido", "pedido_id"),
        {"schema": "pedidos"},
    )

    pedido_id = Column(Integer, ForeignKey("pedidos.pedidos.id", ondelete="CASCADE"), nullable=False)
    pedido = relationship("PedidoModel", back_populates="itens")


class PedidoHistoricoModel(Base):
    """Log de criação, edição e mudanças de status do pedido."""
    __tablename__ = "pedidos_historico"
    __table_args__ = (
        Index("idx_pedidos_historico_pedido", "pedido_id"),
        {"schema": "pedidos"},
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    pedido_id = Column(Integer, ForeignKey("pedidos.pedidos.id", ondelete="CASCADE"), nullable=False)
    descricao = Column(String(255), nullable=False)
    status_anterior = Column(String(30), nullable=True)
    status_novo = Column(String(30), nullable=True)
    usuario = Column(String(100), nullable=True)
    created_at = Column(DateTime, default=now_trimmed, nullable=False)

    pedido = relationship("PedidoModel", back_populates="historico")
