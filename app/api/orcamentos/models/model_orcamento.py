from sqlalchemy import (
    Column, Integer, String, Date, DateTime, ForeignKey, Numeric, Text, JSON,
    Enum as SAEnum, Index, UniqueConstraint,
)
from sqlalchemy.orm import relationship

from app.database.db_connection import Base
from app.utils.database_utils import now_trimmed, today_sp
from app.api.pedidos.models.model_item_base import ItemLinhaMixin
from app.api.pedidos.models.model_pedido import TipoEntregaSAEnum

OrcamentoStatusSAEnum = SAEnum(
    "Pendente", "Enviado", "Aprovado", "Recusado", "Expirado", "Convertido",
    name="orcamento_status_enum",
    create_type=False,
    schema="pedidos",
)

# Status que passam a ser lidos como "Expirado" depois da data de validade
STATUS_EXPIRAVEIS = ("Pendente", "Enviado")


class OrcamentoModel(Base):
    __tablename__ = "orcamentos"
    __table_args__ = (
        UniqueConstraint("empresa_id", "numero", name="uq_orcamentos_empresa_numero"),
        Index("idx_orcamentos_empresa_status", "empresa_id", "status"),
        {"schema": "pedidos"},
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    empresa_id = Column(Integer, ForeignKey("cadastros.empresas.id", ondelete="CASCADE"), nullable=False)
    numero = Column(Integer, nullable=False)
    data_validade = Column(Date, nullable=True)

    cliente_id = Column(Integer, ForeignKey("cadastros.clientes.id", ondelete="SET NULL"), nullable=True)
    cliente_nome = Column(String(100), nullable=False)
    cliente_telefone = Column(String(20), nullable=True)
    cliente_email = Column(String(100), nullable=True)

    # Preferências de entrega
    tipo_entrega = Column(TipoEntregaSAEnum, nullable=False, default="Retirada")
    data_entrega = Column(Date, nullable=True)
    hora_entrega = Column(String(5), nullable=True)
    endereco = Column(JSON, nullable=True)
    taxa_entrega = Column(Numeric(18, 2), nullable=False, default=0)
    distancia = Column(Numeric(10, 3), nullable=True)
    instrucoes_retirada = Column(Text, nullable=True)

    decoracao_descricao = Column(Text, nullable=True)
    decoracao_imagens = Column(JSON, nullable=True)
    decoracao_observacoes = Column(Text, nullable=True)
    observacoes = Column(Text, nullable=True)

    termos = Column(JSON, nullable=True)
    status = Column(OrcamentoStatusSAEnum, nullable=False, default="Pendente")
    valor_total = Column(Numeric(18, 2), nullable=False, default=0)
    # pedido gerado na aprovação (sem FK: pedidos.orcamento_id já aponta para cá)
    pedido_id = Column(Integer, nullable=True)

    created_at = Column(DateTime, default=now_trimmed, nullable=False)
    updated_at = Column(DateTime, default=now_trimmed, onupdate=now_trimmed, nullable=False)

    itens = relationship(
        "OrcamentoItemModel",
        back_populates="orcamento",
        cascade="all, delete-orphan",
        order_by="OrcamentoItemModel.id",
    )
    historico = relationship(
        "OrcamentoHistoricoModel",
        back_populates="orcamento",
        cascade="all, delete-orphan",
        order_by="OrcamentoHistoricoModel.id",
    )

    @property
    def status_atual(self) -> str:
        """Status para leitura: Pendente/Enviado vencidos aparecem como Expirado."""
        if (
            self.status in STATUS_EXPIRAVEIS
            and self.data_validade is not None
            and self.data_validade < today_sp()
        ):
            return "Expirado"
        return self.status


class OrcamentoItemModel(ItemLinhaMixin, Base):
    __tablename__ = "orcamentos_itens"
    __table_args__ = (
        Index("idx_orcamentos_itens_orcamento", "orcamento_id"),
        {"schema": "pedidos"},
    )

    orcamento_id = Column(Integer, ForeignKey("pedidos.orcamentos.id", ondelete="CASCADE"), nullable=False)
    orcamento = relationship("OrcamentoModel", back_populates="itens")


class OrcamentoHistoricoModel(Base):
    __tablename__ = "orcamentos_historico"
    __table_args__ = (
        Index("idx_orcamentos_historico_orcamento", "orcamento_id"),
        {"schema": "pedidos"},
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    orcamento_id = Column(Integer, ForeignKey("pedidos.orcamentos.id", ondelete="CASCADE"), nullable=False)
    acao = Column(String(255), nullable=False)
    usuario = Column(String(100), nullable=True)
    created_at = Column(DateTime, default=now_trimmed, nullable=False)

    orcamento = relationship("OrcamentoModel", back_populates="historico")
