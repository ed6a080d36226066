from sqlalchemy import (
    Column, Integer, String, Date, DateTime, ForeignKey, Numeric, Text,
    Enum as SAEnum, Index,
)
from sqlalchemy.orm import relationship

from app.database.db_connection import Base
from app.utils.database_utils import now_trimmed, today_sp
from app.utils.decimal_utils import dec

TipoContaEnum = SAEnum(
    "pagar", "receber",
    name="conta_tipo_enum",
    create_type=False,
    schema="financeiro",
)


def status_conta(valor_total, total_pago, data_vencimento, hoje=None) -> str:
    """
    Status derivado do saldo e do vencimento; nunca lido do banco.
    pago > parcial > vencido > pendente.
    """
    hoje = hoje or today_sp()
    total = dec(valor_total)
    saldo = total - dec(total_pago)
    if saldo <= 0:
        return "pago"
    if saldo < total:
        return "parcial"
    if data_vencimento and hoje > data_vencimento:
        return "vencido"
    return "pendente"


class ContaModel(Base):
    """Conta a pagar (fornecedor) ou a receber (cliente)."""
    __tablename__ = "contas"
    __table_args__ = (
        Index("idx_contas_empresa_tipo_vencimento", "empresa_id", "tipo", "data_vencimento"),
        {"schema": "financeiro"},
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    empresa_id = Column(Integer, ForeignKey("cadastros.empresas.id", ondelete="CASCADE"), nullable=False)
    tipo = Column(TipoContaEnum, nullable=False)

    fornecedor_id = Column(Integer, ForeignKey("cadastros.fornecedores.id", ondelete="SET NULL"), nullable=True)
    cliente_id = Column(Integer, ForeignKey("cadastros.clientes.id", ondelete="SET NULL"), nullable=True)
    contraparte_nome = Column(String(150), nullable=False)

    descricao = Column(String(255), nullable=False)
    categoria_id = Column(Integer, ForeignKey("financeiro.categorias_financeiras.id", ondelete="SET NULL"), nullable=True)
    valor_total = Column(Numeric(18, 2), nullable=False)
    data_vencimento = Column(Date, nullable=False)
    observacoes = Column(Text, nullable=True)

    created_at = Column(DateTime, default=now_trimmed, nullable=False)
    updated_at = Column(DateTime, default=now_trimmed, onupdate=now_trimmed, nullable=False)

    categoria = relationship("CategoriaFinanceiraModel", lazy="joined")
    pagamentos = relationship(
        "PagamentoContaModel",
        back_populates="conta",
        cascade="all, delete-orphan",
        order_by="PagamentoContaModel.data",
        lazy="selectin",
    )

    @property
    def categoria_nome(self):
        return self.categoria.nome if self.categoria else None

    @property
    def valor_pago(self):
        return sum((dec(p.valor) for p in self.pagamentos), dec(0))

    @property
    def saldo_restante(self):
        return max(dec(self.valor_total) - self.valor_pago, dec(0))

    @property
    def status(self) -> str:
        return status_conta(self.valor_total, self.valor_pago, self.data_vencimento)


class PagamentoContaModel(Base):
    __tablename__ = "contas_pagamentos"
    __table_args__ = {"schema": "financeiro"}

    id = Column(Integer, primary_key=True, autoincrement=True)
    conta_id = Column(Integer, ForeignKey("financeiro.contas.id", ondelete="CASCADE"), nullable=False, index=True)
    data = Column(Date, nullable=False)
    valor = Column(Numeric(18, 2), nullable=False)
    forma_pagamento = Column(String(30), nullable=True)
    observacao = Column(String(255), nullable=True)
    created_at = Column(DateTime, default=now_trimmed, nullable=False)

    conta = relationship("ContaModel", back_populates="pagamentos")
