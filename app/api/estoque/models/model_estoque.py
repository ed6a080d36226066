from sqlalchemy import (
    Column, Integer, String, Date, DateTime, Boolean, ForeignKey, Numeric, Text,
    Enum as SAEnum, Index, UniqueConstraint,
)
from sqlalchemy.orm import relationship

from app.database.db_connection import Base
from app.utils.database_utils import now_trimmed

UnidadeMedidaEnum = SAEnum(
    "g", "kg", "ml", "l", "un",
    name="unidade_medida_enum",
    create_type=False,
    schema="estoque",
)

TipoMovimentacaoEnum = SAEnum(
    "Entrada", "Saida", "Ajuste",
    name="tipo_movimentacao_enum",
    create_type=False,
    schema="estoque",
)

CATEGORIAS_PADRAO = [
    "Laticínios", "Secos", "Hortifruti", "Líquidos", "Embalagens",
    "Decoração", "Descartáveis", "Equipamentos", "Outros",
]


class CategoriaEstoqueModel(Base):
    __tablename__ = "categorias"
    __table_args__ = (
        UniqueConstraint("empresa_id", "nome", name="uq_estoque_categorias_empresa_nome"),
        {"schema": "estoque"},
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    empresa_id = Column(Integer, ForeignKey("cadastros.empresas.id", ondelete="CASCADE"), nullable=False, index=True)
    nome = Column(String(60), nullable=False)
    created_at = Column(DateTime, default=now_trimmed, nullable=False)
    updated_at = Column(DateTime, default=now_trimmed, onupdate=now_trimmed, nullable=False)


class IngredienteModel(Base):
    __tablename__ = "ingredientes"
    __table_args__ = (
        Index("idx_ingredientes_empresa_nome", "empresa_id", "nome"),
        {"schema": "estoque"},
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    empresa_id = Column(Integer, ForeignKey("cadastros.empresas.id", ondelete="CASCADE"), nullable=False)
    nome = Column(String(120), nullable=False)
    unidade = Column(UnidadeMedidaEnum, nullable=False, default="g")
    categoria = Column(String(60), nullable=False, default="Outros")

    estoque_atual = Column(Numeric(18, 3), nullable=False, default=0)
    estoque_minimo = Column(Numeric(18, 3), nullable=False, default=0)
    estoque_maximo = Column(Numeric(18, 3), nullable=True)
    custo_unitario = Column(Numeric(18, 4), nullable=False, default=0)
    custo_medio = Column(Numeric(18, 4), nullable=True)

    fornecedor_id = Column(Integer, ForeignKey("cadastros.fornecedores.id", ondelete="SET NULL"), nullable=True)
    codigo_produto = Column(String(60), nullable=True)
    localizacao = Column(String(100), nullable=True)
    marca = Column(String(100), nullable=True)
    ultima_compra = Column(Date, nullable=True)
    ativo = Column(Boolean, nullable=False, default=True)

    created_at = Column(DateTime, default=now_trimmed, nullable=False)
    updated_at = Column(DateTime, default=now_trimmed, onupdate=now_trimmed, nullable=False)

    @property
    def estoque_baixo(self) -> bool:
        return (self.estoque_atual or 0) <= (self.estoque_minimo or 0)


class MovimentacaoEstoqueModel(Base):
    __tablename__ = "movimentacoes"
    __table_args__ = (
        Index("idx_movimentacoes_empresa_ingrediente", "empresa_id", "ingrediente_id"),
        {"schema": "estoque"},
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    empresa_id = Column(Integer, ForeignKey("cadastros.empresas.id", ondelete="CASCADE"), nullable=False)
    ingrediente_id = Column(Integer, ForeignKey("estoque.ingredientes.id", ondelete="CASCADE"), nullable=False)
    tipo = Column(TipoMovimentacaoEnum, nullable=False)
    data = Column(DateTime, default=now_trimmed, nullable=False)

    quantidade = Column(Numeric(18, 3), nullable=False)
    quantidade_anterior = Column(Numeric(18, 3), nullable=False)
    quantidade_posterior = Column(Numeric(18, 3), nullable=False)
    valor_unitario = Column(Numeric(18, 4), nullable=True)  # apenas Entrada
    valor_total = Column(Numeric(18, 2), nullable=True)

    motivo = Column(String(255), nullable=True)
    pedido_id = Column(Integer, ForeignKey("pedidos.pedidos.id", ondelete="SET NULL"), nullable=True)
    nota_fiscal = Column(String(60), nullable=True)
    fornecedor_id = Column(Integer, ForeignKey("cadastros.fornecedores.id", ondelete="SET NULL"), nullable=True)
    usuario = Column(String(100), nullable=True)
    observacoes = Column(Text, nullable=True)

    created_at = Column(DateTime, default=now_trimmed, nullable=False)

    ingrediente = relationship("IngredienteModel", lazy="joined")

    @property
    def ingrediente_nome(self):
        return self.ingrediente.nome if self.ingrediente else None
