from sqlalchemy import (
    Column, Integer, String, DateTime, ForeignKey, Numeric, Text, JSON, Enum as SAEnum, Index,
)
from sqlalchemy.orm import relationship

from app.database.db_connection import Base
from app.utils.database_utils import now_trimmed

TipoReceitaEnum = SAEnum(
    "Massa", "Recheio",
    name="receita_tipo_enum",
    create_type=False,
    schema="producao",
)


class ReceitaModel(Base):
    """
    Ficha técnica de massa ou recheio.
    Massas rendem discos por diâmetro (rendimento_por_diametro); recheios rendem
    uma panela de peso_total_g gramas por lote.
    """
    __tablename__ = "receitas"
    __table_args__ = (
        Index("idx_receitas_empresa_tipo_nome", "empresa_id", "tipo", "nome"),
        {"schema": "producao"},
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    empresa_id = Column(Integer, ForeignKey("cadastros.empresas.id", ondelete="CASCADE"), nullable=False)
    nome = Column(String(100), nullable=False)
    tipo = Column(TipoReceitaEnum, nullable=False)
    modo_preparo = Column(Text, nullable=True)
    tempo_forno = Column(Integer, nullable=True)  # minutos
    temperatura = Column(Integer, nullable=True)  # °C

    rendimento_descricao = Column(String(255), nullable=True)
    peso_total_g = Column(Numeric(12, 2), nullable=True)
    # [{"diametro": 15, "quantidade_discos": 4}, ...]
    rendimento_por_diametro = Column(JSON, nullable=False, default=list)

    created_at = Column(DateTime, default=now_trimmed, nullable=False)
    updated_at = Column(DateTime, default=now_trimmed, onupdate=now_trimmed, nullable=False)

    ingredientes = relationship(
        "ReceitaIngredienteModel",
        back_populates="receita",
        cascade="all, delete-orphan",
        order_by="ReceitaIngredienteModel.id",
    )


class ReceitaIngredienteModel(Base):
    """Quantidade de um ingrediente do estoque por lote da receita."""
    __tablename__ = "receitas_ingredientes"
    __table_args__ = {"schema": "producao"}

    id = Column(Integer, primary_key=True, autoincrement=True)
    receita_id = Column(Integer, ForeignKey("producao.receitas.id", ondelete="CASCADE"), nullable=False, index=True)
    ingrediente_id = Column(Integer, ForeignKey("estoque.ingredientes.id", ondelete="CASCADE"), nullable=False)
    quantidade = Column(Numeric(18, 3), nullable=False)

    receita = relationship("ReceitaModel", back_populates="ingredientes")
    ingrediente = relationship("IngredienteModel", lazy="joined")

    @property
    def ingrediente_nome(self):
        return self.ingrediente.nome if self.ingrediente else None

    @property
    def unidade(self):
        return self.ingrediente.unidade if self.ingrediente else None
