from sqlalchemy import Column, String, DateTime, Integer, Text, Numeric, ForeignKey, Enum as SAEnum

from app.database.db_connection import Base
from app.utils.database_utils import now_trimmed

TipoSaborSAEnum = SAEnum(
    "Massa", "Recheio",
    name="sabor_tipo_enum",
    create_type=False,
    schema="cadastros",
)


class SaborModel(Base):
    __tablename__ = "sabores"
    __table_args__ = {"schema": "cadastros"}

    id = Column(Integer, primary_key=True, autoincrement=True)
    empresa_id = Column(Integer, ForeignKey("cadastros.empresas.id", ondelete="CASCADE"), nullable=False, index=True)
    nome = Column(String(100), nullable=False)
    tipo = Column(TipoSaborSAEnum, nullable=False)
    descricao = Column(Text, nullable=True)
    custo_adicional = Column(Numeric(18, 2), nullable=False, default=0)

    created_at = Column(DateTime, default=now_trimmed, nullable=False)
    updated_at = Column(DateTime, default=now_trimmed, onupdate=now_trimmed, nullable=False)
