from sqlalchemy import Column, String, Date, DateTime, Integer, Text, ForeignKey, JSON, Enum as SAEnum

from app.database.db_connection import Base
from app.utils.database_utils import now_trimmed

FuncaoColaboradorEnum = SAEnum(
    "Confeiteira", "Auxiliar", "Decoradora", "Motorista", "Atendimento",
    name="colaborador_funcao_enum",
    create_type=False,
    schema="cadastros",
)

StatusColaboradorEnum = SAEnum(
    "Ativo", "Inativo", "Férias", "Licença",
    name="colaborador_status_enum",
    create_type=False,
    schema="cadastros",
)

DIAS_SEMANA = ["seg", "ter", "qua", "qui", "sex", "sab", "dom"]


class ColaboradorModel(Base):
    __tablename__ = "colaboradores"
    __table_args__ = {"schema": "cadastros"}

    id = Column(Integer, primary_key=True, autoincrement=True)
    empresa_id = Column(Integer, ForeignKey("cadastros.empresas.id", ondelete="CASCADE"), nullable=False, index=True)
    nome = Column(String(100), nullable=False)
    cpf = Column(String(14), nullable=True)
    telefone = Column(String(20), nullable=True)
    email = Column(String(100), nullable=True)
    funcao = Column(FuncaoColaboradorEnum, nullable=False)
    data_admissao = Column(Date, nullable=True)
    status = Column(StatusColaboradorEnum, nullable=False, default="Ativo")
    escala = Column(JSON, nullable=False, default=list)  # subconjunto de DIAS_SEMANA
    horario_entrada = Column(String(5), nullable=True)  # HH:MM
    horario_saida = Column(String(5), nullable=True)
    observacoes = Column(Text, nullable=True)

    created_at = Column(DateTime, default=now_trimmed, nullable=False)
    updated_at = Column(DateTime, default=now_trimmed, onupdate=now_trimmed, nullable=False)
