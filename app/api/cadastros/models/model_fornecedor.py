from sqlalchemy import Column, String, Boolean, DateTime, Integer, Text, ForeignKey, JSON, Enum as SAEnum

from app.database.db_connection import Base
from app.utils.database_utils import now_trimmed

CategoriaFornecedorEnum = SAEnum(
    "Ingredientes", "Embalagens", "Decorações", "Serviços", "Equipamentos",
    name="fornecedor_categoria_enum",
    create_type=False,
    schema="cadastros",
)


class FornecedorModel(Base):
    __tablename__ = "fornecedores"
    __table_args__ = {"schema": "cadastros"}

    id = Column(Integer, primary_key=True, autoincrement=True)
    empresa_id = Column(Integer, ForeignKey("cadastros.empresas.id", ondelete="CASCADE"), nullable=False, index=True)
    razao_social = Column(String(150), nullable=True)
    nome_fantasia = Column(String(150), nullable=False)
    cnpj = Column(String(20), nullable=True)
    categoria = Column(CategoriaFornecedorEnum, nullable=False, default="Ingredientes")
    telefone = Column(String(20), nullable=True)
    email = Column(String(100), nullable=True)
    contato = Column(String(100), nullable=True)

    cep = Column(String(10), nullable=True)
    rua = Column(String(120), nullable=True)
    numero = Column(String(20), nullable=True)
    complemento = Column(String(100), nullable=True)
    bairro = Column(String(80), nullable=True)
    cidade = Column(String(80), nullable=True)
    estado = Column(String(2), nullable=True)

    # {"banco": "...", "agencia": "...", "conta": "...", "pix": "..."}
    dados_bancarios = Column(JSON, nullable=True)
    observacoes = Column(Text, nullable=True)
    ativo = Column(Boolean, nullable=False, default=True)

    created_at = Column(DateTime, default=now_trimmed, nullable=False)
    updated_at = Column(DateTime, default=now_trimmed, onupdate=now_trimmed, nullable=False)
