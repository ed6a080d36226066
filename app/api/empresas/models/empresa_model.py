# app/api/empresas/models/empresa_model.py
from sqlalchemy import Column, Integer, String, Boolean, Numeric, Date, DateTime, JSON
from sqlalchemy.orm import relationship
from pydantic import ConfigDict

from app.database.db_connection import Base
from app.utils.database_utils import now_trimmed


class EmpresaModel(Base):
    """Tenant: uma confeitaria assinante. Todos os cadastros têm empresa_id."""
    __tablename__ = "empresas"
    __table_args__ = {"schema": "cadastros"}

    id = Column(Integer, primary_key=True, autoincrement=True)
    nome = Column(String(100), nullable=False)
    cnpj = Column(String(20), nullable=True, unique=True)
    slug = Column(String(50), nullable=False, unique=True)
    logo = Column(String(255), nullable=True)
    telefone = Column(String(30), nullable=True)
    email = Column(String(100), nullable=True)
    instagram = Column(String(100), nullable=True)

    cep = Column(String(10), nullable=True)
    logradouro = Column(String(120), nullable=True)
    numero = Column(String(20), nullable=True)
    complemento = Column(String(100), nullable=True)
    bairro = Column(String(80), nullable=True)
    cidade = Column(String(80), nullable=True)
    estado = Column(String(2), nullable=True)

    # Assinatura
    plano = Column(String(20), nullable=False, default="trial")
    trial_ate = Column(Date, nullable=True)
    ativo = Column(Boolean, nullable=False, default=True)

    # Configurações do negócio
    prazo_minimo_pedidos = Column(Integer, nullable=False, default=3)  # dias
    prazo_cancelamento = Column(Integer, nullable=False, default=7)  # dias
    taxa_entrega_valor_fixo = Column(Numeric(18, 2), nullable=False, default=0)
    taxa_entrega_distancia_maxima_fixa = Column(Numeric(10, 2), nullable=False, default=0)  # km
    taxa_entrega_valor_por_km = Column(Numeric(18, 2), nullable=False, default=0)
    raio_maximo_entrega = Column(Numeric(10, 2), nullable=True)  # km
    # {"dias": ["seg", ...], "horario": "08:00 - 18:00"}
    horarios_funcionamento = Column(JSON, nullable=True)
    # {"pagamento": "...", "cancelamento": "...", "cuidados": "...", "transporte": "...", "importante": "..."}
    termos = Column(JSON, nullable=True)

    created_at = Column(DateTime, default=now_trimmed, nullable=False)
    updated_at = Column(DateTime, default=now_trimmed, onupdate=now_trimmed, nullable=False)

    usuarios = relationship("UserModel", back_populates="empresa")

    model_config = ConfigDict(from_attributes=True)
