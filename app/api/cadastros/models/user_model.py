from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from app.database.db_connection import Base
from app.utils.database_utils import now_trimmed


class UserModel(Base):
    __tablename__ = "usuarios"
    __table_args__ = {"schema": "cadastros"}

    id = Column(Integer, primary_key=True, autoincrement=True)
    empresa_id = Column(Integer, ForeignKey("cadastros.empresas.id", ondelete="CASCADE"), nullable=False, index=True)
    username = Column(String(100), nullable=False, unique=True)
    nome = Column(String(100), nullable=True)
    hashed_password = Column(String(255), nullable=False)
    type_user = Column(String(20), nullable=False, default="admin")  # admin | funcionario
    ativo = Column(Boolean, nullable=False, default=True)

    created_at = Column(DateTime, default=now_trimmed, nullable=False)
    updated_at = Column(DateTime, default=now_trimmed, onupdate=now_trimmed, nullable=False)

    empresa = relationship("EmpresaModel", back_populates="usuarios")
