from sqlalchemy import Column, Integer, DateTime, ForeignKey, JSON

from app.database.db_connection import Base
from app.utils.database_utils import now_trimmed

# gramas de recheio por camada, por diâmetro (cm)
RECHEIO_POR_CAMADA_PADRAO = [
    {"diametro": 13, "gramas": 165},
    {"diametro": 15, "gramas": 220},
    {"diametro": 18, "gramas": 280},
    {"diametro": 20, "gramas": 390},
    {"diametro": 23, "gramas": 480},
    {"diametro": 25, "gramas": 550},
]


class ConfigProducaoModel(Base):
    __tablename__ = "config_producao"
    __table_args__ = {"schema": "producao"}

    id = Column(Integer, primary_key=True, autoincrement=True)
    empresa_id = Column(
        Integer, ForeignKey("cadastros.empresas.id", ondelete="CASCADE"), nullable=False, unique=True
    )
    recheio_por_camada = Column(JSON, nullable=False, default=lambda: [dict(c) for c in RECHEIO_POR_CAMADA_PADRAO])
    antecedencia_minima = Column(Integer, nullable=False, default=2)  # dias
    # {"massa": 60, "recheio": 40, "montagem": 30} em minutos
    tempos_producao = Column(JSON, nullable=True)

    created_at = Column(DateTime, default=now_trimmed, nullable=False)
    updated_at = Column(DateTime, default=now_trimmed, onupdate=now_trimmed, nullable=False)
