from typing import List, Optional

from sqlalchemy.orm import Session, selectinload

from app.api.producao.models.model_receita import ReceitaModel, ReceitaIngredienteModel
from app.api.producao.models.model_config_producao import ConfigProducaoModel


class ReceitaRepository:
    def __init__(self, db: Session, empresa_id: int):
        self.db = db
        self.empresa_id = empresa_id

    def _query(self):
        return (
            self.db.query(ReceitaModel)
            .options(selectinload(ReceitaModel.ingredientes).joinedload(ReceitaIngredienteModel.ingrediente))
            .filter(ReceitaModel.empresa_id == self.empresa_id)
        )

    def get(self, receita_id: int) -> Optional[ReceitaModel]:
        return self._query().filter(ReceitaModel.id == receita_id).first()

    def list(self, tipo: Optional[str] = None, busca: Optional[str] = None) -> List[ReceitaModel]:
        q = self._query()
        if tipo:
            q = q.filter(ReceitaModel.tipo == tipo)
        if busca:
            q = q.filter(ReceitaModel.nome.ilike(f"%{busca.strip()}%"))
        return q.order_by(ReceitaModel.tipo, ReceitaModel.nome).all()

    def add(self, receita: ReceitaModel) -> ReceitaModel:
        receita.empresa_id = self.empresa_id
        self.db.add(receita)
        self.db.flush()
        return receita

    def delete(self, receita: ReceitaModel) -> None:
        self.db.delete(receita)
        self.db.flush()


class ConfigProducaoRepository:
    def __init__(self, db: Session, empresa_id: int):
        self.db = db
        self.empresa_id = empresa_id

    def get(self) -> Optional[ConfigProducaoModel]:
        return (
            self.db.query(ConfigProducaoModel)
            .filter(ConfigProducaoModel.empresa_id == self.empresa_id)
            .first()
        )

    def add(self, config: ConfigProducaoModel) -> ConfigProducaoModel:
        config.empresa_id = self.empresa_id
        self.db.add(config)
        self.db.flush()
        return config
