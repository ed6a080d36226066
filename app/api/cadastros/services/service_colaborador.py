from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.api.cadastros.models.model_colaborador import ColaboradorModel, DIAS_SEMANA
from app.api.cadastros.repositories.repo_colaborador import ColaboradorRepository
from app.api.cadastros.schemas.schema_colaborador import ColaboradorCreate, ColaboradorUpdate


class ColaboradorService:
    def __init__(self, db: Session, empresa_id: int):
        self.repo = ColaboradorRepository(db, empresa_id)

    def get(self, colaborador_id: int) -> ColaboradorModel:
        colaborador = self.repo.get(colaborador_id)
        if not colaborador:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Colaborador não encontrado")
        return colaborador

    def list(self, status_filtro=None, funcao=None, search=None, skip=0, limit=100):
        return self.repo.list(status=status_filtro, funcao=funcao, search=search, skip=skip, limit=limit)

    @staticmethod
    def _dados(payload, **kwargs) -> dict:
        data = payload.model_dump(mode="json", **kwargs)
        # Date do banco exige date, não a string do dump
        if "data_admissao" in data:
            data["data_admissao"] = payload.data_admissao
        return data

    def create(self, payload: ColaboradorCreate) -> ColaboradorModel:
        return self.repo.create(ColaboradorModel(**self._dados(payload)))

    def update(self, colaborador_id: int, payload: ColaboradorUpdate) -> ColaboradorModel:
        colaborador = self.get(colaborador_id)
        return self.repo.update(colaborador, self._dados(payload, exclude_unset=True))

    def delete(self, colaborador_id: int) -> None:
        self.repo.delete(self.get(colaborador_id))

    def escala_semana(self) -> dict:
        """Colaboradores ativos agrupados por dia da semana da escala."""
        dias = {dia: [] for dia in DIAS_SEMANA}
        for c in self.repo.list(status="Ativo"):
            for dia in c.escala or []:
                if dia in dias:
                    dias[dia].append({
                        "id": c.id,
                        "nome": c.nome,
                        "funcao": c.funcao,
                        "horario_entrada": c.horario_entrada,
                        "horario_saida": c.horario_saida,
                    })
        return {"dias": dias}
