from datetime import date, timedelta
from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.api.pedidos.repositories.repo_pedidos import PedidoRepository
from app.api.pedidos.services.service_pedido_helpers import inicio_semana
from app.api.producao.models.model_config_producao import ConfigProducaoModel, RECHEIO_POR_CAMADA_PADRAO
from app.api.producao.repositories.repo_receita import ConfigProducaoRepository, ReceitaRepository
from app.api.producao.schemas.schema_producao import ConfigProducaoIn
from app.api.producao.services.calculos_producao import gerar_plano_producao, resumo_producao
from app.api.shared.schemas.schema_shared_enums import PedidoStatusEnum
from app.utils.database_utils import today_sp


class ProducaoService:
    def __init__(self, db: Session, empresa_id: int):
        self.db = db
        self.empresa_id = empresa_id
        self.config_repo = ConfigProducaoRepository(db, empresa_id)

    # ------------- Configuração -------------
    def get_config(self) -> ConfigProducaoModel:
        config = self.config_repo.get()
        if config is None:
            config = self.config_repo.add(
                ConfigProducaoModel(
                    recheio_por_camada=[dict(c) for c in RECHEIO_POR_CAMADA_PADRAO],
                    antecedencia_minima=2,
                )
            )
            self.db.commit()
        return config

    def atualizar_config(self, payload: ConfigProducaoIn) -> ConfigProducaoModel:
        config = self.get_config()
        data = payload.model_dump(mode="json", exclude_unset=True, exclude_none=True)
        if "recheio_por_camada" in data:
            config.recheio_por_camada = sorted(data.pop("recheio_por_camada"), key=lambda c: c["diametro"])
        for key, value in data.items():
            setattr(config, key, value)
        self.db.commit()
        return config

    # ------------- Relatórios -------------
    @staticmethod
    def _periodo(inicio: Optional[date], fim: Optional[date]) -> tuple[date, date]:
        """Sem datas, usa a semana corrente (segunda a domingo)."""
        if inicio is None:
            inicio = inicio_semana(today_sp())
        if fim is None:
            fim = inicio + timedelta(days=6)
        if fim < inicio:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "Data final anterior à inicial")
        return inicio, fim

    def _pedidos(self, inicio: date, fim: date):
        return PedidoRepository(self.db, self.empresa_id).list_pedidos(
            data_inicio=inicio,
            data_fim=fim,
            excluir_status=[PedidoStatusEnum.CANCELADO.value],
        )

    def resumo(self, inicio: Optional[date] = None, fim: Optional[date] = None) -> dict:
        inicio, fim = self._periodo(inicio, fim)
        return {"inicio": inicio.isoformat(), "fim": fim.isoformat(), **resumo_producao(self._pedidos(inicio, fim))}

    def plano(self, inicio: Optional[date] = None, fim: Optional[date] = None) -> dict:
        inicio, fim = self._periodo(inicio, fim)
        receitas = ReceitaRepository(self.db, self.empresa_id).list()
        plano = gerar_plano_producao(
            self._pedidos(inicio, fim),
            receitas,
            self.get_config().recheio_por_camada,
        )
        return {"inicio": inicio.isoformat(), "fim": fim.isoformat(), **plano}
