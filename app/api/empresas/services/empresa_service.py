from datetime import timedelta
from decimal import Decimal

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.api.empresas.models.empresa_model import EmpresaModel
from app.api.empresas.repositories.empresa_repo import EmpresaRepository
from app.api.empresas.schemas.schema_empresa import (
    ConfiguracoesNegocio,
    ConfiguracoesOut,
    ConfiguracoesUpdate,
    EmpresaUpdate,
    HorariosSchema,
    TaxaEntregaConfig,
    TermosSchema,
)
from app.config.settings import TRIAL_PERIOD_DAYS
from app.utils.database_utils import today_sp
from app.utils.decimal_utils import dec, to_float
from app.utils.logger import logger
from app.utils.slug_utils import make_unique_slug

TERMOS_PADRAO = {
    "pagamento": "50% no ato da encomenda e 50% na entrega ou retirada.",
    "cancelamento": "Cancelamentos com menos de 7 dias da entrega não têm reembolso do sinal.",
    "cuidados": "Manter refrigerado e consumir em até 3 dias.",
    "transporte": "Transportar em superfície plana, sem exposição ao sol.",
    "importante": "",
}


class EmpresaService:
    def __init__(self, db: Session):
        self.repo = EmpresaRepository(db)

    def get(self, empresa_id: int) -> EmpresaModel:
        empresa = self.repo.get_by_id(empresa_id)
        if not empresa:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Empresa não encontrada")
        return empresa

    def criar(self, nome: str, **dados) -> EmpresaModel:
        slug = make_unique_slug(nome, self.repo.slug_exists)
        empresa = EmpresaModel(
            nome=nome,
            slug=slug,
            plano="trial",
            trial_ate=today_sp() + timedelta(days=TRIAL_PERIOD_DAYS),
            termos=dict(TERMOS_PADRAO),
            **dados,
        )
        logger.info(f"[Empresas] Criando empresa slug={slug}")
        return self.repo.create(empresa)

    def update(self, empresa_id: int, payload: EmpresaUpdate) -> EmpresaModel:
        empresa = self.get(empresa_id)
        return self.repo.update(empresa, payload.model_dump(exclude_unset=True))

    # ---------------- Configurações ----------------
    def get_configuracoes(self, empresa_id: int) -> ConfiguracoesOut:
        empresa = self.get(empresa_id)
        return ConfiguracoesOut(
            negocio=ConfiguracoesNegocio(
                prazo_minimo_pedidos=empresa.prazo_minimo_pedidos,
                prazo_cancelamento=empresa.prazo_cancelamento,
                taxa_entrega=TaxaEntregaConfig(
                    valor_fixo=to_float(empresa.taxa_entrega_valor_fixo),
                    distancia_maxima_fixa=float(empresa.taxa_entrega_distancia_maxima_fixa or 0),
                    valor_por_km=to_float(empresa.taxa_entrega_valor_por_km),
                ),
                raio_maximo_entrega=(
                    float(empresa.raio_maximo_entrega) if empresa.raio_maximo_entrega is not None else None
                ),
                horarios=HorariosSchema(**(empresa.horarios_funcionamento or {})),
            ),
            termos=TermosSchema(**{**TERMOS_PADRAO, **(empresa.termos or {})}),
        )

    def update_configuracoes(self, empresa_id: int, payload: ConfiguracoesUpdate) -> ConfiguracoesOut:
        empresa = self.get(empresa_id)
        data = {}
        if payload.negocio is not None:
            negocio = payload.negocio
            data.update(
                prazo_minimo_pedidos=negocio.prazo_minimo_pedidos,
                prazo_cancelamento=negocio.prazo_cancelamento,
                taxa_entrega_valor_fixo=dec(negocio.taxa_entrega.valor_fixo),
                taxa_entrega_distancia_maxima_fixa=dec(negocio.taxa_entrega.distancia_maxima_fixa),
                taxa_entrega_valor_por_km=dec(negocio.taxa_entrega.valor_por_km),
                raio_maximo_entrega=(
                    dec(negocio.raio_maximo_entrega) if negocio.raio_maximo_entrega is not None else None
                ),
                horarios_funcionamento=negocio.horarios.model_dump(),
            )
        if payload.termos is not None:
            data["termos"] = payload.termos.model_dump()
        if data:
            self.repo.update(empresa, data)
        return self.get_configuracoes(empresa_id)

    def get_termos(self, empresa_id: int) -> dict:
        empresa = self.get(empresa_id)
        return {**TERMOS_PADRAO, **(empresa.termos or {})}

    def calcular_taxa_entrega(self, empresa_id: int, distancia_km: float) -> Decimal:
        """
        Até a distância máxima fixa cobra o valor fixo; acima dela soma
        valor_por_km para cada km excedente.
        """
        empresa = self.get(empresa_id)
        distancia = Decimal(str(distancia_km))
        if empresa.raio_maximo_entrega is not None and distancia > Decimal(str(empresa.raio_maximo_entrega)):
            raise HTTPException(
                status.HTTP_400_BAD_REQUEST,
                f"Endereço fora do raio de entrega ({empresa.raio_maximo_entrega} km)",
            )
        fixo = dec(empresa.taxa_entrega_valor_fixo)
        limite = Decimal(str(empresa.taxa_entrega_distancia_maxima_fixa or 0))
        if distancia <= limite:
            return fixo
        return dec(fixo + (distancia - limite) * dec(empresa.taxa_entrega_valor_por_km))
