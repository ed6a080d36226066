from decimal import Decimal
from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.api.estoque.models.model_estoque import MovimentacaoEstoqueModel
from app.api.estoque.repositories.repo_estoque import IngredienteRepository, MovimentacaoRepository
from app.api.estoque.schemas.schema_estoque import MovimentacaoIn, TipoMovimentacao
from app.utils.database_utils import today_sp
from app.utils.decimal_utils import dec, dec_qtd
from app.utils.logger import logger


class EstoqueInsuficienteError(ValueError):
    pass


def formatar_quantidade(valor) -> str:
    """100.000 -> '100', 2.500 -> '2.5'"""
    d = Decimal(str(valor or 0)).normalize()
    return format(d, "f")


def calcular_custo_medio(atual, custo_medio_anterior, quantidade, valor_unitario) -> Decimal:
    """
    Custo médio ponderado após uma entrada:
    (atual x custo_medio_anterior + qtd x valor_unitario) / (atual + qtd).
    Sem custo médio anterior, usa o valor unitário da entrada.
    """
    atual = Decimal(str(atual or 0))
    qtd = Decimal(str(quantidade or 0))
    unit = Decimal(str(valor_unitario or 0))
    if custo_medio_anterior is None:
        return unit.quantize(Decimal("0.0001"))
    novo = atual + qtd
    if novo <= 0:
        return unit.quantize(Decimal("0.0001"))
    medio = (atual * Decimal(str(custo_medio_anterior)) + qtd * unit) / novo
    return medio.quantize(Decimal("0.0001"))


def calcular_novo_estoque(tipo: str, atual, quantidade) -> Decimal:
    """
    Entrada soma, Saida subtrai (erro se faltar) e Ajuste define o valor absoluto.
    """
    atual = dec_qtd(atual)
    qtd = dec_qtd(quantidade)
    if tipo == TipoMovimentacao.ENTRADA.value:
        return atual + qtd
    if tipo == TipoMovimentacao.SAIDA.value:
        if qtd > atual:
            raise EstoqueInsuficienteError()
        return atual - qtd
    return qtd


class MovimentacaoService:
    def __init__(self, db: Session, empresa_id: int, usuario: Optional[str] = None):
        self.db = db
        self.empresa_id = empresa_id
        self.usuario = usuario
        self.repo = MovimentacaoRepository(db, empresa_id)
        self.ingredientes = IngredienteRepository(db, empresa_id)

    def list(self, ingrediente_id=None, tipo=None, data_inicio=None, data_fim=None):
        return self.repo.list(ingrediente_id=ingrediente_id, tipo=tipo, data_inicio=data_inicio, data_fim=data_fim)

    def registrar(self, payload: MovimentacaoIn) -> MovimentacaoEstoqueModel:
        ingrediente = self.ingredientes.get(payload.ingrediente_id)
        if not ingrediente:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Ingrediente não encontrado")

        tipo = payload.tipo.value
        if tipo != TipoMovimentacao.AJUSTE.value and payload.quantidade <= 0:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "Quantidade deve ser maior que zero")

        anterior = dec_qtd(ingrediente.estoque_atual)
        try:
            posterior = calcular_novo_estoque(tipo, anterior, payload.quantidade)
        except EstoqueInsuficienteError:
            raise HTTPException(
                status.HTTP_400_BAD_REQUEST,
                f"Estoque insuficiente para {ingrediente.nome}. "
                f"Disponível: {formatar_quantidade(anterior)} {ingrediente.unidade}",
            )

        mov = MovimentacaoEstoqueModel(
            ingrediente_id=ingrediente.id,
            tipo=tipo,
            quantidade=dec_qtd(payload.quantidade),
            quantidade_anterior=anterior,
            quantidade_posterior=posterior,
            motivo=payload.motivo,
            pedido_id=payload.pedido_id,
            nota_fiscal=payload.nota_fiscal,
            fornecedor_id=payload.fornecedor_id,
            usuario=self.usuario,
            observacoes=payload.observacoes,
        )

        if tipo == TipoMovimentacao.ENTRADA.value:
            valor_unitario = (
                payload.valor_unitario if payload.valor_unitario is not None else ingrediente.custo_unitario
            )
            ingrediente.custo_medio = calcular_custo_medio(
                anterior, ingrediente.custo_medio, payload.quantidade, valor_unitario
            )
            ingrediente.custo_unitario = valor_unitario
            ingrediente.ultima_compra = today_sp()
            if payload.fornecedor_id:
                ingrediente.fornecedor_id = payload.fornecedor_id
            mov.valor_unitario = valor_unitario
            mov.valor_total = dec(Decimal(str(valor_unitario or 0)) * Decimal(str(payload.quantidade)))

        ingrediente.estoque_atual = posterior
        self.repo.add(mov)

        if tipo == TipoMovimentacao.ENTRADA.value and payload.lancar_despesa and mov.valor_total:
            from app.api.financeiro.services.service_transacao import TransacaoService

            TransacaoService(self.db, self.empresa_id).lancar(
                tipo="Despesa",
                descricao=f"Compra de {ingrediente.nome}",
                valor=mov.valor_total,
                data=today_sp(),
                categoria_nome="Ingredientes",
            )

        self.db.commit()
        self.db.refresh(mov)
        logger.info(
            f"[Estoque] {tipo} - {ingrediente.nome}: {formatar_quantidade(anterior)} -> {formatar_quantidade(posterior)}"
        )
        return mov
