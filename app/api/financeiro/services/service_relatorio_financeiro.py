from datetime import date
from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.api.financeiro.repositories.repo_financeiro import ContaRepository, TransacaoRepository
from app.api.financeiro.services.calculos_financeiros import (
    calcular_dre,
    comparar_dre,
    fluxo_caixa_anual,
    inicio_fim_mes,
    mes_anterior,
    previsao_receitas,
)
from app.api.financeiro.services.service_transacao import CategoriaFinanceiraService
from app.api.orcamentos.repositories.repo_orcamento import OrcamentoRepository
from app.api.pedidos.repositories.repo_pedidos import PedidoRepository, STATUS_FECHADOS
from app.utils.database_utils import today_sp
from app.utils.decimal_utils import soma, to_float

MENSAGEM_FLUXO_SOMENTE_LEITURA = "Para alterar valores, registre uma nova Receita ou Despesa na tela principal."


class RelatorioFinanceiroService:
    def __init__(self, db: Session, empresa_id: int):
        self.db = db
        self.empresa_id = empresa_id
        self.transacoes = TransacaoRepository(db, empresa_id)

    def fluxo_caixa(self, ano: Optional[int] = None) -> dict:
        ano = ano or today_sp().year
        categorias = CategoriaFinanceiraService(self.db, self.empresa_id).list()
        transacoes = self.transacoes.list(data_inicio=date(ano, 1, 1), data_fim=date(ano, 12, 31))
        return fluxo_caixa_anual(ano, categorias, transacoes)

    def alterar_celula_fluxo(self, *_args, **_kwargs):
        # a grade é derivada das transações
        raise HTTPException(status.HTTP_400_BAD_REQUEST, MENSAGEM_FLUXO_SOMENTE_LEITURA)

    def dre(self, ano: Optional[int] = None, mes: Optional[int] = None, comparar: bool = False) -> dict:
        hoje = today_sp()
        ano = ano or hoje.year
        mes = mes or hoje.month
        ano_ant, mes_ant = mes_anterior(ano, mes)
        inicio_ant, _ = inicio_fim_mes(ano_ant, mes_ant)
        inicio, fim = inicio_fim_mes(ano, mes)

        transacoes = self.transacoes.list(data_inicio=inicio_ant if comparar else inicio, data_fim=fim)
        atual = calcular_dre(transacoes, inicio, fim)
        if not comparar:
            return {"atual": atual}
        anterior = calcular_dre(transacoes, *inicio_fim_mes(ano_ant, mes_ant))
        return {"atual": atual, "anterior": anterior, "variacao": comparar_dre(atual, anterior)}

    def previsao(self) -> dict:
        hoje = today_sp()
        orcamentos = OrcamentoRepository(self.db, self.empresa_id).list_aprovados()
        pedidos = PedidoRepository(self.db, self.empresa_id).list_pedidos(
            data_inicio=hoje, excluir_status=STATUS_FECHADOS
        )
        contas = ContaRepository(self.db, self.empresa_id, "receber").list()
        return previsao_receitas(orcamentos, pedidos, contas, hoje)

    def dashboard(self) -> dict:
        hoje = today_sp()
        inicio, fim = inicio_fim_mes(hoje.year, hoje.month)
        do_mes = self.transacoes.list(data_inicio=inicio, data_fim=fim)
        receitas = soma(t.valor for t in do_mes if t.tipo == "Receita")
        despesas = soma(t.valor for t in do_mes if t.tipo == "Despesa")

        def _aberto(tipo: str):
            contas = ContaRepository(self.db, self.empresa_id, tipo).list()
            return to_float(soma(c.saldo_restante for c in contas if c.status != "pago"))

        return {
            "receitas_mes": to_float(receitas),
            "despesas_mes": to_float(despesas),
            "saldo_mes": to_float(receitas - despesas),
            "a_receber_aberto": _aberto("receber"),
            "a_pagar_aberto": _aberto("pagar"),
            "recentes": self.transacoes.list(limit=10),
        }
