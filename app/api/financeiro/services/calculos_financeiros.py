"""Relatórios financeiros calculados em memória sobre registros já carregados."""
from __future__ import annotations

from calendar import monthrange
from collections import defaultdict
from datetime import date, timedelta
from decimal import Decimal
from typing import Iterable, Optional

from app.utils.decimal_utils import dec, to_float

CATEGORIAS_CUSTO_VARIAVEL = ["Ingredientes", "Embalagens", "Entregas", "Insumos", "Insumos Gerais", "Compras"]
TIPOS_CATEGORIA = ["Receita", "DespesaVariavel", "DespesaFixa"]


def inicio_fim_mes(ano: int, mes: int) -> tuple[date, date]:
    return date(ano, mes, 1), date(ano, mes, monthrange(ano, mes)[1])


def mes_anterior(ano: int, mes: int) -> tuple[int, int]:
    return (ano - 1, 12) if mes == 1 else (ano, mes - 1)


def proximo_mes(ano: int, mes: int) -> tuple[int, int]:
    return (ano + 1, 1) if mes == 12 else (ano, mes + 1)


def eh_custo_variavel(categoria_nome: Optional[str]) -> bool:
    if not categoria_nome:
        return False
    return any(nome in categoria_nome for nome in CATEGORIAS_CUSTO_VARIAVEL)


# ---------------- Fluxo de caixa ----------------
def fluxo_caixa_anual(ano: int, categorias: Iterable, transacoes: Iterable) -> dict:
    """
    Grade categoria x mês. Cada célula soma as transações da categoria no mês.
    Transações sem categoria ficam fora da grade.
    """
    categorias = list(categorias)
    celulas: dict[int, list[Decimal]] = {c.id: [Decimal("0.00")] * 12 for c in categorias}
    for t in transacoes:
        if t.data.year != ano or t.categoria_id not in celulas:
            continue
        celulas[t.categoria_id][t.data.month - 1] += dec(t.valor)

    totais = {tipo: [Decimal("0.00")] * 12 for tipo in TIPOS_CATEGORIA}
    linhas = []
    for c in sorted(categorias, key=lambda c: (TIPOS_CATEGORIA.index(c.tipo), c.nome)):
        valores = celulas[c.id]
        for i, v in enumerate(valores):
            totais[c.tipo][i] += v
        linhas.append({
            "categoria_id": c.id,
            "categoria": c.nome,
            "tipo": c.tipo,
            "valores": [to_float(v) for v in valores],
            "total": to_float(sum(valores)),
        })

    saldo = [
        totais["Receita"][i] - totais["DespesaVariavel"][i] - totais["DespesaFixa"][i]
        for i in range(12)
    ]
    return {
        "ano": ano,
        "meses": [f"{ano}-{m:02d}" for m in range(1, 13)],
        "linhas": linhas,
        "totais": {tipo: [to_float(v) for v in vals] for tipo, vals in totais.items()},
        "saldo": [to_float(v) for v in saldo],
        "saldo_anual": to_float(sum(saldo)),
    }


# ---------------- DRE ----------------
def _agrupar(transacoes: list) -> list[dict]:
    grupos: dict[str, Decimal] = defaultdict(lambda: Decimal("0.00"))
    for t in transacoes:
        grupos[t.categoria_nome or "Outros"] += dec(t.valor)
    return [
        {"categoria": nome, "valor": to_float(valor)}
        for nome, valor in sorted(grupos.items(), key=lambda kv: (-kv[1], kv[0]))
    ]


def calcular_dre(transacoes: Iterable, inicio: date, fim: date) -> dict:
    do_periodo = [t for t in transacoes if inicio <= t.data <= fim]
    receitas = [t for t in do_periodo if t.tipo == "Receita"]
    despesas = [t for t in do_periodo if t.tipo == "Despesa"]
    variaveis = [d for d in despesas if eh_custo_variavel(d.categoria_nome)]
    fixas = [d for d in despesas if not eh_custo_variavel(d.categoria_nome)]

    receita_bruta = sum((dec(t.valor) for t in receitas), Decimal("0.00"))
    impostos = Decimal("0.00")
    receita_liquida = receita_bruta - impostos
    total_variaveis = sum((dec(t.valor) for t in variaveis), Decimal("0.00"))
    margem = receita_liquida - total_variaveis
    total_fixas = sum((dec(t.valor) for t in fixas), Decimal("0.00"))
    resultado = margem - total_fixas

    return {
        "inicio": inicio.isoformat(),
        "fim": fim.isoformat(),
        "receita_bruta": to_float(receita_bruta),
        "impostos": to_float(impostos),
        "receita_liquida": to_float(receita_liquida),
        "custos_variaveis": _agrupar(variaveis),
        "total_custos_variaveis": to_float(total_variaveis),
        "margem_contribuicao": to_float(margem),
        "despesas_fixas": _agrupar(fixas),
        "total_despesas_fixas": to_float(total_fixas),
        "resultado_operacional": to_float(resultado),
        "lucro_liquido": to_float(resultado),
    }


def variacao_percentual(atual: float, anterior: float) -> int:
    if anterior == 0:
        return 100 if atual > 0 else 0
    return round((atual - anterior) / abs(anterior) * 100)


def comparar_dre(atual: dict, anterior: dict) -> dict:
    campos = [
        "receita_bruta", "receita_liquida", "total_custos_variaveis", "margem_contribuicao",
        "total_despesas_fixas", "resultado_operacional", "lucro_liquido",
    ]
    return {campo: variacao_percentual(atual[campo], anterior[campo]) for campo in campos}


# ---------------- Previsão ----------------
def janelas_previsao(hoje: date) -> dict[str, tuple[date, date]]:
    ano, mes = proximo_mes(hoje.year, hoje.month)
    return {
        "semana": (hoje, hoje + timedelta(days=7)),
        "duas_semanas": (hoje, hoje + timedelta(days=14)),
        "proximo_mes": inicio_fim_mes(ano, mes),
    }


def previsao_receitas(orcamentos: Iterable, pedidos: Iterable, contas_receber: Iterable, hoje: date) -> dict:
    """
    Receitas previstas por janela.
    Orçamentos aprovados contam pelo valor_total na data de entrega, pedidos em
    aberto pelo saldo pendente e contas a receber pendentes/parciais pelo saldo.
    """
    fontes = []
    for o in orcamentos:
        if o.status == "Aprovado" and o.data_entrega:
            fontes.append({
                "origem": "orcamento",
                "referencia_id": o.id,
                "cliente": o.cliente_nome or "Cliente",
                "descricao": f"Orç #{o.numero}",
                "valor": dec(o.valor_total),
                "data_prevista": o.data_entrega,
            })
    for p in pedidos:
        if p.status in ("Entregue", "Cancelado") or not p.data_entrega:
            continue
        fontes.append({
            "origem": "pedido",
            "referencia_id": p.id,
            "cliente": p.cliente_nome or "Cliente",
            "descricao": f"Pedido #{p.numero}",
            "valor": dec(p.saldo_pendente),
            "data_prevista": p.data_entrega,
        })
    for c in contas_receber:
        if c.status not in ("pendente", "parcial"):
            continue
        fontes.append({
            "origem": "conta",
            "referencia_id": c.id,
            "cliente": c.contraparte_nome,
            "descricao": c.descricao,
            "valor": dec(c.saldo_restante),
            "data_prevista": c.data_vencimento,
        })

    janelas = {}
    for nome, (inicio, fim) in janelas_previsao(hoje).items():
        itens = sorted(
            (f for f in fontes if inicio <= f["data_prevista"] <= fim),
            key=lambda f: (f["data_prevista"], f["origem"], f["referencia_id"]),
        )
        janelas[nome] = {
            "inicio": inicio.isoformat(),
            "fim": fim.isoformat(),
            "total": to_float(sum((f["valor"] for f in itens), Decimal("0.00"))),
            "itens": [
                {**f, "valor": to_float(f["valor"]), "data_prevista": f["data_prevista"].isoformat()}
                for f in itens
            ],
        }
    return janelas


# ---------------- Contas ----------------
def resumo_contas(contas: Iterable, hoje: date) -> dict:
    """Totais do mês corrente e previsão do próximo mês."""
    contas = list(contas)
    inicio, fim = inicio_fim_mes(hoje.year, hoje.month)
    prox_inicio, prox_fim = inicio_fim_mes(*proximo_mes(hoje.year, hoje.month))

    do_mes = [c for c in contas if inicio <= c.data_vencimento <= fim]
    abertas = [c for c in do_mes if c.status in ("pendente", "parcial")]
    pagas = [c for c in do_mes if c.status == "pago"]
    vencidas = [c for c in contas if c.status == "vencido"]
    proximas = [c for c in contas if prox_inicio <= c.data_vencimento <= prox_fim]

    def _total(lista, campo):
        return to_float(sum((dec(getattr(c, campo)) for c in lista), Decimal("0.00")))

    return {
        "total_aberto": _total(abertas, "saldo_restante"),
        "qtd_aberto": len(abertas),
        "total_pago": _total(pagas, "valor_total"),
        "qtd_pago": len(pagas),
        "total_vencido": _total(vencidas, "saldo_restante"),
        "qtd_vencido": len(vencidas),
        "previsto_proximo_mes": _total(proximas, "saldo_restante"),
        "qtd_previsto": len(proximas),
    }
