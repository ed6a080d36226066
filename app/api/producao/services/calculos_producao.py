"""
Cálculos puros de produção: resumo por sabor e plano de lotes/lista de compras.

As funções recebem objetos com os atributos dos models (pedidos com `itens`,
receitas com `ingredientes`) e não tocam no banco.
"""
from __future__ import annotations

import re
from collections import defaultdict
from decimal import Decimal, ROUND_CEILING
from typing import Iterable, Optional

from app.api.shared.schemas.schema_shared_enums import PedidoStatusEnum, TipoItemEnum
from app.utils.decimal_utils import dec_qtd, to_float

DIAMETRO_PADRAO = 15
DISCOS_POR_BOLO = 4
CAMADAS_POR_BOLO = 3
DISCOS_POR_LOTE_PADRAO = 4
GRAMAS_POR_CAMADA_PADRAO = 200
PESO_PANELA_PADRAO_G = 450

_RE_DIAMETRO = re.compile(r"(\d+)\s*cm", re.IGNORECASE)
_RE_SEPARADOR_RECHEIO = re.compile(r"\s*\+\s*")


def extrair_diametro(tamanho: Optional[str]) -> int:
    """'Bolo 20cm (serve 25)' -> 20. Sem match usa 15cm."""
    if not tamanho:
        return DIAMETRO_PADRAO
    m = _RE_DIAMETRO.search(tamanho)
    return int(m.group(1)) if m else DIAMETRO_PADRAO


def arredondar_decimo_acima(valor) -> Decimal:
    """ceil(x*10)/10 sem ruído de ponto flutuante."""
    d = Decimal(str(valor)) * 10
    return d.to_integral_value(rounding=ROUND_CEILING) / Decimal(10)


def separar_recheios(sabor_recheio: Optional[str]) -> list[str]:
    if not sabor_recheio:
        return []
    return [r.strip() for r in _RE_SEPARADOR_RECHEIO.split(sabor_recheio) if r.strip()]


def _ordenar_contagem(contagem: dict[str, int]) -> list[dict]:
    return [
        {"nome": nome, "quantidade": qtd}
        for nome, qtd in sorted(contagem.items(), key=lambda kv: (-kv[1], kv[0]))
    ]


def _pedidos_validos(pedidos: Iterable) -> list:
    return [p for p in pedidos if p.status != PedidoStatusEnum.CANCELADO.value]


def resumo_producao(pedidos: Iterable) -> dict:
    massas: dict[str, int] = defaultdict(int)
    recheios: dict[str, int] = defaultdict(int)
    total_itens = 0
    validos = _pedidos_validos(pedidos)

    for pedido in validos:
        for item in pedido.itens:
            qtd = int(item.quantidade or 0)
            total_itens += qtd
            if item.sabor_massa:
                massas[item.sabor_massa.strip()] += qtd
            for recheio in separar_recheios(item.sabor_recheio):
                recheios[recheio] += qtd

    return {
        "total_pedidos": len(validos),
        "total_itens": total_itens,
        "massas": _ordenar_contagem(massas),
        "recheios": _ordenar_contagem(recheios),
    }


def _mapa_por_nome(receitas: Iterable, tipo: str) -> dict:
    return {r.nome.strip().lower(): r for r in receitas if r.tipo == tipo}


def _discos_por_lote(receita, diametro: int) -> Decimal:
    for rend in receita.rendimento_por_diametro or []:
        if int(rend.get("diametro", 0)) == diametro and rend.get("quantidade_discos"):
            return Decimal(str(rend["quantidade_discos"]))
    return Decimal(DISCOS_POR_LOTE_PADRAO)


def _gramas_por_camada(recheio_por_camada: Optional[list], diametro: int) -> Decimal:
    for conf in recheio_por_camada or []:
        if int(conf.get("diametro", 0)) == diametro and conf.get("gramas"):
            return Decimal(str(conf["gramas"]))
    return Decimal(GRAMAS_POR_CAMADA_PADRAO)


def _acumular_ingredientes(lista: dict, receita, multiplicador: Decimal) -> None:
    for ri in receita.ingredientes:
        ing = ri.ingrediente
        if ing is None:
            continue
        entrada = lista.get(ing.id)
        if entrada is None:
            entrada = lista[ing.id] = {
                "ingrediente_id": ing.id,
                "nome": ing.nome,
                "categoria": ing.categoria or "Outros",
                "unidade": ing.unidade,
                "quantidade_total": Decimal("0"),
                "estoque_atual": dec_qtd(ing.estoque_atual),
            }
        entrada["quantidade_total"] += dec_qtd(ri.quantidade) * multiplicador


def gerar_plano_producao(pedidos: Iterable, receitas: Iterable, recheio_por_camada: Optional[list] = None) -> dict:
    """
    Monta o plano de produção.

    Massas: 4 discos por bolo, lotes = discos / discos por lote do diâmetro.
    Recheios: 3 camadas por bolo, peso = camadas x gramas por camada do diâmetro,
    panelas = peso / peso_total_g da receita. Sabores sem receita cadastrada
    aparecem com `receita_id` nulo e não entram na lista de compras.
    """
    receitas = list(receitas)
    massas_por_nome = _mapa_por_nome(receitas, "Massa")
    recheios_por_nome = _mapa_por_nome(receitas, "Recheio")

    # nome -> {"receita", "diametros": {d: {...}}}
    massas: dict[str, dict] = {}
    recheios: dict[str, dict] = {}

    for pedido in _pedidos_validos(pedidos):
        for item in pedido.itens:
            if item.tipo != TipoItemEnum.PRODUTO.value:
                continue
            qtd = int(item.quantidade or 0)
            diametro = extrair_diametro(item.tamanho)

            if item.sabor_massa:
                nome = item.sabor_massa.strip()
                receita = massas_por_nome.get(nome.lower())
                grupo = massas.setdefault(nome, {"receita": receita, "diametros": {}})
                linha = grupo["diametros"].setdefault(
                    diametro, {"diametro": diametro, "bolos": 0, "discos": 0, "lotes": Decimal("0")}
                )
                discos = DISCOS_POR_BOLO * qtd
                linha["bolos"] += qtd
                linha["discos"] += discos
                rendimento = _discos_por_lote(receita, diametro) if receita else Decimal(DISCOS_POR_LOTE_PADRAO)
                linha["lotes"] += Decimal(discos) / rendimento

            if item.sabor_recheio:
                nome = item.sabor_recheio.strip()
                receita = recheios_por_nome.get(nome.lower())
                grupo = recheios.setdefault(nome, {"receita": receita, "diametros": {}})
                linha = grupo["diametros"].setdefault(
                    diametro, {"diametro": diametro, "bolos": 0, "camadas": 0, "peso_g": Decimal("0")}
                )
                camadas = CAMADAS_POR_BOLO * qtd
                linha["bolos"] += qtd
                linha["camadas"] += camadas
                linha["peso_g"] += camadas * _gramas_por_camada(recheio_por_camada, diametro)

    lista: dict[int, dict] = {}
    saida_massas = []
    for nome in sorted(massas):
        grupo = massas[nome]
        receita = grupo["receita"]
        total_lotes = arredondar_decimo_acima(sum(l["lotes"] for l in grupo["diametros"].values()))
        if receita is not None:
            _acumular_ingredientes(lista, receita, total_lotes)
        saida_massas.append({
            "nome": nome,
            "receita_id": receita.id if receita else None,
            "total_lotes": to_float(total_lotes),
            "diametros": [
                {**l, "lotes": to_float(arredondar_decimo_acima(l["lotes"]))}
                for _, l in sorted(grupo["diametros"].items())
            ],
        })

    saida_recheios = []
    for nome in sorted(recheios):
        grupo = recheios[nome]
        receita = grupo["receita"]
        peso_panela = Decimal(str(receita.peso_total_g)) if receita and receita.peso_total_g else Decimal(PESO_PANELA_PADRAO_G)
        peso_total = sum((l["peso_g"] for l in grupo["diametros"].values()), Decimal("0"))
        total_panelas = arredondar_decimo_acima(peso_total / peso_panela)
        if receita is not None:
            _acumular_ingredientes(lista, receita, total_panelas)
        saida_recheios.append({
            "nome": nome,
            "receita_id": receita.id if receita else None,
            "peso_total_g": to_float(peso_total),
            "total_panelas": to_float(total_panelas),
            "diametros": [
                {**l, "peso_g": to_float(l["peso_g"])}
                for _, l in sorted(grupo["diametros"].items())
            ],
        })

    lista_compras = []
    for entrada in sorted(lista.values(), key=lambda e: (e["categoria"], e["nome"])):
        total = entrada["quantidade_total"]
        atual = entrada["estoque_atual"]
        lista_compras.append({
            **entrada,
            "quantidade_total": float(dec_qtd(total)),
            "estoque_atual": float(atual),
            "falta": float(dec_qtd(max(total - atual, Decimal("0")))),
            "insuficiente": total > atual,
        })

    return {"massas": saida_massas, "recheios": saida_recheios, "lista_compras": lista_compras}
