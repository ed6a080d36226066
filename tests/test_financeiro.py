from datetime import date, timedelta
from types import SimpleNamespace as NS

from app.api.financeiro.models.model_conta import status_conta
from app.api.financeiro.services.calculos_financeiros import (
    calcular_dre,
    fluxo_caixa_anual,
    janelas_previsao,
    previsao_receitas,
    resumo_contas,
    variacao_percentual,
)
from app.api.financeiro.services.service_relatorio_financeiro import MENSAGEM_FLUXO_SOMENTE_LEITURA
from app.utils.database_utils import today_sp

BASE = "/api/financeiro/admin"


def _t(data, tipo, valor, categoria_nome=None, categoria_id=None):
    return NS(data=data, tipo=tipo, valor=valor, categoria_nome=categoria_nome, categoria_id=categoria_id)


# ---------------- cálculos ----------------
def test_status_conta():
    venc = date(2026, 10, 10)
    assert status_conta(100, 0, venc, hoje=date(2026, 10, 5)) == "pendente"
    assert status_conta(100, 0, venc, hoje=date(2026, 10, 11)) == "vencido"
    # parcial prevalece sobre vencido
    assert status_conta(100, 30, venc, hoje=date(2026, 10, 11)) == "parcial"
    assert status_conta(100, 100, venc, hoje=date(2026, 10, 11)) == "pago"


def test_dre_separa_custos_variaveis_e_fixos():
    out = [
        _t(date(2026, 9, 30), "Receita", 999, "Vendas"),
        _t(date(2026, 10, 2), "Receita", 1000, "Vendas"),
        _t(date(2026, 10, 3), "Receita", 200, "Encomendas"),
        _t(date(2026, 10, 4), "Despesa", 300, "Ingredientes"),
        _t(date(2026, 10, 5), "Despesa", 50, "Compras"),
        _t(date(2026, 10, 6), "Despesa", 400, "Aluguel"),
        _t(date(2026, 10, 7), "Despesa", 20, None),
    ]
    dre = calcular_dre(out, date(2026, 10, 1), date(2026, 10, 31))

    assert dre["receita_bruta"] == 1200.0
    assert dre["receita_liquida"] == 1200.0
    assert dre["custos_variaveis"] == [
        {"categoria": "Ingredientes", "valor": 300.0},
        {"categoria": "Compras", "valor": 50.0},
    ]
    assert dre["margem_contribuicao"] == 850.0
    assert dre["despesas_fixas"] == [{"categoria": "Aluguel", "valor": 400.0}, {"categoria": "Outros", "valor": 20.0}]
    assert dre["resultado_operacional"] == 430.0
    assert dre["lucro_liquido"] == 430.0


def test_variacao_percentual():
    assert variacao_percentual(150, 100) == 50
    assert variacao_percentual(-50, -100) == 50
    assert variacao_percentual(10, 0) == 100
    assert variacao_percentual(0, 0) == 0


def test_fluxo_caixa_anual():
    categorias = [NS(id=1, nome="Vendas", tipo="Receita"), NS(id=2, nome="Aluguel", tipo="DespesaFixa"),
                  NS(id=3, nome="Ingredientes", tipo="DespesaVariavel")]
    transacoes = [
        _t(date(2026, 1, 10), "Receita", 500, categoria_id=1),
        _t(date(2026, 1, 20), "Receita", 250, categoria_id=1),
        _t(date(2026, 1, 5), "Despesa", 300, categoria_id=2),
        _t(date(2026, 3, 5), "Despesa", 100, categoria_id=3),
        _t(date(2026, 3, 6), "Despesa", 80, categoria_id=None),
        _t(date(2025, 12, 31), "Receita", 1000, categoria_id=1),
    ]
    fluxo = fluxo_caixa_anual(2026, categorias, transacoes)

    assert [linha["categoria"] for linha in fluxo["linhas"]] == ["Vendas", "Ingredientes", "Aluguel"]
    assert fluxo["linhas"][0]["valores"][0] == 750.0
    assert fluxo["linhas"][0]["total"] == 750.0
    assert fluxo["saldo"][0] == 450.0
    assert fluxo["saldo"][2] == -100.0
    assert fluxo["saldo_anual"] == 350.0
    assert fluxo["meses"][0] == "2026-01"


def test_janelas_previsao():
    janelas = janelas_previsao(date(2026, 12, 20))
    assert janelas["semana"] == (date(2026, 12, 20), date(2026, 12, 27))
    assert janelas["duas_semanas"] == (date(2026, 12, 20), date(2027, 1, 3))
    assert janelas["proximo_mes"] == (date(2027, 1, 1), date(2027, 1, 31))


def test_previsao_receitas():
    hoje = date(2026, 10, 19)
    orcamentos = [
        NS(id=1, numero=7, status="Aprovado", cliente_nome="Ana", valor_total=300, data_entrega=date(2026, 10, 22)),
        NS(id=2, numero=8, status="Pendente", cliente_nome="Bia", valor_total=999, data_entrega=date(2026, 10, 22)),
    ]
    pedidos = [
        NS(id=5, numero=3, status="Em Produção", cliente_nome="Caio", saldo_pendente=80, data_entrega=date(2026, 10, 30)),
        NS(id=6, numero=4, status="Entregue", cliente_nome="Duda", saldo_pendente=50, data_entrega=date(2026, 10, 20)),
    ]
    contas = [
        NS(id=9, status="parcial", contraparte_nome="Buffet X", descricao="Festa", saldo_restante=120,
           data_vencimento=date(2026, 11, 10)),
        NS(id=10, status="pago", contraparte_nome="Buffet Y", descricao="Festa", saldo_restante=0,
           data_vencimento=date(2026, 10, 21)),
    ]
    previsao = previsao_receitas(orcamentos, pedidos, contas, hoje)

    assert previsao["semana"]["total"] == 300.0
    assert [i["descricao"] for i in previsao["semana"]["itens"]] == ["Orç #7"]
    assert previsao["duas_semanas"]["total"] == 380.0
    assert previsao["proximo_mes"]["total"] == 120.0
    assert previsao["proximo_mes"]["itens"][0]["origem"] == "conta"


def test_resumo_contas():
    hoje = date(2026, 10, 19)
    contas = [
        NS(status="pendente", data_vencimento=date(2026, 10, 25), saldo_restante=100, valor_total=100),
        NS(status="parcial", data_vencimento=date(2026, 10, 28), saldo_restante=40, valor_total=90),
        NS(status="pago", data_vencimento=date(2026, 10, 5), saldo_restante=0, valor_total=70),
        NS(status="vencido", data_vencimento=date(2026, 9, 30), saldo_restante=55, valor_total=55),
        NS(status="pendente", data_vencimento=date(2026, 11, 2), saldo_restante=30, valor_total=30),
    ]
    resumo = resumo_contas(contas, hoje)
    assert (resumo["total_aberto"], resumo["qtd_aberto"]) == (140.0, 2)
    assert (resumo["total_pago"], resumo["qtd_pago"]) == (70.0, 1)
    assert (resumo["total_vencido"], resumo["qtd_vencido"]) == (55.0, 1)
    assert (resumo["previsto_proximo_mes"], resumo["qtd_previsto"]) == (30.0, 1)


# ---------------- API ----------------
def _conta_receber(client, **extra):
    dados = {"contraparte_nome": "Buffet Estrela", "descricao": "Bolo casamento", "valor_total": 110,
             "data_vencimento": (today_sp() + timedelta(days=10)).isoformat()}
    dados.update(extra)
    resp = client.post(f"{BASE}/contas-receber", json=dados)
    assert resp.status_code == 201, resp.text
    return resp.json()


def test_pagamento_parcial_de_conta_a_receber(client):
    conta = _conta_receber(client)
    assert conta["status"] == "pendente"

    resp = client.post(f"{BASE}/contas-receber/{conta['id']}/pagamentos", json={"valor": 50, "forma_pagamento": "PIX"})
    assert resp.status_code == 200, resp.text
    conta = resp.json()
    assert conta["valor_pago"] == 50.0
    assert conta["saldo_restante"] == 60.0
    assert conta["status"] == "parcial"
    assert len(conta["pagamentos"]) == 1

    transacoes = client.get(f"{BASE}/transacoes").json()
    assert [(t["tipo"], t["valor"], t["conta_id"], t["categoria_nome"]) for t in transacoes] == [
        ("Receita", 50.0, conta["id"], "Outras Receitas")
    ]

    parciais = client.get(f"{BASE}/contas-receber", params={"status": "parcial"}).json()
    assert [c["id"] for c in parciais] == [conta["id"]]
    assert client.get(f"{BASE}/contas-pagar").json() == []


def test_pagamento_acima_do_saldo(client):
    conta = _conta_receber(client)
    resp = client.post(f"{BASE}/contas-receber/{conta['id']}/pagamentos", json={"valor": 200})
    assert resp.status_code == 400
    assert resp.json()["detail"].startswith("Valor excede o saldo restante")


def test_conta_a_pagar_sem_lancamento_no_caixa(client):
    resp = client.post(f"{BASE}/contas-pagar", json={
        "contraparte_nome": "Atacadão", "descricao": "Farinha", "valor_total": 80,
        "data_vencimento": (today_sp() - timedelta(days=1)).isoformat(),
    })
    conta = resp.json()
    assert conta["status"] == "vencido"

    pago = client.post(f"{BASE}/contas-pagar/{conta['id']}/pagamentos", json={"valor": 80, "lancar_fluxo_caixa": False})
    assert pago.json()["status"] == "pago"
    assert client.get(f"{BASE}/transacoes").json() == []


def test_conta_exige_contraparte(client):
    resp = client.post(f"{BASE}/contas-pagar", json={"descricao": "Sem dono", "valor_total": 10,
                                                      "data_vencimento": "2026-11-01"})
    assert resp.status_code == 422


def test_contraparte_incompativel_com_o_tipo_da_conta(client):
    dados = {"descricao": "Bolo", "valor_total": 10, "data_vencimento": "2026-11-01"}
    resp = client.post(f"{BASE}/contas-receber", json={**dados, "fornecedor_id": 99})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Conta a receber não aceita fornecedor"
    resp = client.post(f"{BASE}/contas-pagar", json={**dados, "cliente_id": 99})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Conta a pagar não aceita cliente"
    # tipo certo, cadastro inexistente
    assert client.post(f"{BASE}/contas-pagar", json={**dados, "fornecedor_id": 99}).status_code == 404


def test_update_de_conta_rejeita_nulo_em_campo_obrigatorio(client):
    conta = _conta_receber(client)
    for campo in ("descricao", "contraparte_nome", "valor_total", "data_vencimento"):
        resp = client.put(f"{BASE}/contas-receber/{conta['id']}", json={campo: None})
        assert resp.status_code == 422, campo
    resp = client.put(f"{BASE}/contas-receber/{conta['id']}", json={"observacoes": None, "descricao": "Bolo noivado"})
    assert resp.status_code == 200, resp.text
    assert resp.json()["descricao"] == "Bolo noivado"
    assert resp.status_code == 422


def test_fluxo_de_caixa_e_somente_leitura(client):
    categorias = client.get(f"{BASE}/categorias").json()
    vendas = next(c for c in categorias if c["nome"] == "Vendas")
    resp = client.put(f"{BASE}/fluxo-caixa/{vendas['id']}/2026-10", json={"valor": 500})
    assert resp.status_code == 400
    assert resp.json()["detail"] == MENSAGEM_FLUXO_SOMENTE_LEITURA


def test_fluxo_de_caixa_reflete_transacoes(client):
    categorias = client.get(f"{BASE}/categorias").json()
    vendas = next(c for c in categorias if c["nome"] == "Vendas")
    client.post(f"{BASE}/transacoes", json={"tipo": "Receita", "descricao": "Balcão", "valor": 320,
                                            "data": "2026-03-15", "categoria_id": vendas["id"]})

    fluxo = client.get(f"{BASE}/fluxo-caixa", params={"ano": 2026}).json()
    linha = next(linha for linha in fluxo["linhas"] if linha["categoria_id"] == vendas["id"])
    assert linha["valores"][2] == 320.0
    assert fluxo["saldo_anual"] == 320.0


def test_dre_comparativo_pela_api(client):
    client.post(f"{BASE}/transacoes", json={"tipo": "Receita", "descricao": "Set", "valor": 100, "data": "2026-09-10"})
    client.post(f"{BASE}/transacoes", json={"tipo": "Receita", "descricao": "Out", "valor": 150, "data": "2026-10-10"})

    dre = client.get(f"{BASE}/dre", params={"ano": 2026, "mes": 10, "comparar": True}).json()
    assert dre["atual"]["receita_bruta"] == 150.0
    assert dre["anterior"]["receita_bruta"] == 100.0
    assert dre["variacao"]["receita_bruta"] == 50


def test_categorias_padrao_ficam_completas_apos_lancamento_automatico(client):
    conta = _conta_receber(client)
    client.post(f"{BASE}/contas-receber/{conta['id']}/pagamentos", json={"valor": 10})
    nomes = {c["nome"] for c in client.get(f"{BASE}/categorias").json()}
    assert {"Vendas", "Ingredientes", "Aluguel", "Outras Receitas"} <= nomes
