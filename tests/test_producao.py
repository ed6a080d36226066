from datetime import timedelta
from types import SimpleNamespace as NS

from app.api.producao.services.calculos_producao import (
    arredondar_decimo_acima,
    extrair_diametro,
    gerar_plano_producao,
    resumo_producao,
    separar_recheios,
)
from app.utils.database_utils import today_sp

BASE = "/api/producao/admin"


def _item(massa=None, recheio=None, quantidade=1, tamanho=None, tipo="Produto"):
    return NS(tipo=tipo, sabor_massa=massa, sabor_recheio=recheio, quantidade=quantidade, tamanho=tamanho)


def _pedido(*itens, status="Aguardando Produção"):
    return NS(status=status, itens=list(itens))


def _ingrediente(id, nome, categoria, estoque, unidade="g"):
    return NS(id=id, nome=nome, categoria=categoria, unidade=unidade, estoque_atual=estoque)


def test_helpers():
    assert extrair_diametro("Bolo 20cm (serve 25)") == 20
    assert extrair_diametro("Bolo 23 cm") == 23
    assert extrair_diametro("Grande") == 15
    assert extrair_diametro(None) == 15
    assert separar_recheios("Ninho + Morango") == ["Ninho", "Morango"]
    assert separar_recheios("Ninho+Morango  +  Nutella") == ["Ninho", "Morango", "Nutella"]
    assert float(arredondar_decimo_acima(3.2666)) == 3.3
    assert float(arredondar_decimo_acima(2.0)) == 2.0
    assert float(arredondar_decimo_acima(0.30000000000000004)) == 0.4


def test_resumo_conta_sabores_e_divide_recheios_compostos():
    pedidos = [
        _pedido(_item("Baunilha", "Ninho + Morango", 2), _item(tipo="Adicional", quantidade=1)),
        _pedido(_item("Chocolate", "Morango", 1)),
        _pedido(_item("Chocolate", "Ninho", 5), status="Cancelado"),
    ]
    resumo = resumo_producao(pedidos)

    assert resumo["total_pedidos"] == 2
    assert resumo["total_itens"] == 4
    assert resumo["massas"] == [{"nome": "Baunilha", "quantidade": 2}, {"nome": "Chocolate", "quantidade": 1}]
    assert resumo["recheios"] == [{"nome": "Morango", "quantidade": 3}, {"nome": "Ninho", "quantidade": 2}]


def test_plano_lotes_panelas_e_lista_de_compras():
    farinha = _ingrediente(1, "Farinha", "Secos", 1000)
    leite = _ingrediente(2, "Leite condensado", "Laticínios", 0)
    massa = NS(
        id=10, nome="Chocolate", tipo="Massa", peso_total_g=None,
        rendimento_por_diametro=[{"diametro": 20, "quantidade_discos": 8}],
        ingredientes=[NS(ingrediente=farinha, quantidade=500)],
    )
    recheio = NS(
        id=20, nome="Brigadeiro", tipo="Recheio", peso_total_g=900, rendimento_por_diametro=[],
        ingredientes=[NS(ingrediente=leite, quantidade=395)],
    )
    pedidos = [
        _pedido(_item("Chocolate", "Brigadeiro", 2, "20cm"), _item("Chocolate", "Brigadeiro", 1, "Adicional", tipo="Adicional")),
        _pedido(_item("chocolate", "brigadeiro", 1, "Bolo 15cm")),
        _pedido(_item("Chocolate", "Brigadeiro", 9, "20cm"), status="Cancelado"),
    ]

    plano = gerar_plano_producao(pedidos, [massa, recheio], [{"diametro": 20, "gramas": 390}])

    massas = {m["nome"]: m for m in plano["massas"]}
    # 20cm: 8 discos / 8 por lote; "chocolate" minúsculo casa a mesma receita
    assert massas["Chocolate"]["receita_id"] == 10
    assert massas["Chocolate"]["total_lotes"] == 1.0
    assert massas["chocolate"]["receita_id"] == 10
    assert massas["chocolate"]["diametros"] == [{"diametro": 15, "bolos": 1, "discos": 4, "lotes": 1.0}]

    recheios = {r["nome"]: r for r in plano["recheios"]}
    # 2 bolos x 3 camadas x 390g = 2340g -> 2340/900 = 2.6 panelas
    assert recheios["Brigadeiro"]["peso_total_g"] == 2340.0
    assert recheios["Brigadeiro"]["total_panelas"] == 2.6
    # 15cm sem configuração: 3 camadas x 200g = 600g -> 0.666 -> 0.7
    assert recheios["brigadeiro"]["total_panelas"] == 0.7

    compras = plano["lista_compras"]
    assert [c["nome"] for c in compras] == ["Leite condensado", "Farinha"]
    leite_c, farinha_c = compras
    assert leite_c["quantidade_total"] == 1303.5  # 395g x 3.3 panelas
    assert leite_c["insuficiente"] is True
    assert leite_c["falta"] == leite_c["quantidade_total"]
    assert farinha_c["quantidade_total"] == 1000.0
    assert farinha_c["insuficiente"] is False
    assert farinha_c["falta"] == 0.0


def test_plano_sem_receita_nao_gera_compras():
    plano = gerar_plano_producao([_pedido(_item("Red Velvet", "Cream cheese", 1, "18cm"))], [])
    assert plano["massas"][0]["receita_id"] is None
    assert plano["massas"][0]["total_lotes"] == 1.0
    assert plano["recheios"][0]["total_panelas"] == 1.4  # 600g / 450g
    assert plano["lista_compras"] == []


# ---------------- API ----------------
def test_configuracao_padrao_e_atualizacao(client):
    config = client.get(f"{BASE}/configuracoes").json()
    assert {c["diametro"]: c["gramas"] for c in config["recheio_por_camada"]} == {
        13: 165, 15: 220, 18: 280, 20: 390, 23: 480, 25: 550,
    }
    assert config["antecedencia_minima"] == 2

    resp = client.put(f"{BASE}/configuracoes", json={"antecedencia_minima": 4})
    assert resp.json()["antecedencia_minima"] == 4
    assert len(resp.json()["recheio_por_camada"]) == 6


def test_receita_valida_ingredientes(client):
    ing = client.post("/api/estoque/admin/ingredientes", json={"nome": "Cacau", "unidade": "g"}).json()
    base = {"nome": "Chocolate", "tipo": "Massa"}

    inexistente = client.post(f"{BASE}/receitas", json={**base, "ingredientes": [{"ingrediente_id": 999, "quantidade": 1}]})
    assert inexistente.status_code == 404

    repetido = client.post(f"{BASE}/receitas", json={**base, "ingredientes": [
        {"ingrediente_id": ing["id"], "quantidade": 1}, {"ingrediente_id": ing["id"], "quantidade": 2},
    ]})
    assert repetido.status_code == 400


def test_plano_pela_api(client):
    ovo = client.post("/api/estoque/admin/ingredientes", json={
        "nome": "Ovo", "unidade": "un", "categoria": "Hortifruti", "estoque_atual": 2,
    }).json()
    receita = client.post(f"{BASE}/receitas", json={
        "nome": "Baunilha", "tipo": "Massa",
        "rendimento_por_diametro": [{"diametro": 20, "quantidade_discos": 4}],
        "ingredientes": [{"ingrediente_id": ovo["id"], "quantidade": 6}],
    })
    assert receita.status_code == 201, receita.text
    assert receita.json()["ingredientes"][0]["ingrediente_nome"] == "Ovo"

    entrega = today_sp() + timedelta(days=1)
    client.post("/api/pedidos/admin", json={
        "cliente_nome": "Carla", "data_entrega": entrega.isoformat(),
        "itens": [{"nome": "Bolo", "tamanho": "20cm", "sabor_massa": "Baunilha",
                   "sabor_recheio": "Ninho + Nutella", "quantidade": 1, "preco_unitario": 150}],
    })
    params = {"inicio": entrega.isoformat(), "fim": entrega.isoformat()}

    resumo = client.get(f"{BASE}/resumo", params=params).json()
    assert resumo["massas"] == [{"nome": "Baunilha", "quantidade": 1}]
    assert {r["nome"] for r in resumo["recheios"]} == {"Ninho", "Nutella"}

    plano = client.get(f"{BASE}/plano", params=params).json()
    assert plano["massas"][0]["total_lotes"] == 1.0
    assert plano["lista_compras"] == [{
        "ingrediente_id": ovo["id"], "nome": "Ovo", "categoria": "Hortifruti", "unidade": "un",
        "quantidade_total": 6.0, "estoque_atual": 2.0, "falta": 4.0, "insuficiente": True,
    }]


def test_periodo_invertido(client):
    resp = client.get(f"{BASE}/resumo", params={"inicio": "2026-10-20", "fim": "2026-10-01"})
    assert resp.status_code == 400
