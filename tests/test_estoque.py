from decimal import Decimal

import pytest

from app.api.estoque.services.service_movimentacao import (
    EstoqueInsuficienteError,
    calcular_custo_medio,
    calcular_novo_estoque,
    formatar_quantidade,
)

BASE = "/api/estoque/admin"


def _ingrediente(client, **extra):
    dados = {"nome": "Leite", "unidade": "l", "categoria": "Laticínios", "estoque_atual": 10,
             "estoque_minimo": 4, "custo_unitario": 5}
    dados.update(extra)
    resp = client.post(f"{BASE}/ingredientes", json=dados)
    assert resp.status_code == 201, resp.text
    return resp.json()


def test_calculos_de_movimentacao():
    assert calcular_novo_estoque("Entrada", 10, 2.5) == Decimal("12.500")
    assert calcular_novo_estoque("Saida", 10, 4) == Decimal("6.000")
    assert calcular_novo_estoque("Ajuste", 10, 3) == Decimal("3.000")
    with pytest.raises(EstoqueInsuficienteError):
        calcular_novo_estoque("Saida", 1, 2)

    # (10 x 5 + 10 x 7) / 20 = 6
    assert calcular_custo_medio(10, 5, 10, 7) == Decimal("6.0000")
    assert calcular_custo_medio(0, None, 3, 8) == Decimal("8.0000")
    assert formatar_quantidade(Decimal("100.000")) == "100"
    assert formatar_quantidade(Decimal("2.500")) == "2.5"


def test_categorias_padrao_criadas_no_primeiro_acesso(client):
    nomes = [c["nome"] for c in client.get(f"{BASE}/categorias").json()]
    assert set(nomes) == {
        "Laticínios", "Secos", "Hortifruti", "Líquidos", "Embalagens",
        "Decoração", "Descartáveis", "Equipamentos", "Outros",
    }
    assert len(client.get(f"{BASE}/categorias").json()) == 9


def test_entrada_atualiza_estoque_custo_e_lanca_despesa(client):
    ing = _ingrediente(client)
    resp = client.post(f"{BASE}/movimentacoes", json={
        "ingrediente_id": ing["id"], "tipo": "Entrada", "quantidade": 10, "valor_unitario": 7,
        "lancar_despesa": True,
    })
    assert resp.status_code == 201, resp.text
    mov = resp.json()
    assert (mov["quantidade_anterior"], mov["quantidade_posterior"]) == (10.0, 20.0)
    assert mov["valor_total"] == 70.0

    atualizado = client.get(f"{BASE}/ingredientes/{ing['id']}").json()
    assert atualizado["estoque_atual"] == 20.0
    assert atualizado["custo_unitario"] == 7.0
    assert atualizado["custo_medio"] == 6.0
    assert atualizado["ultima_compra"] is not None

    despesas = client.get("/api/financeiro/admin/transacoes", params={"tipo": "Despesa"}).json()
    assert [(d["valor"], d["categoria_nome"]) for d in despesas] == [(70.0, "Ingredientes")]


def test_saida_maior_que_estoque(client):
    ing = _ingrediente(client, estoque_atual=2.5)
    resp = client.post(f"{BASE}/movimentacoes", json={"ingrediente_id": ing["id"], "tipo": "Saida", "quantidade": 3})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Estoque insuficiente para Leite. Disponível: 2.5 l"


def test_ajuste_e_alerta_de_estoque_baixo(client):
    ing = _ingrediente(client)
    client.post(f"{BASE}/movimentacoes", json={"ingrediente_id": ing["id"], "tipo": "Ajuste", "quantidade": 4})

    alertas = client.get(f"{BASE}/ingredientes/alertas").json()
    assert [a["id"] for a in alertas] == [ing["id"]]
    assert alertas[0]["estoque_baixo"] is True

    historico = client.get(f"{BASE}/movimentacoes", params={"ingrediente_id": ing["id"], "tipo": "Ajuste"}).json()
    assert len(historico) == 1
    assert historico[0]["quantidade_posterior"] == 4.0


def test_dashboard(client):
    _ingrediente(client, nome="Leite", estoque_atual=10, custo_unitario=5)
    _ingrediente(client, nome="Açúcar", unidade="kg", estoque_atual=1, estoque_minimo=2, custo_unitario=4.5)
    dash = client.get(f"{BASE}/dashboard").json()
    assert dash["valor_total_estoque"] == 54.5
    assert dash["total_itens"] == 2
    assert dash["itens_baixo_estoque"] == 1


def test_compra_de_adereco(client):
    adereco = client.post(f"{BASE}/aderecos", json={"nome": "Vela número", "preco": 3, "estoque": 1, "estoque_min": 2})
    assert adereco.status_code == 201, adereco.text
    adereco_id = adereco.json()["id"]
    assert [a["id"] for a in client.get(f"{BASE}/aderecos/alertas").json()] == [adereco_id]

    compra = client.post(f"{BASE}/aderecos/compras", json={"adereco_id": adereco_id, "quantidade": 5, "valor_unitario": 2.5})
    assert compra.status_code == 201, compra.text
    assert compra.json()["valor_total"] == 12.5
    assert client.get(f"{BASE}/aderecos/{adereco_id}").json()["estoque"] == 6

    despesas = client.get("/api/financeiro/admin/transacoes", params={"tipo": "Despesa"}).json()
    assert [(d["valor"], d["categoria_nome"]) for d in despesas] == [(12.5, "Compras")]
