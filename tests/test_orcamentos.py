from datetime import timedelta

from app.utils.database_utils import today_sp

BASE = "/api/orcamentos/admin"


def _orcamento(client, **extra):
    dados = {
        "cliente_nome": "Joana Prado",
        "cliente_telefone": "11912345678",
        "data_entrega": (today_sp() + timedelta(days=5)).isoformat(),
        "tipo_entrega": "Entrega",
        "taxa_entrega": 10,
        "decoracao_descricao": "Flores de buttercream",
        "itens": [{"nome": "Bolo Festa", "tamanho": "15cm", "sabor_massa": "Baunilha",
                   "sabor_recheio": "Ninho + Morango", "quantidade": 1, "preco_unitario": 100}],
    }
    dados.update(extra)
    resp = client.post(BASE, json=dados)
    assert resp.status_code == 201, resp.text
    return resp.json()


def test_criar_orcamento_total_e_termos_padrao(client):
    orc = _orcamento(client)
    assert orc["valor_total"] == 110.0
    assert orc["status"] == "Pendente"
    assert orc["numero"] == 1
    assert orc["termos"]["pagamento"].startswith("50%")
    assert orc["historico"][0]["acao"] == "Orçamento criado"


def test_aprovar_gera_exatamente_um_pedido(client):
    orc = _orcamento(client)
    resp = client.post(f"{BASE}/{orc['id']}/aprovar")
    assert resp.status_code == 200, resp.text
    aprovacao = resp.json()
    assert aprovacao["orcamento"]["status"] == "Aprovado"
    assert aprovacao["orcamento"]["pedido_id"] == aprovacao["pedido_id"]

    pedidos = client.get("/api/pedidos/admin").json()
    assert len(pedidos) == 1
    pedido = pedidos[0]
    assert pedido["id"] == aprovacao["pedido_id"]
    assert pedido["orcamento_id"] == orc["id"]
    assert pedido["status"] == "Pagamento Pendente"
    assert pedido["cliente_nome"] == "Joana Prado"
    assert pedido["valor_total"] == 110.0
    assert pedido["tipo_entrega"] == "Entrega"
    assert pedido["decoracao_descricao"] == "Flores de buttercream"
    assert [(i["nome"], i["sabor_recheio"], i["subtotal"]) for i in pedido["itens"]] == [
        ("Bolo Festa", "Ninho + Morango", 100.0)
    ]

    segunda = client.post(f"{BASE}/{orc['id']}/aprovar")
    assert segunda.status_code == 400
    assert len(client.get("/api/pedidos/admin").json()) == 1


def test_pagamento_parcial_no_pedido_do_orcamento(client):
    orc = _orcamento(client)
    pedido_id = client.post(f"{BASE}/{orc['id']}/aprovar").json()["pedido_id"]

    pedido = client.post(f"/api/pedidos/admin/{pedido_id}/pagamentos", json={"valor": 50}).json()
    assert pedido["valor_total"] == 110.0
    assert pedido["saldo_pendente"] == 60.0
    assert pedido["status_pagamento"] == "Parcial"


def test_acoes_de_status(client):
    orc = _orcamento(client)
    assert client.post(f"{BASE}/{orc['id']}/enviar").json()["status"] == "Enviado"
    assert client.post(f"{BASE}/{orc['id']}/recusar").json()["status"] == "Recusado"

    copia = client.post(f"{BASE}/{orc['id']}/duplicar").json()
    assert copia["status"] == "Pendente"
    assert copia["numero"] == 2
    assert copia["valor_total"] == 110.0


def test_orcamento_vencido_e_lido_como_expirado(client):
    _orcamento(client, data_validade=(today_sp() - timedelta(days=1)).isoformat())
    _orcamento(client, data_validade=(today_sp() + timedelta(days=10)).isoformat())

    expirados = client.get(BASE, params={"status": "Expirado"}).json()
    assert len(expirados) == 1
    assert expirados[0]["numero"] == 1
    assert [o["numero"] for o in client.get(BASE, params={"status": "Pendente"}).json()] == [2]


def test_orcamento_inexistente(client):
    assert client.get(f"{BASE}/999").status_code == 404


def test_trocar_cliente_atualiza_snapshot(client):
    ana = client.post("/api/cadastros/admin/clientes", json={"nome": "Ana", "telefone": "11 91111-1111"}).json()
    bruno = client.post("/api/cadastros/admin/clientes", json={"nome": "Bruno", "telefone": "11 92222-2222"}).json()
    orc = _orcamento(client, cliente_id=ana["id"], cliente_nome=None, cliente_telefone=None)
    assert orc["cliente_nome"] == "Ana"

    resp = client.put(f"{BASE}/{orc['id']}", json={"cliente_id": bruno["id"]})
    assert resp.status_code == 200, resp.text
    assert resp.json()["cliente_id"] == bruno["id"]
    assert resp.json()["cliente_nome"] == "Bruno"
    assert resp.json()["cliente_telefone"] == "5511922222222"


def test_update_com_nulo_em_campo_obrigatorio(client):
    orc = _orcamento(client)
    for campo in ("cliente_nome", "tipo_entrega", "taxa_entrega"):
        resp = client.put(f"{BASE}/{orc['id']}", json={campo: None})
        assert resp.status_code == 422, campo
    assert client.get(f"{BASE}/{orc['id']}").json()["cliente_nome"] == "Joana Prado"
