from datetime import date, timedelta

from app.utils.database_utils import today_sp

BASE = "/api/pedidos/admin"


def _payload(**extra):
    dados = {
        "cliente_nome": "Maria Souza",
        "cliente_telefone": "(11) 98765-4321",
        "data_entrega": (today_sp() + timedelta(days=3)).isoformat(),
        "taxa_entrega": 15,
        "itens": [
            {"nome": "Bolo Naked", "tamanho": "20cm", "sabor_massa": "Chocolate",
             "sabor_recheio": "Brigadeiro", "quantidade": 2, "preco_unitario": 120.5},
            {"tipo": "Adicional", "nome": "Topo de bolo", "quantidade": 1, "preco_unitario": 30},
        ],
    }
    dados.update(extra)
    return dados


def test_criar_pedido_calcula_totais_e_historico(client):
    resp = client.post(BASE, json=_payload())
    assert resp.status_code == 201, resp.text
    pedido = resp.json()

    assert pedido["numero"] == 1
    assert [i["subtotal"] for i in pedido["itens"]] == [241.0, 30.0]
    assert pedido["valor_total"] == 286.0  # 241 + 30 + 15
    assert pedido["saldo_pendente"] == 286.0
    assert pedido["status_pagamento"] == "Pendente"
    assert pedido["status"] == "Pagamento Pendente"
    assert pedido["cliente_telefone"] == "5511987654321"
    assert pedido["historico"][0]["descricao"] == "Pedido criado"


def test_numero_sequencial_e_status_pagamento(client):
    client.post(BASE, json=_payload())
    resp = client.post(BASE, json=_payload(valor_pago=100))
    pedido = resp.json()
    assert pedido["numero"] == 2
    assert pedido["status_pagamento"] == "Parcial"
    assert pedido["saldo_pendente"] == 186.0

    resp = client.post(BASE, json=_payload(valor_pago=286))
    assert resp.json()["status_pagamento"] == "Pago"
    assert resp.json()["saldo_pendente"] == 0.0


def test_update_recalcula_total(client):
    pedido = client.post(BASE, json=_payload()).json()
    resp = client.put(
        f"{BASE}/{pedido['id']}",
        json={"taxa_entrega": 0, "itens": [{"nome": "Bolo", "quantidade": 1, "preco_unitario": 80}]},
    )
    assert resp.status_code == 200, resp.text
    assert resp.json()["valor_total"] == 80.0
    assert resp.json()["historico"][-1]["descricao"] == "Pedido editado"


def test_trocar_cliente_atualiza_snapshot(client):
    ana = client.post("/api/cadastros/admin/clientes", json={"nome": "Ana", "telefone": "11 91111-1111"}).json()
    bruno = client.post(
        "/api/cadastros/admin/clientes",
        json={"nome": "Bruno", "telefone": "11 92222-2222", "email": "bruno@ex.com"},
    ).json()
    pedido = client.post(BASE, json=_payload(cliente_id=ana["id"], cliente_nome=None, cliente_telefone=None)).json()
    assert pedido["cliente_nome"] == "Ana"

    resp = client.put(f"{BASE}/{pedido['id']}", json={"cliente_id": bruno["id"]})
    assert resp.status_code == 200, resp.text
    atualizado = resp.json()
    assert atualizado["cliente_id"] == bruno["id"]
    assert atualizado["cliente_nome"] == "Bruno"
    assert atualizado["cliente_telefone"] == "5511922222222"
    assert atualizado["cliente_email"] == "bruno@ex.com"

    # nome enviado junto com o cliente prevalece
    resp = client.put(f"{BASE}/{pedido['id']}", json={"cliente_id": ana["id"], "cliente_nome": "Ana Paula"})
    assert resp.json()["cliente_nome"] == "Ana Paula"
    assert resp.json()["cliente_telefone"] == "5511911111111"
    assert resp.json()["cliente_email"] is None


def test_update_com_nulo_em_campo_obrigatorio(client):
    pedido = client.post(BASE, json=_payload()).json()
    for campo in ("cliente_nome", "data_entrega", "tipo_entrega", "prioridade"):
        resp = client.put(f"{BASE}/{pedido['id']}", json={campo: None})
        assert resp.status_code == 422, campo
    assert client.put(f"{BASE}/{pedido['id']}", json={"hora_entrega": None}).status_code == 200


def test_filtro_por_status_e_busca(client):
    a = client.post(BASE, json=_payload(cliente_nome="Ana Lima")).json()
    client.post(BASE, json=_payload(cliente_nome="Bruno Costa"))
    client.patch(f"{BASE}/{a['id']}/status", json={"status": "Em Produção"})

    em_producao = client.get(BASE, params={"status": "Em Produção"}).json()
    assert [p["id"] for p in em_producao] == [a["id"]]
    assert all(p["status"] == "Em Produção" for p in em_producao)

    busca = client.get(BASE, params={"busca": "bRuNo"}).json()
    assert [p["cliente_nome"] for p in busca] == ["Bruno Costa"]

    por_numero = client.get(BASE, params={"busca": "1"}).json()
    assert [p["numero"] for p in por_numero] == [1]


def test_kanban_agrupa_em_ordem_de_status(client):
    pedido = client.post(BASE, json=_payload()).json()
    client.post(BASE, json=_payload())
    client.patch(f"{BASE}/{pedido['id']}/status", json={"status": "Pronto"})

    colunas = client.get(f"{BASE}/kanban").json()["colunas"]
    assert [c["status"] for c in colunas] == [
        "Pagamento Pendente", "Aguardando Produção", "Em Produção", "Pronto",
        "Saiu para Entrega", "Entregue", "Cancelado",
    ]
    totais = {c["status"]: c["total"] for c in colunas}
    assert totais["Pronto"] == 1
    assert totais["Pagamento Pendente"] == 1


def test_alterar_status_registra_historico_com_usuario(client):
    pedido = client.post(BASE, json=_payload()).json()
    resp = client.patch(f"{BASE}/{pedido['id']}/status", json={"status": "Aguardando Produção"})
    ultimo = resp.json()["historico"][-1]
    assert ultimo["descricao"] == "Status alterado de Pagamento Pendente para Aguardando Produção"
    assert ultimo["usuario"] == "Administrador"


def test_semana_traz_sete_dias_a_partir_de_segunda(client):
    quarta = date(2026, 10, 21)
    client.post(BASE, json=_payload(data_entrega=quarta.isoformat()))
    semana = client.get(f"{BASE}/semana", params={"data": quarta.isoformat()}).json()
    assert semana["inicio"] == "2026-10-19"
    assert semana["fim"] == "2026-10-25"
    assert len(semana["dias"]) == 7
    assert len(semana["dias"][2]["pedidos"]) == 1


def test_calendario_rejeita_intervalo_invertido(client):
    resp = client.get(f"{BASE}/calendario", params={"inicio": "2026-10-10", "fim": "2026-10-01"})
    assert resp.status_code == 400


def test_pagamento_atualiza_saldo_e_lanca_receita(client):
    pedido = client.post(BASE, json=_payload(taxa_entrega=0, itens=[
        {"nome": "Bolo", "quantidade": 1, "preco_unitario": 100},
    ])).json()

    resp = client.post(f"{BASE}/{pedido['id']}/pagamentos", json={"valor": 40, "forma_pagamento": "PIX"})
    assert resp.status_code == 200, resp.text
    assert resp.json()["saldo_pendente"] == 60.0
    assert resp.json()["status_pagamento"] == "Parcial"

    transacoes = client.get("/api/financeiro/admin/transacoes").json()
    assert len(transacoes) == 1
    assert transacoes[0]["tipo"] == "Receita"
    assert transacoes[0]["valor"] == 40.0
    assert transacoes[0]["categoria_nome"] == "Vendas"
    assert transacoes[0]["pedido_id"] == pedido["id"]


def test_pagamento_maior_que_saldo(client):
    pedido = client.post(BASE, json=_payload()).json()
    resp = client.post(f"{BASE}/{pedido['id']}/pagamentos", json={"valor": 1000})
    assert resp.status_code == 400
    assert "saldo pendente" in resp.json()["detail"]


def test_whatsapp_link(client):
    pedido = client.post(BASE, json=_payload()).json()
    resp = client.get(f"{BASE}/{pedido['id']}/whatsapp-link", params={"mensagem": "Olá"})
    assert resp.json() == {"telefone": "5511987654321", "url": "https://wa.me/5511987654321?text=Ol%C3%A1"}


def test_pedido_de_outra_empresa_nao_aparece(client, outra_empresa, como_usuario):
    pedido = client.post(BASE, json=_payload()).json()
    como_usuario("outra")
    assert client.get(BASE).json() == []
    assert client.get(f"{BASE}/{pedido['id']}").status_code == 404


def test_pedido_sem_cliente_e_invalido(client):
    resp = client.post(BASE, json=_payload(cliente_nome=None))
    assert resp.status_code == 422


def test_dashboard(client):
    hoje = today_sp()
    client.post(BASE, json=_payload(data_entrega=hoje.isoformat(), taxa_entrega=0, valor_pago=100))
    outro = client.post(BASE, json=_payload()).json()
    cancelado = client.post(BASE, json=_payload(data_entrega=hoje.isoformat())).json()
    client.patch(f"{BASE}/{outro['id']}/status", json={"status": "Em Produção"})
    client.patch(f"{BASE}/{cancelado['id']}/status", json={"status": "Cancelado"})

    dash = client.get(f"{BASE}/dashboard").json()
    assert dash["entregas_hoje"] == 1
    assert dash["em_producao"] == 1
    assert dash["pagamento_pendente"] == 1
    # 171 (271 - 100) + 286; cancelado fica de fora
    assert dash["saldo_pendente_total"] == 457.0


def test_aderecos_no_pedido(client):
    adereco = client.post("/api/estoque/admin/aderecos", json={"nome": "Topo Feliz Aniversário", "estoque": 3}).json()
    pedido = client.post(BASE, json=_payload()).json()

    resp = client.post(f"{BASE}/{pedido['id']}/aderecos", json={"adereco_id": adereco["id"], "quantidade": 2})
    assert resp.status_code == 200, resp.text
    vinculos = resp.json()["aderecos"]
    assert [(v["adereco_nome"], v["quantidade"]) for v in vinculos] == [("Topo Feliz Aniversário", 2)]
    assert resp.json()["historico"][-1]["descricao"] == "Adereço adicionado: Topo Feliz Aniversário (x2)"

    resp = client.delete(f"{BASE}/{pedido['id']}/aderecos/{vinculos[0]['id']}")
    assert resp.json()["aderecos"] == []
    assert client.delete(f"{BASE}/{pedido['id']}/aderecos/999").status_code == 404
    assert client.post(f"{BASE}/{pedido['id']}/aderecos", json={"adereco_id": 999}).status_code == 404
