from decimal import Decimal
from types import SimpleNamespace as NS

from app.api.cadastros.services.service_produto import preco_para_tamanho

BASE = "/api/cadastros/admin"


def test_cliente_telefone_normalizado_e_unico(client):
    resp = client.post(f"{BASE}/clientes", json={"nome": "Paula", "telefone": "(21) 99876-5432", "email": ""})
    assert resp.status_code == 201, resp.text
    assert resp.json()["telefone"] == "5521998765432"
    assert resp.json()["email"] is None
    assert resp.json()["origem"] == "manual"

    repetido = client.post(f"{BASE}/clientes", json={"nome": "Paula 2", "telefone": "5521998765432"})
    assert repetido.status_code == 400
    assert repetido.json()["detail"] == "Telefone já cadastrado"


def test_cliente_de_outra_empresa_nao_conflita(client, outra_empresa, como_usuario):
    client.post(f"{BASE}/clientes", json={"nome": "Paula", "telefone": "21998765432"})
    como_usuario("outra")
    resp = client.post(f"{BASE}/clientes", json={"nome": "Paula", "telefone": "21998765432"})
    assert resp.status_code == 201
    assert len(client.get(f"{BASE}/clientes").json()) == 1


def test_preco_para_tamanho():
    produto = NS(preco=100, precos_por_tamanho={"20cm": 150, "25cm": None})
    assert preco_para_tamanho(produto, "20cm") == Decimal("150.00")
    assert preco_para_tamanho(produto, "25cm") == Decimal("100.00")
    assert preco_para_tamanho(produto, None) == Decimal("100.00")


def test_preco_do_produto_pela_api(client):
    produto = client.post(f"{BASE}/produtos", json={
        "nome": "Bolo Vulcão", "preco": 90, "tamanhos": ["15cm", "20cm"], "precos_por_tamanho": {"20cm": 130},
    }).json()
    resp = client.get(f"{BASE}/produtos/{produto['id']}/preco", params={"tamanho": "20cm"})
    assert resp.json() == {"produto_id": produto["id"], "tamanho": "20cm", "preco": 130.0}
    assert client.get(f"{BASE}/produtos/{produto['id']}/preco").json()["preco"] == 90.0


def test_escala_semanal_de_colaboradores(client):
    client.post(f"{BASE}/colaboradores", json={
        "nome": "Rita", "funcao": "Confeiteira", "escala": ["sex", "seg", "seg"],
        "horario_entrada": "08:00", "horario_saida": "17:00", "data_admissao": "2026-01-15",
    })
    client.post(f"{BASE}/colaboradores", json={"nome": "Léo", "funcao": "Motorista", "escala": ["seg"], "status": "Férias"})

    escala = client.get(f"{BASE}/colaboradores/escala/semana").json()["dias"]
    assert [c["nome"] for c in escala["seg"]] == ["Rita"]
    assert [c["nome"] for c in escala["sex"]] == ["Rita"]
    assert escala["dom"] == []


def test_colaborador_valida_escala_e_horario(client):
    assert client.post(f"{BASE}/colaboradores", json={"nome": "X", "funcao": "Auxiliar", "escala": ["domingo"]}).status_code == 422
    assert client.post(f"{BASE}/colaboradores", json={"nome": "X", "funcao": "Auxiliar", "horario_entrada": "25:00"}).status_code == 422


def test_sabores_por_tipo(client):
    client.post(f"{BASE}/sabores", json={"nome": "Chocolate", "tipo": "Massa"})
    client.post(f"{BASE}/sabores", json={"nome": "Ninho", "tipo": "Recheio", "custo_adicional": 5})
    recheios = client.get(f"{BASE}/sabores", params={"tipo": "Recheio"}).json()
    assert [s["nome"] for s in recheios] == ["Ninho"]


def test_busca_e_paginacao_de_produtos(client):
    for nome in ("Bolo Ninho", "Bolo Prestígio", "Torta Limão", "Bolo Red Velvet"):
        client.post(f"{BASE}/produtos", json={"nome": nome, "preco": 80})

    bolos = client.get(f"{BASE}/produtos", params={"search": "bolo"}).json()
    assert [p["nome"] for p in bolos] == ["Bolo Ninho", "Bolo Prestígio", "Bolo Red Velvet"]

    pagina = client.get(f"{BASE}/produtos", params={"search": "bolo", "skip": 1, "limit": 1}).json()
    assert [p["nome"] for p in pagina] == ["Bolo Prestígio"]
