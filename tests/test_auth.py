from fastapi.testclient import TestClient

from app.main import app


def _cliente_real():
    # sem overrides: passa pelo JWT de verdade
    app.dependency_overrides.clear()
    return TestClient(app)


def test_login_do_admin_demo_e_me():
    client = _cliente_real()
    resp = client.post("/api/auth/token", json={"username": "admin", "password": "admin123"})
    assert resp.status_code == 200, resp.text
    token = resp.json()["access_token"]
    assert resp.json()["type_user"] == "admin"

    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["username"] == "admin"
    assert me.json()["nome"] == "Administrador"


def test_login_com_senha_errada():
    resp = _cliente_real().post("/api/auth/token", json={"username": "admin", "password": "errada"})
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Credenciais inválidas"


def test_rotas_admin_exigem_token():
    client = _cliente_real()
    assert client.get("/api/pedidos/admin").status_code == 401
    assert client.get("/api/pedidos/admin", headers={"Authorization": "Bearer invalido"}).status_code == 401
    assert client.get("/health").json() == {"status": "healthy"}


def test_registrar_cria_empresa_isolada():
    client = _cliente_real()
    resp = client.post("/api/auth/registrar", json={
        "nome_empresa": "Bolos da Vó", "username": "vovo", "password": "segredo1", "telefone": "11 91234-5678",
    })
    assert resp.status_code == 201, resp.text
    headers = {"Authorization": f"Bearer {resp.json()['access_token']}"}

    empresa = client.get("/api/empresas/admin/empresa", headers=headers).json()
    assert empresa["slug"] == "bolos-da-vo"
    assert empresa["plano"] == "trial"
    assert client.get("/api/pedidos/admin", headers=headers).json() == []

    repetido = client.post("/api/auth/registrar", json={
        "nome_empresa": "Outra", "username": "vovo", "password": "segredo1",
    })
    assert repetido.status_code == 400


def test_registrar_rejeita_username_curto():
    client = _cliente_real()
    resp = client.post("/api/auth/registrar", json={
        "nome_empresa": "Bolos da Vó", "username": "vo", "password": "segredo1",
    })
    assert resp.status_code == 422
