import asyncio
import json

import httpx
import pytest

from app.main import app
from app.api.cadastros.models.model_cliente import ClienteModel
from app.api.integracoes.clients.evolution_client import EvolutionAPIError, EvolutionClient, normalizar_estado
from app.api.integracoes.clients.google_contacts_client import GoogleContactsClient
from app.api.integracoes.services.dependencies import get_evolution_factory, get_google_contacts_factory
from app.api.integracoes.services.whatsapp_pairing import PairingRegistry, StatusPareamento, WhatsAppPairingSession


# ---------------- Checkout ----------------
def test_checkout_redireciona_para_link_do_plano(client):
    resp = client.get("/api/integracoes/checkout/basico", follow_redirects=False)
    assert resp.status_code == 307
    assert resp.headers["location"] == "https://pagamento.exemplo.com/basico"


def test_checkout_plano_desconhecido_ou_sem_link(client):
    assert client.get("/api/integracoes/checkout/ouro", follow_redirects=False).status_code == 404
    # premium existe mas não tem link configurado no ambiente de teste
    assert client.get("/api/integracoes/checkout/premium", follow_redirects=False).status_code == 404


def test_catalogo_de_planos(client):
    catalogo = client.get("/api/integracoes/checkout/planos").json()
    disponiveis = {p["id"]: p["disponivel"] for p in catalogo["planos"]}
    assert disponiveis == {"basico": True, "profissional": True, "premium": False}
    assert catalogo["dias_teste_gratis"] == 14


# ---------------- Evolution API ----------------
def _evolution(handler) -> EvolutionClient:
    return EvolutionClient(
        base_url="http://evolution.test", api_key="segredo", timeout=5, transport=httpx.MockTransport(handler)
    )


def test_normalizar_estado():
    assert normalizar_estado("CONNECTED") == "open"
    assert normalizar_estado("connecting") == "connecting"
    assert normalizar_estado(None) == "close"


def test_evolution_cria_instancia_e_busca_qr():
    chamadas = []

    def handler(request: httpx.Request) -> httpx.Response:
        chamadas.append((request.method, request.url.path))
        assert request.headers["apikey"] == "segredo"
        if request.url.path == "/instance/fetchInstances":
            return httpx.Response(200, json=[])
        if request.url.path == "/instance/create":
            assert json.loads(request.content)["instanceName"] == "loja"
            return httpx.Response(201, json={"instance": {"instanceName": "loja"}})
        if request.url.path == "/instance/connect/loja":
            return httpx.Response(200, json={"code": "2@abc", "base64": "iVBORw0", "count": 1})
        return httpx.Response(404)

    async def fluxo():
        async with _evolution(handler) as client:
            criou = await client.ensure_instance("loja")
            qr = await client.connect("loja")
        return criou, qr

    criou, qr = asyncio.run(fluxo())
    assert criou is True
    assert qr == {"code": "2@abc", "base64": "data:image/png;base64,iVBORw0", "count": 1}
    assert [c[1] for c in chamadas] == ["/instance/fetchInstances", "/instance/create", "/instance/connect/loja"]


def test_evolution_erro_http_vira_excecao():
    async def fluxo():
        async with _evolution(lambda request: httpx.Response(500, text="boom")) as client:
            await client.get_connection_state("loja")

    with pytest.raises(EvolutionAPIError) as exc:
        asyncio.run(fluxo())
    assert exc.value.status_code == 500


# ---------------- Pareamento ----------------
class EvolutionFalso:
    def __init__(self, estados=(), erro_estado=False):
        self.estados = list(estados)
        self.erro_estado = erro_estado
        self.qrs = 0
        self.fechado = False

    async def ensure_instance(self, instance_name):
        return False

    async def connect(self, instance_name):
        self.qrs += 1
        return {"code": f"qr-{self.qrs}", "base64": f"data:image/png;base64,{self.qrs}", "count": self.qrs}

    async def get_connection_state(self, instance_name):
        if self.erro_estado:
            raise EvolutionAPIError("indisponível", 503)
        estado = self.estados.pop(0) if len(self.estados) > 1 else self.estados[0]
        return {"instance_name": instance_name, "state": estado}

    async def close(self):
        self.fechado = True


async def _aguardar_fim(sessao, limite=2.0):
    passo = 0.01
    while sessao.ativo and limite > 0:
        await asyncio.sleep(passo)
        limite -= passo


def test_pareamento_qr_verificando_conectado():
    falso = EvolutionFalso(estados=["close", "connecting", "open"])

    async def fluxo():
        sessao = WhatsAppPairingSession("loja", falso, intervalo_polling=0.01, intervalo_qr=5)
        inicio = await sessao.start()
        await _aguardar_fim(sessao)
        await sessao.cancel()
        return inicio, sessao

    inicio, sessao = asyncio.run(fluxo())
    assert inicio["status"] == "qr"
    assert inicio["qr_base64"] == "data:image/png;base64,1"
    assert sessao.status == StatusPareamento.CONNECTED
    assert sessao.ultimo_estado == "open"
    assert all(t.done() for t in sessao.tarefas)
    assert falso.fechado is True


def test_pareamento_conectado_fecha_cliente_sem_cancelar():
    falso = EvolutionFalso(estados=["open"])

    async def fluxo():
        sessao = WhatsAppPairingSession("loja", falso, intervalo_polling=0.01, intervalo_qr=5)
        await sessao.start()
        await asyncio.gather(*[t for t in sessao.tarefas if t], return_exceptions=True)
        return sessao

    sessao = asyncio.run(fluxo())
    assert sessao.status == StatusPareamento.CONNECTED
    assert falso.fechado is True


def test_registry_descarta_sessao_encerrada():
    async def fluxo():
        registry = PairingRegistry()
        falso = EvolutionFalso(estados=["open"])
        sessao = await registry.start(1, "loja", falso, intervalo_polling=0.01, intervalo_qr=5)
        await asyncio.gather(*[t for t in sessao.tarefas if t], return_exceptions=True)
        registry.descartar(1, "loja")
        return registry, falso

    registry, falso = asyncio.run(fluxo())
    assert registry.get(1, "loja") is None
    assert falso.fechado is True


def test_pareamento_renova_qr():
    falso = EvolutionFalso(estados=["close"])

    async def fluxo():
        sessao = WhatsAppPairingSession("loja", falso, intervalo_polling=0.01, intervalo_qr=0.02)
        await sessao.start()
        await asyncio.sleep(0.1)
        snapshot = sessao.snapshot()
        await sessao.cancel()
        return snapshot

    snapshot = asyncio.run(fluxo())
    assert snapshot["status"] == "qr"
    assert falso.qrs >= 2


def test_pareamento_erro_apos_falhas_consecutivas():
    falso = EvolutionFalso(erro_estado=True)

    async def fluxo():
        sessao = WhatsAppPairingSession("loja", falso, intervalo_polling=0.01, intervalo_qr=5, max_falhas=3)
        await sessao.start()
        await _aguardar_fim(sessao)
        await sessao.cancel()
        return sessao

    sessao = asyncio.run(fluxo())
    assert sessao.status == StatusPareamento.ERROR
    assert sessao.falhas == 3
    assert sessao.snapshot()["erro"] == "Não foi possível verificar a conexão com o WhatsApp"


def test_registry_substitui_sessao_da_mesma_instancia():
    async def fluxo():
        registry = PairingRegistry()
        primeiro, segundo = EvolutionFalso(estados=["close"]), EvolutionFalso(estados=["close"])
        await registry.start(1, "loja", primeiro, intervalo_polling=0.01)
        sessao = await registry.start(1, "loja", segundo, intervalo_polling=0.01)
        assert registry.get(1, "loja") is sessao
        assert registry.get(2, "loja") is None
        await registry.cancel_all()
        return primeiro, segundo, registry

    primeiro, segundo, registry = asyncio.run(fluxo())
    assert primeiro.fechado and segundo.fechado
    assert registry.get(1, "loja") is None


# ---------------- Instâncias ----------------
def test_primeira_instancia_fica_ativa_e_so_uma_ativa(client):
    base = "/api/integracoes/admin/whatsapp/instancias"
    a = client.post(base, json={"instance_name": "loja", "api_key": "k"}).json()
    assert a["ativo"] is True
    assert a["possui_api_key"] is True
    assert "api_key" not in a

    b = client.post(base, json={"instance_name": "delivery", "ativo": True}).json()
    ativas = [i["instance_name"] for i in client.get(base).json() if i["ativo"]]
    assert ativas == ["delivery"]

    client.post(f"{base}/{a['id']}/ativar")
    ativas = [i["instance_name"] for i in client.get(base).json() if i["ativo"]]
    assert ativas == ["loja"]

    assert client.post(base, json={"instance_name": "loja"}).status_code == 409
    assert client.post(base, json={"instance_name": "com espaço"}).status_code == 422
    assert b["id"] != a["id"]


def test_pareamento_de_instancia_nao_cadastrada(client):
    resp = client.post("/api/integracoes/admin/whatsapp/pareamento/fantasma")
    assert resp.status_code == 404


# ---------------- Google Contatos ----------------
def _pessoa(nome, telefone=None, email=None):
    pessoa = {"resourceName": f"people/{nome}", "names": [{"displayName": nome}]}
    if telefone:
        pessoa["phoneNumbers"] = [{"value": telefone}]
    if email:
        pessoa["emailAddresses"] = [{"value": email}]
    return pessoa


def test_importar_contatos_google_sem_duplicar(client, db, empresa_id):
    db.add(ClienteModel(empresa_id=empresa_id, nome="Já Existe", telefone="5511999990000", email="ja@exemplo.com"))
    db.commit()

    paginas = {
        None: {"connections": [
            _pessoa("Repetido Telefone", telefone="(11) 99999-0000"),
            _pessoa("Nova Cliente", telefone="11 98888-7777"),
            {"resourceName": "people/sem-nome", "phoneNumbers": [{"value": "11977776666"}]},
        ], "nextPageToken": "p2"},
        "p2": {"connections": [
            _pessoa("Repetido Email", email="JA@exemplo.com"),
            _pessoa("Nova Cliente de novo", telefone="5511988887777"),
            _pessoa("Só Email", email="so@exemplo.com"),
        ]},
    }

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.headers["authorization"] == "Bearer token-google"
        assert request.url.path == "/v1/people/me/connections"
        return httpx.Response(200, json=paginas[request.url.params.get("pageToken")])

    def factory(access_token):
        return GoogleContactsClient(
            access_token, base_url="https://people.test/v1", transport=httpx.MockTransport(handler)
        )

    app.dependency_overrides[get_google_contacts_factory] = lambda: factory
    resp = client.post("/api/integracoes/admin/google-contatos/importar",
                       json={"access_token": "token-google", "page_size": 3})
    assert resp.status_code == 200, resp.text
    assert resp.json() == {"importados": 2, "ignorados": 4, "total": 6}

    nomes = {c.nome: c for c in db.query(ClienteModel).filter(ClienteModel.empresa_id == empresa_id)}
    assert set(nomes) == {"Já Existe", "Nova Cliente", "Só Email"}
    assert nomes["Nova Cliente"].telefone == "5511988887777"
    assert nomes["Nova Cliente"].origem == "google"


def test_importar_contatos_google_token_invalido(client):
    def handler(request):
        return httpx.Response(401, json={"error": {"message": "Invalid Credentials"}})

    app.dependency_overrides[get_google_contacts_factory] = lambda: (
        lambda token: GoogleContactsClient(token, base_url="https://people.test/v1", transport=httpx.MockTransport(handler))
    )
    resp = client.post("/api/integracoes/admin/google-contatos/importar", json={"access_token": "x"})
    assert resp.status_code == 502
    assert "Invalid Credentials" in resp.json()["detail"]


def test_deletar_instancia_remota_promove_outra(client):
    base = "/api/integracoes/admin/whatsapp/instancias"
    apagadas = []

    def handler(request: httpx.Request) -> httpx.Response:
        apagadas.append(request.url.path)
        return httpx.Response(200, json={"status": "SUCCESS"})

    app.dependency_overrides[get_evolution_factory] = lambda: (
        lambda instancia=None: _evolution(handler)
    )
    loja = client.post(base, json={"instance_name": "loja"}).json()
    client.post(base, json={"instance_name": "delivery"})

    resp = client.delete(f"{base}/{loja['id']}", params={"remover_remota": True})
    assert resp.status_code == 204
    assert apagadas == ["/instance/delete/loja"]
    restantes = client.get(base).json()
    assert [(i["instance_name"], i["ativo"]) for i in restantes] == [("delivery", True)]
