import importlib
from decimal import Decimal
from pathlib import Path

import pytest

from app.api.monitoring import router as monitoring
from app.utils.decimal_utils import dec, dec_qtd, soma, to_float
from app.utils.prometheus_metrics import normalize_endpoint
from app.utils.slug_utils import make_slug, make_unique_slug
from app.utils.telefone import link_whatsapp, normalizar_telefone, somente_digitos, variantes_telefone_para_busca


@pytest.mark.parametrize("entrada, esperado", [
    ("(11) 98765-4321", "5511987654321"),
    ("11 8765-4321", "551187654321"),
    ("+55 11 98765-4321", "5511987654321"),
    ("0055 11 98765-4321", "5511987654321"),
    ("011987654321", "5511987654321"),
    ("", None),
    (None, None),
])
def test_normalizar_telefone(entrada, esperado):
    assert normalizar_telefone(entrada) == esperado


def test_variantes_de_busca_com_e_sem_nono_digito():
    variantes = variantes_telefone_para_busca("(11) 98765-4321")
    assert {"11987654321", "1187654321", "5511987654321", "551187654321"} <= set(variantes)
    assert variantes_telefone_para_busca(None) == []


def test_link_whatsapp():
    assert somente_digitos("+55 (11)") == "5511"
    assert link_whatsapp("11987654321") == "https://wa.me/5511987654321"
    assert link_whatsapp("11987654321", "Pedido #1 pronto!") == "https://wa.me/5511987654321?text=Pedido%20%231%20pronto%21"
    assert link_whatsapp(None, "oi") is None


def test_decimais():
    assert dec(2.675) == Decimal("2.68")
    assert dec(None) == Decimal("0.00")
    assert dec_qtd("1.23456") == Decimal("1.235")
    assert soma([0.1, 0.2, None]) == Decimal("0.30")
    assert to_float(Decimal("10.005")) == 10.01


def test_slug():
    assert make_slug("Confeitaria Doçura & Cia") == "confeitaria-docura-e-cia"
    existentes = {"doce-lar", "doce-lar-2"}
    assert make_unique_slug("Doce Lar", existentes.__contains__) == "doce-lar-3"
    assert make_unique_slug("", existentes.__contains__) == "empresa"


def test_normalize_endpoint():
    assert normalize_endpoint("/api/pedidos/admin/12/status") == "/api/pedidos/admin/{id}/status"


# ---------------- Monitoramento ----------------
LINHAS = [
    "[INFO] [2026-10-19 08:00:00] app: Iniciando API...",
    "[WARNING] [2026-10-19 08:00:01] app: [Validação] POST /api/pedidos/admin",
    "[ERROR] [2026-10-19 08:00:02] app: [Erro] GET /api/estoque/admin/dashboard - boom",
    "linha solta sem formato",
]


@pytest.fixture
def arquivo_log(tmp_path, monkeypatch):
    arquivo = tmp_path / "app.log"
    arquivo.write_text("\n".join(LINHAS) + "\n\n", encoding="utf-8")
    monkeypatch.setattr(monitoring, "_arquivo_log", lambda: arquivo)
    return arquivo


def test_parse_linha_log():
    assert monitoring.parse_linha_log(LINHAS[2]) == {
        "level": "ERROR",
        "timestamp": "2026-10-19 08:00:02",
        "logger": "app",
        "message": "[Erro] GET /api/estoque/admin/dashboard - boom",
    }
    assert monitoring.parse_linha_log("qualquer coisa") == {"raw": "qualquer coisa"}


def test_ler_ultimas_linhas(arquivo_log):
    assert monitoring.ler_ultimas_linhas(arquivo_log, 2) == LINHAS[2:]
    assert monitoring.ler_ultimas_linhas(arquivo_log, 100, level="warning") == [LINHAS[1]]
    assert monitoring.ler_ultimas_linhas(arquivo_log, 100, search="ESTOQUE") == [LINHAS[2]]


def test_logs_pela_api(client, arquivo_log):
    texto = client.get("/api/monitoring/logs", params={"lines": 1}).text
    assert texto == LINHAS[-1]

    dados = client.get("/api/monitoring/logs/json", params={"level": "ERROR"}).json()
    assert dados["total"] == 1
    assert dados["logs"][0]["level"] == "ERROR"


def test_logs_sem_arquivo(client, tmp_path, monkeypatch):
    monkeypatch.setattr(monitoring, "_arquivo_log", lambda: tmp_path / "nao-existe.log")
    assert client.get("/api/monitoring/logs").status_code == 404


def test_metricas_publicas(client):
    client.get("/health")
    resp = client.get("/api/monitoring/metrics")
    assert resp.status_code == 200
    assert "http_requests_total" in resp.text


# ---------------- Empresa ----------------
def test_taxa_de_entrega_por_distancia(client):
    resp = client.put("/api/empresas/admin/configuracoes", json={"negocio": {
        "taxa_entrega": {"valor_fixo": 10, "distancia_maxima_fixa": 5, "valor_por_km": 2},
        "raio_maximo_entrega": 20,
    }})
    assert resp.status_code == 200, resp.text

    def taxa(km):
        return client.get("/api/empresas/admin/taxa-entrega", params={"distancia_km": km})

    assert taxa(3).json()["taxa"] == 10.0
    assert taxa(8).json()["taxa"] == 16.0
    assert taxa(25).status_code == 400


RAIZ = Path(__file__).resolve().parent.parent


def _modulos_do_app():
    for arquivo in sorted((RAIZ / "app").rglob("*.py")):
        partes = arquivo.relative_to(RAIZ).with_suffix("").parts
        if partes[-1] == "__init__":
            partes = partes[:-1]
        yield ".".join(partes)


@pytest.mark.parametrize("modulo", list(_modulos_do_app()))
def test_modulo_importa(modulo):
    importlib.import_module(modulo)


def test_anotacoes_de_receita_nao_usam_metodo_list():
    from app.api.producao.services.service_receita import ReceitaService

    anotacoes = ReceitaService._montar_ingredientes.__annotations__
    assert "List" in str(anotacoes["return"])
