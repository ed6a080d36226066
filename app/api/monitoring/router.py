"""
Monitoramento: métricas Prometheus (públicas) e leitura do arquivo de log (autenticada).
"""
import re
from pathlib import Path
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import PlainTextResponse, StreamingResponse

from app.config.settings import LOG_DIR
from app.core.admin_dependencies import get_current_user
from app.utils.prometheus_metrics import CONTENT_TYPE_LATEST, get_metrics

router = APIRouter(
    prefix="/api/monitoring",
    tags=["Monitoring - Monitoramento"],
    dependencies=[Depends(get_current_user)],
)

# Router público para métricas (sem autenticação)
router_public = APIRouter(prefix="/api/monitoring", tags=["Monitoring - Monitoramento"])

# [LEVEL] [timestamp] logger: mensagem
_RE_LINHA_LOG = re.compile(r"\[(\w+)\] \[(.*?)\] (.*?): (.*)")


def _arquivo_log() -> Path:
    return Path(LOG_DIR) / "app.log"


def ler_ultimas_linhas(
    arquivo: Path,
    linhas: int,
    level: Optional[str] = None,
    search: Optional[str] = None,
) -> List[str]:
    with open(arquivo, "r", encoding="utf-8", errors="replace") as f:
        todas = [linha.rstrip("\n") for linha in f if linha.strip()]
    selecionadas = todas[-linhas:]
    if level:
        marcador = f"[{level.upper()}]"
        selecionadas = [linha for linha in selecionadas if marcador in linha.upper()]
    if search:
        termo = search.lower()
        selecionadas = [linha for linha in selecionadas if termo in linha.lower()]
    return selecionadas


def parse_linha_log(linha: str) -> dict:
    m = _RE_LINHA_LOG.match(linha)
    if not m:
        return {"raw": linha}
    level, timestamp, logger_name, message = m.groups()
    return {"level": level, "timestamp": timestamp, "logger": logger_name, "message": message}


@router_public.get("/metrics")
async def metrics():
    """Métricas Prometheus em /api/monitoring/metrics."""
    return StreamingResponse(iter([get_metrics()]), media_type=CONTENT_TYPE_LATEST)


@router.get("/logs", response_class=PlainTextResponse)
def view_logs(
    lines: int = Query(100, ge=1, le=1000, description="Número de linhas"),
    level: Optional[str] = Query(None, description="INFO, WARNING, ERROR ou DEBUG"),
    search: Optional[str] = Query(None, description="Texto a buscar"),
):
    arquivo = _arquivo_log()
    if not arquivo.exists():
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Arquivo de log não encontrado")
    return "\n".join(ler_ultimas_linhas(arquivo, lines, level, search))


@router.get("/logs/json")
def get_logs_json(
    lines: int = Query(100, ge=1, le=1000),
    level: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
):
    arquivo = _arquivo_log()
    if not arquivo.exists():
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Arquivo de log não encontrado")
    logs = [parse_linha_log(linha) for linha in ler_ultimas_linhas(arquivo, lines, level, search)]
    return {
        "total": len(logs),
        "lines": lines,
        "filters": {"level": level, "search": search},
        "logs": logs,
    }
