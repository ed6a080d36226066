"""
Métricas Prometheus da API (requisições HTTP, erros e logs).
"""
import re
from time import perf_counter
from typing import Callable

from prometheus_client import Counter, Histogram, Gauge, generate_latest, CONTENT_TYPE_LATEST
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

http_requests_total = Counter(
    'http_requests_total',
    'Total de requisições HTTP',
    ['method', 'endpoint', 'status_code']
)

http_request_duration_seconds = Histogram(
    'http_request_duration_seconds',
    'Duração das requisições HTTP em segundos',
    ['method', 'endpoint'],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.5, 5.0, 10.0]
)

http_errors_total = Counter(
    'http_errors_total',
    'Total de erros HTTP',
    ['method', 'endpoint', 'status_code']
)

requests_in_progress = Gauge(
    'http_requests_in_progress',
    'Requisições HTTP em andamento'
)

log_messages_total = Counter(
    'log_messages_total',
    'Total de mensagens de log',
    ['level']
)

_IGNORED_PREFIXES = ("/api/monitoring/metrics", "/api/monitoring/logs")
_RE_NUMERIC_ID = re.compile(r"/\d+")


def normalize_endpoint(path: str) -> str:
    """/api/pedidos/admin/pedidos/12/status -> /api/pedidos/admin/pedidos/{id}/status"""
    return _RE_NUMERIC_ID.sub("/{id}", path)


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Coleta contagem, duração e erros das requisições HTTP."""

    async def dispatch(self, request: Request, call_next: Callable):
        if request.url.path.startswith(_IGNORED_PREFIXES):
            return await call_next(request)

        method = request.method
        endpoint = normalize_endpoint(request.url.path)
        start = perf_counter()
        requests_in_progress.inc()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            requests_in_progress.dec()
            http_requests_total.labels(method=method, endpoint=endpoint, status_code=status_code).inc()
            http_request_duration_seconds.labels(method=method, endpoint=endpoint).observe(perf_counter() - start)
            if status_code >= 400:
                http_errors_total.labels(method=method, endpoint=endpoint, status_code=status_code).inc()


def get_metrics():
    """Retorna as métricas no formato Prometheus."""
    return generate_latest()


def record_log(level: str):
    log_messages_total.labels(level=level).inc()


__all__ = ["PrometheusMiddleware", "get_metrics", "record_log", "CONTENT_TYPE_LATEST", "normalize_endpoint"]
