import os

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi

from app.core.exception_handlers import (
    validation_exception_handler,
    http_exception_handler,
    general_exception_handler,
)
from app.utils.logger import logger
from app.utils.prometheus_metrics import PrometheusMiddleware
from app.config.settings import CORS_ORIGINS, CORS_ALLOW_ALL, BASE_URL, ENABLE_DOCS

# ───────────────────────────
# Importar routers (cada domínio importa seus models)
# ───────────────────────────
from app.api.auth import auth_controller
from app.api.empresas.router.router import api_empresas
from app.api.cadastros.router.router import api_cadastros
from app.api.pedidos.router.router import api_pedidos
from app.api.orcamentos.router.router import api_orcamentos
from app.api.estoque.router.router import api_estoque
from app.api.producao.router.router import api_producao
from app.api.financeiro.router.router import api_financeiro
from app.api.integracoes.router.router import api_integracoes
from app.api.monitoring.router import router as monitoring_router, router_public as monitoring_router_public

# ──────────────────────────
# Instância FastAPI
# ──────────────────────────
app = FastAPI(
    title="API Confeitaria",
    version="1.0.0",
    description="Pedidos, orçamentos, produção, estoque e financeiro de confeitarias",
    docs_url=("/swagger" if ENABLE_DOCS else None),
    redoc_url=("/redoc" if ENABLE_DOCS else None),
    openapi_url=("/openapi.json" if ENABLE_DOCS else None),
    servers=[{"url": BASE_URL, "description": "Base URL do ambiente"}] if BASE_URL else None,
    redirect_slashes=False,  # Evita redirecionamento 307 quando URL não termina com /
)

# ───────────────────────────
# Exception Handlers Globais
# ───────────────────────────
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

# ───────────────────────────
# Middlewares (executados na ordem reversa da adição)
# ───────────────────────────
app.add_middleware(PrometheusMiddleware)

# CORS_ALLOW_ALL=true => allow_origins=["*"] sem credenciais;
# senão CORS_ORIGINS (vazio cai para ["*"]) com credenciais só quando há origens explícitas
if CORS_ALLOW_ALL:
    allowed_origins = ["*"]
    allow_credentials = False
else:
    allowed_origins = CORS_ORIGINS or ["*"]
    allow_credentials = bool(CORS_ORIGINS)
app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ───────────────────────────
# Startup / Shutdown
# ───────────────────────────
@app.on_event("startup")
async def startup():
    logger.info("Iniciando API...")
    # testes criam as tabelas por conta própria
    if os.getenv("SKIP_DB_INIT", "false").lower() not in ("1", "true", "yes"):
        from app.database.init_db import inicializar_banco

        inicializar_banco()
    logger.info("API iniciada com sucesso.")


@app.on_event("shutdown")
async def shutdown():
    from app.api.integracoes.services.whatsapp_pairing import pairing_registry

    logger.info("Encerrando API...")
    await pairing_registry.cancel_all()
    logger.info("API encerrada.")


# ───────────────────────────
# Rotas
# ───────────────────────────
@app.get("/")
async def root():
    return {"status": "ok", "message": "API is running"}


@app.get("/health")
async def health():
    return {"status": "healthy"}


app.include_router(monitoring_router_public)  # Métricas públicas (sem auth)
app.include_router(monitoring_router)  # Logs com autenticação

app.include_router(auth_controller.router)
app.include_router(api_empresas)
app.include_router(api_cadastros)
app.include_router(api_pedidos)
app.include_router(api_orcamentos)
app.include_router(api_estoque)
app.include_router(api_producao)
app.include_router(api_financeiro)
app.include_router(api_integracoes)


# ───────────────────────────
# OpenAPI: Segurança Bearer/JWT no Swagger
# ───────────────────────────
PUBLIC_PATHS = {"/", "/health", "/api/auth/token", "/api/auth/registrar", "/api/monitoring/metrics"}


def custom_openapi():
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
        servers=app.servers,
    )

    components = openapi_schema.setdefault("components", {})
    components.setdefault("securitySchemes", {})["bearerAuth"] = {
        "type": "http",
        "scheme": "bearer",
        "bearerFormat": "JWT",
    }
    openapi_schema["security"] = [{"bearerAuth": []}]

    # Endpoints públicos sem exigência de token
    for path, methods in openapi_schema.get("paths", {}).items():
        if path in PUBLIC_PATHS or path.startswith("/api/integracoes/checkout"):
            for method_obj in methods.values():
                method_obj["security"] = []

    app.openapi_schema = openapi_schema
    return app.openapi_schema


app.openapi = custom_openapi
