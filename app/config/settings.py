import os
from dotenv import load_dotenv
from pathlib import Path

# Carrega o .env manualmente se estiver fora do Docker
if not os.getenv("RUNNING_IN_DOCKER"):
    dotenv_path = Path(__file__).resolve().parents[2] / ".env"
    load_dotenv(dotenv_path=dotenv_path)

# Configuração de conexão
DB_CONFIG = {
    'database': os.getenv('DB_NAME'),
    'user': os.getenv('DB_USER'),
    'password': os.getenv('DB_PASSWORD'),
    'host': os.getenv('DB_HOST'),
    'port': int(os.getenv('DB_PORT', 5432)),
}

# SSL do banco (opcional)
DB_SSL_MODE = os.getenv('DB_SSL_MODE')  # ex.: require, verify-ca, verify-full

# URL completa (sobrepõe DB_CONFIG). Usada nos testes com sqlite.
DATABASE_URL = os.getenv("DATABASE_URL")

# JWT / Segurança
SECRET_KEY = os.getenv("SECRET_KEY")
ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 90))

# CORS
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()]
CORS_ALLOW_ALL = os.getenv("CORS_ALLOW_ALL", "false").lower() in ("1", "true", "yes")

# FastAPI / App
BASE_URL = os.getenv("BASE_URL", "")
ENABLE_DOCS = os.getenv("ENABLE_DOCS", "true").lower() in ("1", "true", "yes")

# Logs
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_DIR = os.getenv("LOG_DIR", str(Path(__file__).resolve().parents[1] / "logs"))

# Evolution API (WhatsApp)
EVOLUTION_API_URL = os.getenv("EVOLUTION_API_URL", "http://localhost:8080")
EVOLUTION_API_KEY = os.getenv("EVOLUTION_API_KEY")
EVOLUTION_TIMEOUT_SECONDS = int(os.getenv("EVOLUTION_TIMEOUT_SECONDS", 20))

# Google People API
GOOGLE_PEOPLE_API_URL = os.getenv("GOOGLE_PEOPLE_API_URL", "https://people.googleapis.com/v1")

# Checkout (links de pagamento pré-provisionados por plano)
CHECKOUT_LINKS = {
    "basico": os.getenv("CHECKOUT_LINK_BASICO"),
    "profissional": os.getenv("CHECKOUT_LINK_PROFISSIONAL"),
    "premium": os.getenv("CHECKOUT_LINK_PREMIUM"),
}
TRIAL_PERIOD_DAYS = int(os.getenv("TRIAL_PERIOD_DAYS", 14))

# Fuso das datas de negócio (entregas, vencimentos)
DB_TIMEZONE = os.getenv("DB_TIMEZONE", "America/Sao_Paulo")
