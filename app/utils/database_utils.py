from datetime import datetime, date
from zoneinfo import ZoneInfo

from app.config.settings import DB_TIMEZONE

TZ_SP = ZoneInfo(DB_TIMEZONE)


def now_trimmed():
    """Retorna datetime atual no fuso do negócio, sem microsegundos"""
    return datetime.now(TZ_SP).replace(microsecond=0)


def today_sp() -> date:
    """Data de hoje no fuso do negócio (padrão America/Sao_Paulo)."""
    return datetime.now(TZ_SP).date()
