"""
Registry de inicializadores de domínio.
"""
from typing import Dict, List, Optional
import logging

from .base import DomainInitializer

logger = logging.getLogger(__name__)


class DomainRegistry:
    """Registry central (singleton) dos inicializadores, na ordem de registro."""

    _instance: Optional['DomainRegistry'] = None
    _initializers: Dict[str, DomainInitializer] = {}

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def register(self, initializer: DomainInitializer) -> None:
        domain_name = initializer.get_domain_name()
        if domain_name in self._initializers:
            logger.warning(f"Domínio '{domain_name}' já está registrado. Substituindo...")
        self._initializers[domain_name] = initializer
        logger.debug(f"Domínio '{domain_name}' registrado")

    def get(self, domain_name: str) -> Optional[DomainInitializer]:
        return self._initializers.get(domain_name)

    def get_all(self) -> List[DomainInitializer]:
        return list(self._initializers.values())

    def count(self) -> int:
        return len(self._initializers)


_registry = DomainRegistry()


def register_domain(initializer: DomainInitializer) -> None:
    _registry.register(initializer)


def get_registry() -> DomainRegistry:
    return _registry
