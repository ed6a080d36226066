from .repo_receita import ReceitaRepository, ConfigProducaoRepository

__all__ = ["ReceitaRepository", "ConfigProducaoRepository"]
