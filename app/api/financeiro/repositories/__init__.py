from .repo_financeiro import CategoriaFinanceiraRepository, TransacaoRepository, ContaRepository

__all__ = ["CategoriaFinanceiraRepository", "TransacaoRepository", "ContaRepository"]
