"""
Repositories de Cadastros
Centraliza todos os repositories relacionados a entidades de cadastro
"""

from app.api.cadastros.repositories.repo_cliente import ClienteRepository
from app.api.cadastros.repositories.repo_produto import ProdutoRepository
from app.api.cadastros.repositories.repo_sabor import SaborRepository
from app.api.cadastros.repositories.repo_fornecedor import FornecedorRepository
from app.api.cadastros.repositories.repo_colaborador import ColaboradorRepository
