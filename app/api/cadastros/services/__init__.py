"""
Services de Cadastros
Centraliza todos os services relacionados a entidades de cadastro
"""

from app.api.cadastros.services.service_cliente import ClienteService
from app.api.cadastros.services.service_produto import ProdutoService
from app.api.cadastros.services.service_sabor import SaborService
from app.api.cadastros.services.service_fornecedor import FornecedorService
from app.api.cadastros.services.service_colaborador import ColaboradorService
