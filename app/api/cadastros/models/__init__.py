"""
Models de Cadastros
Centraliza todos os models relacionados a entidades de cadastro
"""

# Importar todos os models para garantir registro no SQLAlchemy
from app.api.empresas.models.empresa_model import EmpresaModel
from app.api.cadastros.models.user_model import UserModel
from app.api.cadastros.models.model_cliente import ClienteModel
from app.api.cadastros.models.model_produto import ProdutoModel
from app.api.cadastros.models.model_sabor import SaborModel
from app.api.cadastros.models.model_fornecedor import FornecedorModel
from app.api.cadastros.models.model_colaborador import ColaboradorModel

__all__ = [
    "EmpresaModel",
    "UserModel",
    "ClienteModel",
    "ProdutoModel",
    "SaborModel",
    "FornecedorModel",
    "ColaboradorModel",
]
