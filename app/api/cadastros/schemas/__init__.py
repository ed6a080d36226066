"""
Schemas de Cadastros
Centraliza os schemas de CRUD das entidades de cadastro:
- Clientes
- Produtos
- Sabores
- Fornecedores
- Colaboradores
"""

from app.api.cadastros.schemas.schema_cliente import *
from app.api.cadastros.schemas.schema_produto import *
from app.api.cadastros.schemas.schema_sabor import *
from app.api.cadastros.schemas.schema_fornecedor import *
from app.api.cadastros.schemas.schema_colaborador import *
