from sqlalchemy import Column, Integer, String, ForeignKey, Numeric, Enum as SAEnum
from sqlalchemy.orm import declared_attr, validates

TipoItemSAEnum = SAEnum(
    "Produto", "Adicional", "Servico",
    name="item_tipo_enum",
    create_type=False,
    schema="pedidos",
)


class ItemLinhaMixin:
    """
    Colunas comuns dos itens de orçamento e de pedido.
    O subtotal é gravado já calculado (quantidade x preço unitário).
    """
    id = Column(Integer, primary_key=True, autoincrement=True)
    tipo = Column(TipoItemSAEnum, nullable=False, default="Produto")

    @declared_attr
    def produto_id(cls):
        return Column(Integer, ForeignKey("cadastros.produtos.id", ondelete="SET NULL"), nullable=True)

    nome = Column(String(150), nullable=False)
    tamanho = Column(String(30), nullable=True)
    sabor_massa = Column(String(100), nullable=True)
    sabor_recheio = Column(String(200), nullable=True)  # pode ser composto: "Brigadeiro + Morango"
    quantidade = Column(Integer, nullable=False, default=1)
    preco_unitario = Column(Numeric(18, 2), nullable=False, default=0)
    subtotal = Column(Numeric(18, 2), nullable=False, default=0)

    @validates("quantidade")
    def _valida_quantidade(self, key, value):
        if value is not None and value < 1:
            raise ValueError("Quantidade deve ser maior que zero")
        return value
