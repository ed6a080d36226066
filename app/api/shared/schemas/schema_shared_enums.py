from enum import Enum


class TipoEntregaEnum(str, Enum):
    ENTREGA = "Entrega"
    RETIRADA = "Retirada"


class TipoItemEnum(str, Enum):
    PRODUTO = "Produto"
    ADICIONAL = "Adicional"
    SERVICO = "Servico"


class PedidoStatusEnum(str, Enum):
    """Etapas do pedido: pagamento -> produção -> entrega. A ordem é a do kanban."""
    PAGAMENTO_PENDENTE = "Pagamento Pendente"
    AGUARDANDO_PRODUCAO = "Aguardando Produção"
    EM_PRODUCAO = "Em Produção"
    PRONTO = "Pronto"
    SAIU_PARA_ENTREGA = "Saiu para Entrega"
    ENTREGUE = "Entregue"
    CANCELADO = "Cancelado"


class PrioridadeEnum(str, Enum):
    NORMAL = "Normal"
    URGENTE = "Urgente"


class StatusPagamentoEnum(str, Enum):
    PAGO = "Pago"
    PENDENTE = "Pendente"
    PARCIAL = "Parcial"


class FormaPagamentoEnum(str, Enum):
    PIX = "PIX"
    DINHEIRO = "Dinheiro"
    CARTAO_CREDITO = "Cartão Crédito"
    CARTAO_DEBITO = "Cartão Débito"
    TRANSFERENCIA = "Transferência"


class OrcamentoStatusEnum(str, Enum):
    PENDENTE = "Pendente"
    ENVIADO = "Enviado"
    APROVADO = "Aprovado"
    RECUSADO = "Recusado"
    EXPIRADO = "Expirado"
    CONVERTIDO = "Convertido"


class TipoSaborEnum(str, Enum):
    MASSA = "Massa"
    RECHEIO = "Recheio"


__all__ = [
    "TipoEntregaEnum",
    "TipoItemEnum",
    "PedidoStatusEnum",
    "PrioridadeEnum",
    "StatusPagamentoEnum",
    "FormaPagamentoEnum",
    "OrcamentoStatusEnum",
    "TipoSaborEnum",
]
