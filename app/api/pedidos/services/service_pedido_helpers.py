from datetime import date, timedelta
from decimal import Decimal
from typing import Iterable, Tuple

from app.api.shared.schemas.schema_shared_enums import StatusPagamentoEnum
from app.utils.decimal_utils import dec


def calcular_subtotal(quantidade: int, preco_unitario) -> Decimal:
    return dec(dec(preco_unitario) * int(quantidade or 0))


def calcular_valor_total(subtotais: Iterable, taxa_entrega) -> Decimal:
    """valor_total = soma dos subtotais + taxa de entrega."""
    total = Decimal("0.00")
    for s in subtotais:
        total += dec(s)
    return dec(total + dec(taxa_entrega))


def status_pagamento(valor_total, valor_pago) -> str:
    """
    Pago quando não há saldo; Parcial quando 0 < pago < total; Pendente caso contrário.
    """
    total = dec(valor_total)
    pago = dec(valor_pago)
    if total - pago <= 0:
        return StatusPagamentoEnum.PAGO.value
    if pago > 0:
        return StatusPagamentoEnum.PARCIAL.value
    return StatusPagamentoEnum.PENDENTE.value


def resumo_financeiro(subtotais: Iterable, taxa_entrega, valor_pago) -> Tuple[Decimal, Decimal, str]:
    """Retorna (valor_total, saldo_pendente, status_pagamento)."""
    total = calcular_valor_total(subtotais, taxa_entrega)
    pago = dec(valor_pago)
    return total, dec(total - pago), status_pagamento(total, pago)


def inicio_semana(dia: date) -> date:
    """Segunda-feira da semana de `dia`."""
    return dia - timedelta(days=dia.weekday())


def dias_da_semana(dia: date) -> list[date]:
    inicio = inicio_semana(dia)
    return [inicio + timedelta(days=i) for i in range(7)]
