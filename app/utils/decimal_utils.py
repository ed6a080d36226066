from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional

CENTAVOS = Decimal("0.01")


def dec(value: float | Decimal | int | str | None) -> Decimal:
    """Converte valor para Decimal com precisão de 2 casas decimais."""
    if value is None:
        return Decimal("0.00")
    return Decimal(str(value)).quantize(CENTAVOS, rounding=ROUND_HALF_UP)


def dec_qtd(value: float | Decimal | int | str | None) -> Decimal:
    """Decimal para quantidades de estoque (3 casas)."""
    if value is None:
        return Decimal("0.000")
    return Decimal(str(value)).quantize(Decimal("0.001"), rounding=ROUND_HALF_UP)


def soma(valores: Iterable[float | Decimal | int | None]) -> Decimal:
    total = Decimal("0.00")
    for v in valores:
        total += dec(v)
    return total


def to_float(value: Optional[Decimal | float | int]) -> float:
    """Converte Decimal/float para float com 2 casas decimais (meia para cima)."""
    if value is None:
        return 0.0
    return float(dec(value))
