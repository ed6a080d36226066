import re
from urllib.parse import quote
from typing import List, Optional, Set, Tuple


def somente_digitos(valor: Optional[str]) -> str:
    """Remove máscara: espaços, parênteses, hífen, '+' etc."""
    if not valor:
        return ""
    return re.sub(r"[^\d]", "", str(valor))


def normalizar_telefone(telefone: Optional[str]) -> Optional[str]:
    """
    Normaliza o telefone para armazenamento: somente dígitos e com prefixo 55
    quando for um número brasileiro sem código do país (DDD + 8 ou 9 dígitos).
    Não insere o 9 de celular; o número é mantido como recebido.
    """
    if telefone is None:
        return None

    digits = somente_digitos(telefone)
    if not digits:
        return None

    # Ex.: 0055...
    if digits.startswith("00"):
        digits = digits[2:]

    # Ex.: 0 + DDD + número
    if digits.startswith("0") and len(digits) in (11, 12):
        digits = digits.lstrip("0")

    if digits.startswith("55") and len(digits) >= 12:
        return digits

    if len(digits) in (10, 11):
        return "55" + digits

    return digits


def _split_ddd_assinante(digits: str) -> Optional[Tuple[str, str]]:
    """Extrai (DDD, assinante) de 55 + DDD + 8/9 dígitos ou DDD + 8/9 dígitos."""
    if digits.startswith("55") and len(digits) in (12, 13):
        return digits[2:4], digits[4:]
    if len(digits) in (10, 11):
        return digits[:2], digits[2:]
    return None


def variantes_telefone_para_busca(telefone: Optional[str]) -> List[str]:
    """
    Gera as formas equivalentes de um telefone para consulta:
    com/sem 55 e com/sem o 9 de celular.
    """
    digits = somente_digitos(telefone)
    if not digits:
        return []

    out: Set[str] = {digits}
    base = normalizar_telefone(digits)
    if base:
        out.add(base)

    split = _split_ddd_assinante(base or digits)
    if split:
        ddd, assinante = split
        assinantes = {assinante}
        if len(assinante) == 9 and assinante.startswith("9"):
            assinantes.add(assinante[1:])
        elif len(assinante) == 8 and assinante[0] in "6789":
            assinantes.add("9" + assinante)
        for a in assinantes:
            out.add("55" + ddd + a)
            out.add(ddd + a)

    return sorted(out, key=lambda s: (len(s), s))


def link_whatsapp(telefone: Optional[str], mensagem: Optional[str] = None) -> Optional[str]:
    """Monta o link wa.me com mensagem opcional já codificada."""
    numero = normalizar_telefone(telefone)
    if not numero:
        return None
    url = f"https://wa.me/{numero}"
    if mensagem:
        url += f"?text={quote(mensagem)}"
    return url
