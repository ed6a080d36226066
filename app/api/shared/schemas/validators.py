def rejeitar_nulo(v):
    """Updates parciais: campo omitido fica como está, mas `null` explícito em coluna NOT NULL é inválido."""
    if v is None:
        raise ValueError("Campo não pode ser nulo")
    return v
