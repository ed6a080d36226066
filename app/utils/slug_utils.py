# app/utils/slug_utils.py
from typing import Callable, Optional
from slugify import slugify as _slugify

_EXPLICIT_REPLACEMENTS = [
    ("&", " e "),
    ("º", "o"), ("ª", "a"),
    ("ç", "c"), ("Ç", "c"),
]


def make_slug(text: Optional[str]) -> str:
    if not text:
        return ""
    return _slugify(
        text,
        separator="-",
        lowercase=True,
        replacements=_EXPLICIT_REPLACEMENTS,
        allow_unicode=False,
        max_length=50,
    )


def make_unique_slug(text: Optional[str], exists: Callable[[str], bool]) -> str:
    """Gera slug e acrescenta sufixo numérico (-2, -3...) enquanto `exists(slug)` for verdadeiro."""
    base = make_slug(text) or "empresa"
    slug = base
    n = 2
    while exists(slug):
        slug = f"{base}-{n}"
        n += 1
    return slug
