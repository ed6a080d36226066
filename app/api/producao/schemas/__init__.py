from .schema_receita import *  # noqa: F401,F403
from .schema_producao import *  # noqa: F401,F403
