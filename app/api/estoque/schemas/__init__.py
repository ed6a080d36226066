from .schema_estoque import *  # noqa: F401,F403
from .schema_adereco import *  # noqa: F401,F403
