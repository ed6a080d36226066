from .schema_financeiro import *  # noqa: F401,F403
from .schema_conta import *  # noqa: F401,F403
