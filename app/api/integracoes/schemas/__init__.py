from .schema_whatsapp import *  # noqa: F401,F403
from .schema_contatos import *  # noqa: F401,F403
from .schema_checkout import *  # noqa: F401,F403
