from .predicates import *  # noqa: F401,F403
from .predicates import __all__ as __all__
