# Routers package for compareoffers

from . import offers

__all__ = ["offers"]
