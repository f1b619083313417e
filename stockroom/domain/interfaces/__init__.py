from .identified import Identified

__all__ = ["Identified"]
