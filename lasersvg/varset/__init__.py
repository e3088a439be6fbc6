from .var import Var, ValidationError
from .varset import VarSet

__all__ = ["Var", "VarSet", "ValidationError"]
