from hrm.util.di.base import Provider
from hrm.util.di.scope import Scope

__all__ = ["Provider", "Scope"]
