from hrm.infrastructure.persistence.di import PersistenceProvider

__all__ = ["PersistenceProvider"]
