# invoice-dashboard: Ports (Protocol Interfaces)
# Abstract interfaces for adapters; no implementations here

from src.core.ports.db import PersistenceError, SqlGatewayPort
from src.core.ports.time import TimePort

__all__ = [
    "PersistenceError",
    "SqlGatewayPort",
    "TimePort",
]
