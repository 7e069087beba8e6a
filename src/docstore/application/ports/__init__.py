"""Application ports - interfaces for external adapters."""

from docstore.application.ports.clock import Clock
from docstore.application.ports.id_generator import IdGenerator

__all__ = [
    "Clock",
    "IdGenerator",
]
