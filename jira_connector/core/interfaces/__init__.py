"""
Interfaces for dependency inversion.

Endpoints depend on these abstractions, not on concrete HTTP clients.
"""
from .transport import ITransport

__all__ = [
    'ITransport',
]
