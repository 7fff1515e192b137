"""I/O utilities for polytopekit."""

from .off import off_text, write_off

__all__ = ['off_text', 'write_off']
