"""Printf-style writers for emitting generated code to files, stdout or strings."""

__version__ = "0.1.0"
__all__ = ["writer"]