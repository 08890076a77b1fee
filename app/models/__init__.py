from .option import Option, Options

__all__ = [
    "Option",
    "Options",
]
