from . import merge

__all__ = ['merge']
