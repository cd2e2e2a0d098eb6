"""
Seed transformation and merge modules.
"""
from .merge import merge, run_merge
from .models import EntryOutcome, MergeAction, MergeResult
from .transform import transform

__all__ = [
    'EntryOutcome',
    'MergeAction',
    'MergeResult',
    'merge',
    'run_merge',
    'transform',
]
