"""
ASE Report Data Package (Imperative Shell)

This package handles file I/O and run orchestration for ASE Report.

Modules:
- loader:   Reads the raw wide-format charge table (all cells as strings)
- pipeline: ChargesEngine, drives the functional core for one run
"""

from .loader import load_raw_table
from .pipeline import ChargesEngine, PipelineResult, run_pipeline

__all__ = [
    # Loader
    'load_raw_table',
    # Pipeline
    'ChargesEngine',
    'PipelineResult',
    'run_pipeline',
]
