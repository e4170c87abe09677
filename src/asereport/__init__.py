"""
ASE Report - Automated Speed Enforcement charge reporting

A small Python package that turns the wide per-camera, per-month ASE
charge table into a month-indexed summary, statistics, and bar charts,
using the Functional Core, Imperative Shell architecture.

Structure:
- data/     : Imperative Shell (file loading, pipeline orchestration)
- analysis/ : Functional Core (pure transformations)
- plotting/ : (figure and table builders)
- reports/  : (artifact writing)
"""

__version__ = "0.1.0"
