"""
ASE Report Reports Package (Imperative Shell)

Orchestrates the pipeline run, table/plot generation, and file output.
No analysis logic lives here; this package calls the functional core
(src/asereport/analysis/) and plotting (src/asereport/plotting/) via the
charges engine (src/asereport/data/pipeline.py).

Modules:
    generators: ReportGenerator class and generate_report() convenience
                function for writing the CSV, JSON and HTML report files.
"""

from .generators import (
    ReportArtifacts,
    ReportGenerator,
    generate_report,
)

__all__ = [
    'ReportArtifacts',
    'ReportGenerator',
    'generate_report',
]
