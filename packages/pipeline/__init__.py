from .core import run_pipeline, SolveReport, DEFAULT_RANKERS
from .io import render_report, write_csv, write_manifest, DEFAULT_TOP

__all__ = ["run_pipeline", "SolveReport", "DEFAULT_RANKERS",
           "render_report", "write_csv", "write_manifest", "DEFAULT_TOP"]
