from .core import run_case, run_pair, run_batch, read_pairs
from .io import write_csv, write_manifest

__all__ = ["run_case", "run_pair", "run_batch", "read_pairs", "write_csv", "write_manifest"]
