"""
Infrastructure package for sortbench.

Centralizes file I/O concerns: reading data files into datasets and writing
synthetic ones. Keep this layer focused on I/O, decoupled from the algorithms
and the benchmark driver.
"""

from sortbench.infrastructure.generator import (
    generate_data_files,
    generate_records,
    write_records,
)
from sortbench.infrastructure.loader import (
    Dataset,
    Multimap,
    build_multimap,
    load_dataset,
    read_records,
)

__all__ = [
    "Dataset",
    "Multimap",
    "build_multimap",
    "generate_data_files",
    "generate_records",
    "load_dataset",
    "read_records",
    "write_records",
]
