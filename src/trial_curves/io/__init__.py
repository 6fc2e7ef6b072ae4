"""I/O helpers: CSV tables, cell records and image files."""

from .image import decode_data_url, save_image
from .records import decode_sample, sample_from_mapping
from .tabular import Table, TableRow, read_table, read_table_header

__all__ = [
    "Table",
    "TableRow",
    "decode_data_url",
    "decode_sample",
    "read_table",
    "read_table_header",
    "sample_from_mapping",
    "save_image",
]
