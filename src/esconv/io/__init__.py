"""Reading, converting and writing tables of effect sizes."""

from .table import combine_results, convert_table, read_table, write_table  # noqa: F401
