"""bean-board: Normalize, filter and summarize community coffee bean submissions."""

from bean_board.core import fetch_beans, load_beans
from bean_board.filtering import BeanFilter, apply_filters, filter_options
from bean_board.normalization import standardize_names, standardize_origin_name, standardize_roaster_name
from bean_board.records import parse_beans
from bean_board.schema import Bean
from bean_board.sorting import COLUMNS, sort_beans
from bean_board.stats import BeanStats, compute_stats
from bean_board.store import BeanSnapshot, BeanStore
from bean_board.tokenizer import tokenize

__version__ = "0.1.0"

__all__ = [
    "Bean",
    "BeanFilter",
    "BeanSnapshot",
    "BeanStats",
    "BeanStore",
    "COLUMNS",
    "apply_filters",
    "compute_stats",
    "fetch_beans",
    "filter_options",
    "load_beans",
    "parse_beans",
    "sort_beans",
    "standardize_names",
    "standardize_origin_name",
    "standardize_roaster_name",
    "tokenize",
    "__version__",
]
