"""Positional stem index, result ranking and pretty JSON output."""

from .inverted_index import InvertedIndex
from .query_result import MatchResult
from .index_builder import build_index, build_index_from_paths
from .query_processor import QueryProcessor, exact_search, partial_search
from .tokenizer import get_stems, tokenize
