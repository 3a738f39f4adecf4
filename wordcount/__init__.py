from wordcount.processor import (
    CountSet,
    count_bytes,
    count_characters,
    count_lines,
    count_words,
    summarize_text,
)
from wordcount.report import ColumnSelection, ReportLine, build_report
from wordcount.summarizer import Failure, FetchError, Success, read_input, summarize_inputs

__all__ = [
    "CountSet",
    "count_bytes",
    "count_characters",
    "count_lines",
    "count_words",
    "summarize_text",
    "ColumnSelection",
    "ReportLine",
    "build_report",
    "Failure",
    "FetchError",
    "Success",
    "read_input",
    "summarize_inputs",
]
