import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Tuple, Union

from wordcount.processor import CountSet, summarize_text

logger = logging.getLogger(__name__)

STDIN_NAME = "-"


class FetchError(Exception):
    """Raised by a fetch callable when an input cannot be read."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


@dataclass(frozen=True)
class Success:
    counts: CountSet
    label: str


@dataclass(frozen=True)
class Failure:
    message: str  # "<reason>: <identifier>"


Outcome = Union[Success, Failure]
# A fetch callable returns the decoded text and the raw byte length behind it.
Fetch = Callable[[str], Tuple[str, int]]


def _reason(exc: OSError) -> str:
    return exc.strerror or str(exc)


def read_input(identifier: str, encoding: str = "utf-8") -> Tuple[str, int]:
    """
    Read the whole input named by `identifier` and decode it.
    "-" reads standard input. Returns (text, raw byte count). Any OS or
    decoding problem is raised as FetchError carrying a human readable reason.
    """
    try:
        if identifier == STDIN_NAME:
            raw = sys.stdin.buffer.read()
        else:
            raw = Path(identifier).read_bytes()
    except OSError as e:
        raise FetchError(_reason(e)) from e

    try:
        return raw.decode(encoding), len(raw)
    except UnicodeDecodeError as e:
        raise FetchError(f"stream did not contain valid {encoding.upper()}") from e
    except LookupError as e:
        raise FetchError(f"unknown encoding {encoding}") from e


def summarize_inputs(
    identifiers: Iterable[str],
    fetch: Fetch = read_input,
) -> list[Outcome]:
    """
    Return one Outcome per identifier, in the same order.
    Never raises for a single bad input; the failure is kept in its slot.
    """
    outcomes: list[Outcome] = []
    for identifier in identifiers:
        try:
            text, size = fetch(identifier)
        except FetchError as e:
            logger.debug("could not read %s: %s", identifier, e.reason)
            outcomes.append(Failure(message=f"{e.reason}: {identifier}"))
            continue

        counts = summarize_text(text, size)
        logger.debug("summarized %s: %s", identifier, counts)
        outcomes.append(Success(counts=counts, label=identifier))

    return outcomes


__all__ = [
    "STDIN_NAME",
    "FetchError",
    "Success",
    "Failure",
    "Outcome",
    "read_input",
    "summarize_inputs",
]
