"""Parsing of the parameters given to a UCGI ``go`` command."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import IntEnum

from .constants import (
    RACK_SIZE,
    SIM_STOPPING_CONDITION_95PCT,
    SIM_STOPPING_CONDITION_98PCT,
    SIM_STOPPING_CONDITION_99PCT,
    SIM_STOPPING_CONDITION_NONE,
)

logger = logging.getLogger(__name__)

_INT_PREFIX = re.compile(r"[+-]?\d+")
_FLOAT_PREFIX = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


class SearchType(IntEnum):
    """Kind of search a ``go`` command starts."""

    NONE = 0
    SIM_MONTECARLO = 1
    INFERENCE_SOLVE = 2


class StopCondition(IntEnum):
    """Confidence level at which a simulation may stop early."""

    NONE = SIM_STOPPING_CONDITION_NONE
    PCT95 = SIM_STOPPING_CONDITION_95PCT
    PCT98 = SIM_STOPPING_CONDITION_98PCT
    PCT99 = SIM_STOPPING_CONDITION_99PCT


_STOP_CONDITIONS = {
    "95": StopCondition.PCT95,
    "98": StopCondition.PCT98,
    "99": StopCondition.PCT99,
}


class GoParseError(ValueError):
    """Raised when the parameters of a ``go`` command are invalid."""


@dataclass
class GoParams:
    """Settings for one search."""

    search_type: SearchType = SearchType.NONE
    static_search_only: bool = False
    depth: int = 0
    stop_condition: StopCondition = StopCondition.NONE
    threads: int = 1
    num_plays: int = 0
    max_iterations: int = 0
    tiles: str = ""
    player_index: int = 0
    score: int = 0
    number_of_tiles_exchanged: int = 0
    equity_margin: float = 0.0
    print_info_interval: int = 0
    check_stopping_condition_interval: int = 0


def _atoi(token: str) -> int:
    match = _INT_PREFIX.match(token.lstrip())
    return int(match.group(0)) if match else 0


def _strtod(token: str) -> float:
    match = _FLOAT_PREFIX.match(token.lstrip())
    return float(match.group(0)) if match else 0.0


_INT_FIELDS = {
    "plays": "num_plays",
    "i": "max_iterations",
    "depth": "depth",
    "info": "print_info_interval",
    "score": "score",
    "exch": "number_of_tiles_exchanged",
    "checkstop": "check_stopping_condition_interval",
    "threads": "threads",
}

_VALUE_KEYWORDS = frozenset(_INT_FIELDS) | {"tiles", "pidx", "eqmargin", "stopcondition"}


def _read_value(params: GoParams, keyword: str, token: str) -> None:
    if keyword in _INT_FIELDS:
        setattr(params, _INT_FIELDS[keyword], _atoi(token))
    elif keyword == "tiles":
        if len(token) > RACK_SIZE:
            raise GoParseError("Too many played tiles for inference.")
        params.tiles = token
    elif keyword == "pidx":
        params.player_index = _atoi(token)
        if params.player_index not in (0, 1):
            raise GoParseError("Player index not 0 or 1.")
    elif keyword == "eqmargin":
        params.equity_margin = _strtod(token)
    elif keyword == "stopcondition":
        try:
            params.stop_condition = _STOP_CONDITIONS[token]
        except KeyError:
            raise GoParseError(
                f"Did not understand stopping condition {token}"
            ) from None


def _set_search_type(params: GoParams, search_type: SearchType) -> None:
    if params.search_type != SearchType.NONE:
        raise GoParseError("Too many search types specified.")
    params.search_type = search_type


def parse_go_command(params: str) -> GoParams:
    """Parse the text after ``go`` into fresh search settings."""
    result = GoParams()
    pending: str | None = None
    for token in (t for t in params.split(" ") if t):
        if pending is not None:
            _read_value(result, pending, token)
        if token == "static":
            result.static_search_only = True
        if token == "sim":
            _set_search_type(result, SearchType.SIM_MONTECARLO)
        elif token == "infer":
            _set_search_type(result, SearchType.INFERENCE_SOLVE)
        pending = token if token in _VALUE_KEYWORDS else None

    logger.debug(
        "Returning go_params; i %d stop %d depth %d threads %d ss %d",
        result.max_iterations,
        result.stop_condition,
        result.depth,
        result.threads,
        result.static_search_only,
    )
    if result.stop_condition != StopCondition.NONE and result.max_iterations <= 0:
        raise GoParseError(
            "Cannot have a stopping condition and also search infinitely."
        )
    if result.search_type == SearchType.SIM_MONTECARLO and result.depth <= 0:
        raise GoParseError("Need a positive depth for sim.")
    if result.threads <= 0:
        raise GoParseError("Need a positive number of threads.")
    return result