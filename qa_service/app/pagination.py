# qa_service/app/pagination.py

import re
from dataclasses import dataclass
from typing import Mapping, Optional

from qa_service.app.errors import MissingParameters, ParseError

_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Pagination:
    # None means no limit
    limit: Optional[int] = None
    offset: int = 0


def _parse_int(params: Mapping[str, str], field: str) -> int:
    raw = params[field]
    # int() alone would also take whitespace, underscores and non-ASCII digits
    if not isinstance(raw, str) or not _INTEGER.fullmatch(raw):
        raise ParseError(field, raw)
    return int(raw)


def extract_pagination(params: Mapping[str, str]) -> Pagination:
    """Turn query parameters into a pagination window.

    No parameters at all gives the unpaged default. Any other parameter set
    must carry both ``limit`` and ``offset``; a lone ``limit`` is rejected
    rather than applied on its own.
    """
    if not params:
        return Pagination()
    if "limit" in params and "offset" in params:
        limit = _parse_int(params, "limit")
        offset = _parse_int(params, "offset")
        return Pagination(limit=limit, offset=offset)
    raise MissingParameters()
