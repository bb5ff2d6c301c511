import re

from pydantic import BaseModel

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10

# Signed 64-bit range, the widest value storage accepts for ids, offsets and limits
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# ASCII digits only: no whitespace, no "_" separators, no other Unicode digits
INT_RE = re.compile(r"[+-]?[0-9]+")


class PageParams(BaseModel):
    """Resolved pagination window"""
    page: int = DEFAULT_PAGE
    page_size: int = DEFAULT_PAGE_SIZE

    @property
    def offset(self) -> int:
        return offset_for(self.page, self.page_size)


def offset_for(page: int, limit: int) -> int:
    """Offset of ``page``, clamped so it still fits a 64-bit column."""
    return min((page - 1) * limit, INT64_MAX)


def parse_int64(raw: str) -> int | None:
    """Strict base-10 parse; None when ``raw`` is malformed or outside int64."""
    if not INT_RE.fullmatch(raw):
        return None
    value = int(raw)
    if value < INT64_MIN or value > INT64_MAX:
        return None
    return value


def parse_positive_int(raw: str | None, default: int) -> int:
    """
    Bad pagination input never errors: anything that is not a positive
    base-10 integer within int64 falls back to the default.
    """
    if raw is None:
        return default
    value = parse_int64(raw)
    if value is None or value <= 0:
        return default
    return value
