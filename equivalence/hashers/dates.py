"""Type-specific hasher for ``datetime.datetime`` values."""

import zlib
from datetime import datetime, timedelta, timezone
from typing import Any

from ..categories import type_name
from ..core.hasher import Hasher
from ..errors import UnexpectedTypeError
from ..utils.bits import wrap_int32

EPOCH_NAIVE = datetime(1970, 1, 1)
EPOCH_UTC = EPOCH_NAIVE.replace(tzinfo=timezone.utc)
SECOND = timedelta(seconds=1)


def zone_name(value: datetime) -> str:
    """
    Name of a datetime's time zone, or ``""`` for naive values.

    ``zoneinfo`` zones are named by their key (``America/Sao_Paulo``) rather
    than by the abbreviation in effect (``BRT``).
    """
    if value.tzinfo is None:
        return ""
    key = getattr(value.tzinfo, "key", None)
    if key:
        return key
    return value.tzname() or ""


class DateTimeHasher(Hasher):
    """
    Compares datetimes by instant and time zone.

    Two datetimes are equivalent when they denote the same instant and carry
    the same time zone name. Naive datetimes are only equivalent to naive
    datetimes with the same wall time.

    Register it on a ``ValueHasher`` for ``datetime`` to cover every subclass:

        ValueHasher({datetime: DateTimeHasher()})
    """

    def equals(self, other: Any) -> bool:
        return type(other) is type(self)

    def get_hash(self) -> int:
        return zlib.crc32(type_name(type(self)).encode("utf-8")) & 0x7FFFFFFF

    def equivalent(self, left: Any, right: Any) -> bool:
        self._assert_datetime(left)

        if not isinstance(right, datetime):
            return False

        # Naive and aware values never compare equal
        if (left.tzinfo is None) != (right.tzinfo is None):
            return False

        if left != right:
            return False

        return zone_name(left) == zone_name(right)

    def hash(self, value: Any) -> int:
        self._assert_datetime(value)

        # Naive values are read as UTC
        epoch = EPOCH_NAIVE if value.utcoffset() is None else EPOCH_UTC
        seconds = (value - epoch) // SECOND
        return wrap_int32(seconds + zlib.crc32(zone_name(value).encode("utf-8")))

    def _assert_datetime(self, value: Any) -> None:
        if not isinstance(value, datetime):
            raise UnexpectedTypeError.for_type(datetime, value)
