"""
Column types that run attribute casts at the SQLAlchemy bind/result boundary.
"""

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from sqlalchemy import String, TypeDecorator

from timecast.casts.time_cast import TimeCast
from timecast.core.constants import TIME_COLUMN_LENGTH

if TYPE_CHECKING:
    from sqlalchemy.sql.type_api import TypeDecorator as _TypeDecorator

    TypeDecoratorProtocol = _TypeDecorator[Any]
else:
    TypeDecoratorProtocol = TypeDecorator


class TimeString(TypeDecoratorProtocol):
    """
    A time-of-day column stored as an ``HH:MM:SS`` string.
    Values are normalized on the way in and on the way out.
    """

    impl = String
    cache_ok = True

    def __init__(self, extra_formats: Iterable[str] = ()) -> None:
        super().__init__(length=TIME_COLUMN_LENGTH)
        self.extra_formats = tuple(extra_formats)
        self.cast = TimeCast(extra_formats=self.extra_formats)

    @property
    def python_type(self) -> type:
        return str

    def process_bind_param(self, value: Any, dialect: Any) -> Any:
        return self.cast.encode(value)

    def process_result_value(self, value: Any, dialect: Any) -> Any:
        return self.cast.decode(value)
