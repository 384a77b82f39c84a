from typing import Any, Callable, TypeVar

T = TypeVar("T")

VisitFnType = Callable[[T], Any]
EqualityFnType = Callable[[T, T], bool]
ValueFormatterType = Callable[[T], str]
ValueFactoryType = Callable[[], T]
