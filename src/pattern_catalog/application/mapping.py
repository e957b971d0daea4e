"""Mapping contracts and helpers shared by application mappers."""
from typing import Callable, Generic, Iterator, Protocol, Sequence, TypeVar, runtime_checkable

TEntity = TypeVar("TEntity")
TDto = TypeVar("TDto", covariant=True)
S = TypeVar("S")
T = TypeVar("T")


@runtime_checkable
class Mapper(Protocol[TEntity, TDto]):
    """Contract for converting between representations."""

    def to_entity(self, raw: object) -> TEntity:
        ...

    def to_dto(self, entity: TEntity) -> TDto:
        ...


class MappedSequence(Generic[S, T]):
    """
    Lazy, restartable view applying ``transform_func`` to each source item.

    Nothing is converted until iteration, and every iteration converts the
    source again; results are never cached.
    """

    def __init__(self, source: Sequence[S], transform_func: Callable[[S], T]):
        self._source = source
        self._transform_func = transform_func

    def __iter__(self) -> Iterator[T]:
        for item in self._source:
            yield self._transform_func(item)

    def __len__(self) -> int:
        return len(self._source)

    def __getitem__(self, index: int) -> T:
        return self._transform_func(self._source[index])

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(len={len(self)})"
