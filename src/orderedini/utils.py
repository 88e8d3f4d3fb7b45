from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from typing import Any, Callable, Generic, Self, TypeVar, overload
from itertools import islice

_KT = TypeVar("_KT")
_VT = TypeVar("_VT")


def copy_doc[
    **P, T
](doc_source: Callable[P, T]) -> Callable[
    [Callable[P, T]], Callable[P, T]
]:
    """Decorator to copy the docstring of doc_source to another.
    Inspired by Trevor (stackoverflow.com/users/13905088/trevor)
    from: stackoverflow.com/questions/68901049/
        copying-the-docstring-of-function-onto-another-function-by-name

    Args:
        doc_source (Callable): The source function to copy the docstring from.

    Returns:
        Callable: The decorated function.

    """

    def wrapped(doc_target: Callable[P, T]) -> Callable[P, T]:
        doc_target.__doc__ = doc_source.__doc__
        return doc_target

    return wrapped


### Ordered map with ILoc functionality


class OrderedMap(MutableMapping[_KT, _VT]):
    """Mapping that iterates in insertion order.

    Values are looked up in a dict while a separate list of keys records the order
    in which keys were first inserted. Iteration is driven by that list only.
    Assigning to an existing key keeps its position; removing a key keeps the
    relative order of the remaining keys.
    """

    def __init__(
        self, items: Mapping[_KT, _VT] | Iterable[tuple[_KT, _VT]] = (), /, **kwargs
    ) -> None:
        """
        Args:
            items (Mapping | Iterable[tuple], optional): Initial items, inserted in
                their iteration order. Defaults to ().
            **kwargs: Further initial items, inserted after items.
        """
        self._base: dict[_KT, _VT] = {}
        self._keys: list[_KT] = []
        # incremented on every insertion of a new key and every removal
        self._version: int = 0
        self.iloc: _iLocIndexer[_KT, _VT] = _iLocIndexer(self)
        self.update(items, **kwargs)

    def insert(self, key: _KT, value: _VT) -> _VT | None:
        """Insert a value. A new key is appended to the order, an existing key keeps
        its position and only gets its value replaced.

        Args:
            key (_KT): The key.
            value (_VT): The new value.

        Returns:
            _VT | None: The previous value of key or None if key was absent.
        """
        previous = self._base.get(key)
        if key not in self._base:
            self._keys.append(key)
            self._version += 1
        self._base[key] = value
        return previous

    def remove(self, key: _KT) -> _VT | None:
        """Remove a key.

        Args:
            key (_KT): The key to remove.

        Returns:
            _VT | None: The removed value or None if key was absent.
        """
        if key not in self._base:
            return None
        self._keys.remove(key)
        self._version += 1
        return self._base.pop(key)

    def __getitem__(self, key: _KT) -> _VT:
        return self._base[key]

    def __setitem__(self, key: _KT, value: _VT) -> None:
        self.insert(key, value)

    def __delitem__(self, key: _KT) -> None:
        if key not in self._base:
            raise KeyError(key)
        self.remove(key)

    def __contains__(self, key: object) -> bool:
        return key in self._base

    def __iter__(self) -> Iterator[_KT]:
        version = self._version
        for key in self._keys:
            yield key
            if self._version != version:
                raise RuntimeError(f"{type(self).__name__} changed size during iteration")

    def __len__(self) -> int:
        return len(self._keys)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, OrderedMap):
            return len(self) == len(other) and all(
                k1 == k2 and v1 == v2
                for (k1, v1), (k2, v2) in zip(self.items(), other.items())
            )
        return super().__eq__(other)

    def clear(self) -> None:
        self._base.clear()
        self._keys.clear()
        self._version += 1

    def copy(self) -> Self:
        """Shallow copy keeping the order."""
        return type(self)(self.items())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.items())!r})"


class _iLocIndexer(Generic[_KT, _VT]):

    def __init__(self, target: OrderedMap[_KT, _VT]) -> None:
        self.target = target

    @overload
    def __getitem__(self, key: int) -> tuple[_KT, _VT]: ...

    @overload
    def __getitem__(self, key: list[int] | slice) -> list[tuple[_KT, _VT]]: ...

    def __getitem__(
        self, key: int | list[int] | slice
    ) -> list[tuple[_KT, _VT]] | tuple[_KT, _VT]:

        map_len = len(self.target)

        # convert negative indices to positive indices
        if isinstance(key, (int, list)):
            indices = [key] if isinstance(key, int) else key
            keys = self.target._keys
            try:
                result = [
                    (k, self.target[k])
                    for k in (keys[map_len + i if i < 0 else i] for i in indices)
                ]
            except IndexError:
                raise IndexError("OrderedMap index out of range") from None
            if isinstance(key, int):
                return result[0]
            return result
        if isinstance(key, slice):
            _slice = [
                map_len + s if s is not None and s < 0 else s
                for s in (key.start, key.stop, key.step)
            ]
            return list(islice(self.target.items(), *_slice))
        raise TypeError("key must be of type int, list or slice.")

    def __setitem__(self, key: int | list[int] | slice, value: Any) -> None:
        if isinstance(key, (list, slice)):
            if not isinstance(value, Iterable):
                raise TypeError("Can only assign an iterable.")
            targets = self[key]
        elif isinstance(key, int):
            targets = [self[key]]
            value = [value]
        else:
            raise TypeError("key must be of type int, list or slice.")

        for (k, _), val in zip(targets, value):
            self.target[k] = val
