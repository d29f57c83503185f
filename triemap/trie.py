"""Character-indexed prefix tree implementing a string-keyed mapping.

Each node stores the entries whose remaining key is a single character in
``_values`` and delegates longer keys to one child per next character in
``_children``. The root of a container is a node like any other, so every
subtrie is itself a usable ``TrieMap``.

Example:
    morse = TrieMap()
    morse.put(".-", "A")
    morse.put("-...", "B")
    morse.put("/", " ")

    morse.get(".-")   # "A"
    morse.get("..")   # None
    morse.size()      # 3
"""

from collections.abc import Mapping
from typing import (
    Any, Dict, Iterable, Iterator, List, MutableMapping, Optional, Set,
    Tuple, TypeVar, Union,
)

from .exceptions import (
    InvalidKeyError,
    InvalidValueError,
    UnsupportedOperationError,
)

T = TypeVar('T')

# Marks "no entry"; None is a legitimate stored value.
_MISSING: Any = object()


def _check_key(key: Any) -> str:
    """Reject anything that is not a non-empty string."""
    if not isinstance(key, str) or not key:
        raise InvalidKeyError(f"Key must be a non-empty string, got {key!r}")
    return key


class TrieMap(MutableMapping[str, T]):
    """Mapping from strings to values stored as a prefix tree.

    Keys sharing a prefix share the nodes for that prefix, so get, put and
    remove cost O(len(key)) regardless of how many entries are stored.
    Aggregate operations (size, is_empty, contains_value, key_set) walk the
    whole subtrie.

    The entry and value views of the mapping contract are not supported:
    ``items()``, ``entry_set()`` and ``values()`` always raise
    UnsupportedOperationError. Iteration order is unspecified.

    Not thread-safe; concurrent mutation must be synchronised by the caller.

    Example:
        trie = TrieMap({"cat": 1})
        trie["car"] = 2
        trie.subtrie("ca").key_set()  # {"t", "r"}
        trie.remove("cat")            # 1
    """

    def __init__(
        self,
        entries: Optional[Union[Mapping, Iterable[Tuple[str, T]]]] = None,
    ):
        """Create an empty trie, optionally filled from entries.

        Args:
            entries: Mapping or iterable of (key, value) pairs to insert.
        """
        self._values: Dict[str, T] = {}
        self._children: Dict[str, 'TrieMap[T]'] = {}
        if entries is not None:
            self.put_all(entries)

    # =========================================================================
    # Keyed operations
    # =========================================================================

    def get(self, key: str, default: Optional[T] = None) -> Optional[T]:
        """Return the value stored under exactly key.

        Args:
            key: Non-empty string to look up.
            default: Returned when no entry exists.

        Returns:
            The stored value, or default if the key is absent.

        Raises:
            InvalidKeyError: If key is None, not a string, or empty.
        """
        value = self._lookup(_check_key(key))
        return default if value is _MISSING else value

    def put(self, key: str, value: T) -> Optional[T]:
        """Store value under key, replacing any previous value.

        Nodes for the key's prefix are created on demand; existing prefix
        paths are reused.

        Args:
            key: Non-empty string to store under.
            value: Value to store. None is allowed.

        Returns:
            The previously stored value, or None if there was none.

        Raises:
            InvalidKeyError: If key is None, not a string, or empty.
        """
        previous = self._put(_check_key(key), value)
        return None if previous is _MISSING else previous

    def remove(self, key: str) -> Optional[T]:
        """Remove the entry for key and return its value.

        Every node left empty by the removal is detached from its parent,
        up to (but not including) this node.

        Args:
            key: Non-empty string to remove.

        Returns:
            The removed value, or None if the key was absent.

        Raises:
            InvalidKeyError: If key is None, not a string, or empty.
        """
        previous = self._pop(_check_key(key))
        return None if previous is _MISSING else previous

    def contains_key(self, key: str) -> bool:
        """Check if an entry is stored under exactly key.

        Unlike ``get(key) is not None`` this is True for a stored None.

        Raises:
            InvalidKeyError: If key is None, not a string, or empty.
        """
        return self._lookup(_check_key(key)) is not _MISSING

    def subtrie(self, prefix: str) -> Optional['TrieMap[T]']:
        """Return the live node reached by following prefix.

        Args:
            prefix: Characters to descend through. The empty prefix
                returns this node.

        Returns:
            The node owning all keys that continue past prefix, or None
            if no stored key does.

        Raises:
            InvalidKeyError: If prefix is not a string.
        """
        if not isinstance(prefix, str):
            raise InvalidKeyError(f"Prefix must be a string, got {prefix!r}")
        return self._descend(prefix)

    # =========================================================================
    # Aggregate operations
    # =========================================================================

    def is_empty(self) -> bool:
        """Return True if no value is stored anywhere in this subtrie."""
        return not any(node._values for _, node in self._walk())

    def size(self) -> int:
        """Return the number of entries stored in this subtrie."""
        return sum(len(node._values) for _, node in self._walk())

    def contains_value(self, value: T) -> bool:
        """Check if value is stored under any key, comparing with ==.

        Stops at the first match.

        Raises:
            InvalidValueError: If value is None.
        """
        if value is None:
            raise InvalidValueError("Cannot search for a None value")
        return any(value in node._values.values() for _, node in self._walk())

    def key_set(self) -> Set[str]:
        """Return a new set with every stored key."""
        return set(self)

    def put_all(self, entries: Union[Mapping, Iterable[Tuple[str, T]]]) -> None:
        """Insert every (key, value) pair from entries.

        Pairs are inserted one at a time; if a key is invalid, the pairs
        before it stay inserted.

        Args:
            entries: Mapping or iterable of (key, value) pairs.

        Raises:
            InvalidKeyError: On the first invalid key.
        """
        if isinstance(entries, Mapping):
            source = entries
            entries = ((key, source[key]) for key in source)
        for key, value in entries:
            self.put(key, value)

    def clear(self) -> None:
        """Drop every entry and child of this node."""
        self._values.clear()
        self._children.clear()

    def copy(self) -> 'TrieMap[T]':
        """Return a structurally independent copy (values are shared)."""
        return type(self)((key, self[key]) for key in self)

    # =========================================================================
    # Unsupported views
    # =========================================================================

    def entry_set(self):
        """Not supported.

        Raises:
            UnsupportedOperationError: Always.
        """
        raise UnsupportedOperationError("TrieMap does not provide an entry view")

    def items(self):
        """Not supported; see entry_set."""
        return self.entry_set()

    def values(self):
        """Not supported.

        Raises:
            UnsupportedOperationError: Always.
        """
        raise UnsupportedOperationError("TrieMap does not provide a value view")

    # =========================================================================
    # Mapping protocol
    # =========================================================================

    def __getitem__(self, key: str) -> T:
        value = self._lookup(_check_key(key))
        if value is _MISSING:
            raise KeyError(key)
        return value

    def __setitem__(self, key: str, value: T) -> None:
        self._put(_check_key(key), value)

    def __delitem__(self, key: str) -> None:
        if self._pop(_check_key(key)) is _MISSING:
            raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        # Wrong key types are simply absent; the empty string still raises
        if not isinstance(key, str):
            return False
        return self.contains_key(key)

    def __iter__(self) -> Iterator[str]:
        for prefix, node in self._walk():
            for char in node._values:
                yield prefix + char

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return not self.is_empty()

    def pop(self, key: str, default: Any = _MISSING) -> T:
        """Remove key and return its value, like dict.pop.

        Raises:
            KeyError: If key is absent and no default was given.
            InvalidKeyError: If key is None, not a string, or empty.
        """
        value = self._pop(_check_key(key))
        if value is _MISSING:
            if default is _MISSING:
                raise KeyError(key)
            return default
        return value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        if len(self) != len(other):
            return False
        for key in self:
            value = other.get(key, _MISSING)
            if value is _MISSING or value != self[key]:
                return False
        return True

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        body = ', '.join(f'{key!r}: {self[key]!r}' for key in sorted(self))
        return f'{type(self).__name__}({{{body}}})'

    # =========================================================================
    # Traversal
    # =========================================================================

    def _descend(self, prefix: str) -> Optional['TrieMap[T]']:
        """Follow prefix one character per level, or None if it breaks off."""
        node = self
        for char in prefix:
            node = node._children.get(char)
            if node is None:
                return None
        return node

    def _lookup(self, key: str) -> Any:
        node = self._descend(key[:-1])
        if node is None:
            return _MISSING
        return node._values.get(key[-1], _MISSING)

    def _put(self, key: str, value: T) -> Any:
        node = self
        for char in key[:-1]:
            child = node._children.get(char)
            if child is None:
                child = node._children[char] = type(self)()
            node = child
        previous = node._values.get(key[-1], _MISSING)
        node._values[key[-1]] = value
        return previous

    def _pop(self, key: str) -> Any:
        trace: List[Tuple['TrieMap[T]', str]] = []
        node = self
        for char in key[:-1]:
            child = node._children.get(char)
            if child is None:
                return _MISSING
            trace.append((node, char))
            node = child
        previous = node._values.pop(key[-1], _MISSING)
        if previous is not _MISSING:
            self._prune(node, trace)
        return previous

    @staticmethod
    def _prune(node: 'TrieMap[T]', trace: List[Tuple['TrieMap[T]', str]]) -> None:
        """Clear node if empty and detach emptied nodes walking rootwards.

        Args:
            node: Node a value was just removed from.
            trace: (parent, char) steps from the starting node down to node.
        """
        while node.is_empty():
            node.clear()
            if not trace:
                break
            parent, char = trace.pop()
            del parent._children[char]
            node = parent

    def _walk(self) -> Iterator[Tuple[str, 'TrieMap[T]']]:
        """Yield (path, node) for every node of the subtrie, depth first.

        Uses an explicit stack, so long keys do not hit the recursion limit.
        """
        stack = [('', self)]
        while stack:
            prefix, node = stack.pop()
            yield prefix, node
            stack.extend(
                (prefix + char, child) for char, child in node._children.items()
            )
