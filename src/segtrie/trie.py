#! /usr/bin/env python3
# -*- encoding:utf-8 -*-

from collections.abc import Iterable, Mapping
from typing import Any, Generic, Optional, Protocol, Self, TypeVar, overload

from sortedcontainers import SortedKeyList

_T = TypeVar('_T')
_KT = TypeVar('_KT')
_VT = TypeVar('_VT')
_VT_co = TypeVar("_VT_co", covariant=True)

# stable
class SupportsKeysAndGetItem(Protocol[_KT, _VT_co]):
    def keys(self) -> Iterable[_KT]: ...
    def __getitem__(self, __key: _KT) -> _VT_co: ...


class _TrieNode(Generic[_KT, _VT]):
    """一个节点对应从根到此处的一段前缀；terminal表示这段前缀被显式插入过"""
    __slots__ = ('nxt', 'val', 'terminal')
    def __init__(self) -> None:
        self.nxt: dict[_KT, Self] = {}
        self.val: Optional[_VT] = None
        self.terminal: bool = False
    def step(self, __key: _KT) -> Optional[Self]:
        return self.nxt.get(__key, None)
    def child(self, __key: _KT) -> Self:
        nxt = self.nxt.get(__key, None)
        if nxt is None:
            nxt = self.nxt[__key] = type(self)()
        return nxt
    def set(self, __value: _VT) -> None:
        self.val = __value
        self.terminal = True


class _SortedTrieNode(_TrieNode[_KT, _VT]):
    """子节点按片段排序保存，片段只需可比较，不必可哈希"""
    __slots__ = ('seg',)
    def __init__(self, seg: Any = None) -> None:
        super().__init__()
        self.seg = seg
        self.nxt = SortedKeyList(key=_segment_of) # type: ignore
    def step(self, __key: _KT) -> Optional[Self]:
        nxt: SortedKeyList = self.nxt # type: ignore
        i = nxt.bisect_key_left(__key)
        if i < len(nxt) and nxt[i].seg == __key:
            return nxt[i]
        return None
    def child(self, __key: _KT) -> Self:
        found = self.step(__key)
        if found is None:
            found = type(self)(__key)
            self.nxt.add(found) # type: ignore
        return found


def _segment_of(node: _SortedTrieNode) -> Any:
    return node.seg


class Trie(Generic[_KT, _VT]):
    """以片段序列为键的前缀树；键只遍历一次，可以是生成器。除trie[key]外查不到都不报错，返回False或None"""
    _node: type[_TrieNode] = _TrieNode

    @overload
    def __init__(self) -> None: ...
    @overload
    def __init__(self, init: SupportsKeysAndGetItem[Iterable[_KT], _VT]) -> None: ...
    @overload
    def __init__(self, init: Iterable[tuple[Iterable[_KT], _VT]]) -> None: ...
    def __init__(self, init=None) -> None:
        self.root: _TrieNode[_KT, _VT] = self._node()
        self._len = 0
        if init is None:
            return
        if isinstance(init, Mapping):
            init = init.items()
        elif hasattr(init, 'keys'):
            init = ((k, init[k]) for k in init.keys())
        for k, v in init:
            self.insert(k, v)

    def insert(self, __key: Iterable[_KT], __value: Any = True) -> None:
        """插入（或覆盖）一条序列，空序列落在根节点上"""
        node = self.root
        for part in __key:
            node = node.child(part)
        if not node.terminal:
            self._len += 1
        node.set(__value)

    def _walk(self, __key: Iterable[_KT]) -> Optional[_TrieNode[_KT, _VT]]:
        node: Optional[_TrieNode[_KT, _VT]] = self.root
        for part in __key:
            node = node.step(part) # type: ignore # 循环里node不会是None
            if node is None:
                return None
        return node

    def contains(self, __key: Iterable[_KT]) -> bool:
        node = self._walk(__key)
        return node is not None and node.terminal

    def best_item(self, __key: Iterable[_KT]) -> Optional[tuple[list[_KT], _VT]]:
        """沿单一路径走到底、不回溯，返回最长的已插入前缀及其值；插入过空序列时根节点算作长度为0的前缀"""
        node = self.root
        path: list[_KT] = []
        best: Optional[tuple[int, _VT]] = (0, node.val) if node.terminal else None # type: ignore
        for part in __key:
            nxt = node.step(part)
            if nxt is None:
                break
            node = nxt
            path.append(part)
            if node.terminal:
                best = len(path), node.val # type: ignore
        if best is None:
            return None
        return path[:best[0]], best[1]

    def best_match(self, __key: Iterable[_KT]) -> Optional[list[_KT]]:
        item = self.best_item(__key)
        if item is None:
            return None
        return item[0]

    @overload
    def best_value(self, __key: Iterable[_KT]) -> _VT | None: ...
    @overload
    def best_value(self, __key: Iterable[_KT], __default: _VT | _T) -> _VT | _T: ...
    def best_value(self, __key, __default=None):
        item = self.best_item(__key)
        if item is None:
            return __default
        return item[1]

    @overload
    def get(self, __key: Iterable[_KT]) -> _VT | None: ...
    @overload
    def get(self, __key: Iterable[_KT], __default: _VT | _T) -> _VT | _T: ...
    def get(self, __key, __default=None):
        node = self._walk(__key)
        if node is None or not node.terminal:
            return __default
        return node.val

    def __contains__(self, x: object) -> bool:
        if isinstance(x, Iterable):
            return self.contains(x)
        return False
    def __getitem__(self, __key: Iterable[_KT]) -> _VT:
        if not isinstance(__key, (list, tuple, str)):
            __key = list(__key)  # 报错时还要用到
        node = self._walk(__key)
        if node is None or not node.terminal:
            raise KeyError(__key)
        return node.val # type: ignore
    def __setitem__(self, __key: Iterable[_KT], __value: _VT) -> None:
        self.insert(__key, __value)
    def __len__(self) -> int:
        return self._len
    def __repr__(self) -> str:
        return f'<{self.__class__.__qualname__} with {self._len} entries>'


class SortedTrie(Trie[_KT, _VT]):
    """按片段大小而非哈希查找子节点的Trie"""
    _node = _SortedTrieNode
