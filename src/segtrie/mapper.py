#! /usr/bin/env python3
# -*- encoding:utf-8 -*-

import os
from typing import Iterable, Optional

from segtrie.paths import join_segments, path_segments
from segtrie.trie import SortedTrie, Trie
from segtrie.util import logger

class PathMapper:
    """把路径按最长前缀规则改写到目标路径下"""
    def __init__(self, rules: Optional[Iterable[tuple[str, str]]] = None, ordered: bool = False) -> None:
        self.trie: Trie[str, str] = SortedTrie() if ordered else Trie()
        if rules is not None:
            self.update(rules)

    def add(self, src: os.PathLike | str, dest: os.PathLike | str) -> None:
        key = path_segments(src)
        if self.trie.contains(key):
            logger.debug('rule %s overrides %s with %s', src, self.trie.get(key), dest)
        self.trie.insert(key, os.fspath(dest))

    def update(self, rules: Iterable[tuple[str, str]]) -> None:
        for src, dest in rules:
            self.add(src, dest)

    def match(self, path: os.PathLike | str) -> Optional[str]:
        best = self.trie.best_match(path_segments(path))
        if best is None:
            return None
        return join_segments(best)

    def resolve(self, path: os.PathLike | str) -> Optional[str]:
        segments = path_segments(path)
        item = self.trie.best_item(segments)
        if item is None:
            logger.debug('no rule for %s', path)
            return None
        prefix, dest = item
        rest = segments[len(prefix):]
        resolved = join_segments([dest, *rest])
        logger.debug('%s -> %s (rule %s)', path, resolved, join_segments(prefix))
        return resolved

    def __contains__(self, src: object) -> bool:
        if isinstance(src, (str, os.PathLike)):
            return self.trie.contains(path_segments(src))
        return False

    def __len__(self) -> int:
        return len(self.trie)
