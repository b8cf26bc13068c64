#! /usr/bin/env python3
# -*- encoding:utf-8 -*-

from segtrie.trie import SortedTrie, Trie
from segtrie.paths import join_segments, path_segments
from segtrie.mapper import PathMapper

__all__ = [
    "PathMapper",
    "SortedTrie",
    "Trie",
    "join_segments",
    "path_segments",
]
