#! /usr/bin/env python3
# -*- encoding:utf-8 -*-
"""路径与片段序列互转；前缀树本身不认识路径，由调用方在查找前后转换"""

import os
from pathlib import PurePath
from typing import Iterable

def path_segments(path: os.PathLike | str) -> list[str]:
    """'/etc/bin/echo' -> ['/', 'etc', 'bin', 'echo']"""
    return list(PurePath(path).parts)

def join_segments(segments: Iterable[str]) -> str:
    segments = list(segments)
    if not segments:
        return ''
    return str(PurePath(*segments))
