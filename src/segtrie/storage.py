#! /usr/bin/env python3
# -*- encoding:utf-8 -*-

from io import TextIOWrapper
import os
import pickle
from typing import Any, Iterable, Optional, Self

import chardet

from segtrie.util import logger

GLOBAL_NAME = 'segtrie.global.pickle'
LOCAL_NAME = 'segtrie.local.pickle'
DEFAULTS: dict[str, Any] = {
    'rules': 'segtrie.rules',
    'level': 'INFO',
    'sorted': False,
}


class RuleError(ValueError):
    """规则文件格式错误"""


class Config(dict[str, Any]):
    """pickle保存的设置，只认DEFAULTS里的键；本身没有的键先问parent，再用默认值"""
    def __init__(self, dirname: os.PathLike | str, filename: str, parent: Optional['Config'] = None) -> None:
        super().__init__()
        self.dirname = dirname
        self.filename = filename
        self.parent = parent

    @property
    def path(self) -> str:
        return os.path.join(os.path.abspath(self.dirname), self.filename)

    def __missing__(self, __key: str) -> Any:
        if self.parent is not None:
            return self.parent[__key]
        return DEFAULTS[__key]

    def __setitem__(self, __key: str, __value: Any) -> None:
        if __key not in DEFAULTS:
            raise KeyError(__key)
        super().__setitem__(__key, __value)

    def settings(self) -> dict[str, Any]:
        return {k: self[k] for k in DEFAULTS}

    def dump(self) -> None:
        with open(self.path, 'wb') as f:
            pickle.dump(dict(self), f)

    def load(self) -> Self:
        try:
            with open(self.path, 'rb') as f:
                obj: dict = pickle.load(f)
        except (pickle.UnpicklingError, FileNotFoundError) as e:
            logger.debug(e)
            return self
        self.clear()
        for k, v in obj.items():
            if k in DEFAULTS:
                self[k] = v
            else:
                logger.debug('ignoring unknown setting %r in %s', k, self.path)
        return self

def global_config() -> Config:
    return Config(os.path.expanduser('~'), GLOBAL_NAME).load()

def local_config(parent: Optional[Config] = None) -> Config:
    """当前目录的设置，缺省时取全局设置"""
    if parent is None:
        parent = global_config()
    return Config('.', LOCAL_NAME, parent).load()

def filein(name: os.PathLike | str) -> TextIOWrapper:
    with open(name, 'rb') as f:
        header = f.read(1000)
    encoding = 'utf-8'
    guess = chardet.detect(header)['encoding']
    if isinstance(guess, str):
        if guess in ('ascii', 'Windows-1254'):
            guess = 'utf-8'
        encoding = guess
    else:
        logger.debug('cannot guess encoding of %s, using %s', name, encoding)
    return open(name, 'r', encoding=encoding)

def parse_rules(lines: Iterable[str], source: str = '<rules>') -> list[tuple[str, str]]:
    """每行：源路径 目标路径；以#开头的字段及其后内容是注释，路径中间的#照常保留"""
    rules = []
    for lineno, line in enumerate(lines, 1):
        fields = []
        for field in line.split():
            if field.startswith('#'):
                break
            fields.append(field)
        if not fields:
            continue
        if len(fields) != 2:
            raise RuleError(f'{source}:{lineno}: expected "source destination", got {line.strip()!r}')
        rules.append((fields[0], fields[1]))
    return rules

def load_rules(name: os.PathLike | str) -> list[tuple[str, str]]:
    try:
        with filein(name) as f:
            return parse_rules(f, os.fspath(name))
    except UnicodeDecodeError as e:
        raise RuleError(f'{os.fspath(name)}: cannot decode rule file') from e
