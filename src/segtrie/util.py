#! /usr/bin/env python3
# -*- encoding:utf-8 -*-

import logging
import sys

logger = logging.Logger('segtrie', 'INFO')
def __init():
    fmt = logging.Formatter('[%(levelname)s] %(filename)s:%(lineno)d: %(message)s', None, '%')
    if not logger.hasHandlers():
        logger.addHandler(logging.StreamHandler(sys.stdout))
    h = None
    for h in logger.handlers:
        h.setFormatter(fmt)
__init()
del __init

logger_levels = ('DEBUG', 'INFO', 'WARN', 'WARNING', 'ERROR', 'CRITICAL', 'FATAL')

def setlevel(level: str | None = None, verbose: bool = False) -> None:
    if isinstance(level, str):
        if level.upper() in logger_levels:
            logger.setLevel(level.upper())
            return
        logger.warning('unknown log level %r, keeping %s', level, logging.getLevelName(logger.level))
    if verbose:
        logger.setLevel('DEBUG')
