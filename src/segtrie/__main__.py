#! /usr/bin/env python3
# -*- encoding:utf-8 -*-

import argparse
import sys
from typing import Optional, Sequence

from segtrie import storage
from segtrie.mapper import PathMapper
from segtrie.util import logger, logger_levels, setlevel

parser = argparse.ArgumentParser(prog='segtrie', description='rewrite paths by their longest matching rule prefix')
# fmt: off
parser.add_argument('paths', nargs='*', metavar='PATH',
                    help='paths to resolve')
parser.add_argument('-r', '--rules',
                    help='rule file, one "source destination" pair per line (default from config)')
parser.add_argument('-c', '--contains', action='store_true',
                    help='only report whether each path is exactly a rule source')
parser.add_argument('--sorted', action=argparse.BooleanOptionalAction, default=None,
                    help='keep rule segments ordered instead of hashed')
parser.add_argument('--set-config', action='store_true',
                    help='store --rules/--sorted/--level as global defaults and exit')
parser.add_argument('--reset', action='store_true',
                    help='clear configuration of this directory')
parser.add_argument('--reset-global', action='store_true',
                    help='clear global configuration')
parser.add_argument('--dump-local', action='store_true',
                    help='show configuration of this directory')
parser.add_argument('-v', '--verbose', action='store_true',
                    help='verbose logging')
parser.add_argument('--level', type=str.upper, choices=logger_levels,
                    help='log level')
# fmt: on

def make_config(args: argparse.Namespace) -> bool:
    """处理只改配置的参数，返回True表示不再继续执行"""
    gcfg = storage.global_config()
    cfg = storage.local_config(gcfg)
    do_exit = False
    if args.reset_global:
        gcfg.clear()
        gcfg.dump()
        logger.info('global configuration reset')
        do_exit = True
    if args.reset:
        cfg.clear()
        cfg.dump()
        logger.info('local configuration reset')
        do_exit = True
    if args.dump_local:
        logger.critical('local configuration: %s (effective %s)', dict(cfg), cfg.settings())
        do_exit = True
    if args.set_config:
        given = {'rules': args.rules, 'sorted': args.sorted, 'level': args.level}
        for k, v in given.items():
            if v is not None:
                gcfg[k] = v
        gcfg.dump()
        logger.info('global configuration saved: %s', dict(gcfg))
        do_exit = True
    return do_exit

def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parser.parse_args(argv)
    setlevel(args.level, args.verbose)
    if make_config(args):
        return 0
    cfg = storage.local_config()
    if args.level is None and not args.verbose:
        setlevel(cfg['level'])
    rules_file = args.rules if args.rules is not None else cfg['rules']
    ordered = args.sorted if args.sorted is not None else cfg['sorted']
    try:
        rules = storage.load_rules(rules_file)
    except FileNotFoundError:
        logger.error('rule file %s not found', rules_file)
        return 2
    except storage.RuleError as e:
        logger.error(e)
        return 2
    mapper = PathMapper(rules, ordered=ordered)
    logger.debug('loaded %d rules from %s', len(mapper), rules_file)
    missed = 0
    for path in args.paths:
        if args.contains:
            print(f'{path}\t{path in mapper}')
            continue
        resolved = mapper.resolve(path)
        if resolved is None:
            logger.warning('%s matches no rule', path)
            missed += 1
        else:
            print(f'{path}\t{resolved}')
    return 1 if missed else 0

if __name__ == '__main__':
    sys.exit(main())
