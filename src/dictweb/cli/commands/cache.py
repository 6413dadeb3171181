"""
Cache commands.
"""

import sys
from rich import print_json

from dictweb.config import get_settings
from dictweb.core.cache import CacheStore, normalize_key


def add_subparser(subparsers):
    parser = subparsers.add_parser("cache", help="Inspect the lookup cache")
    cache_sub = parser.add_subparsers(dest="cache_command", required=True)

    # path
    path_p = cache_sub.add_parser("path", help="Show the cache directory")
    path_p.set_defaults(func=cache_path)

    # list
    list_p = cache_sub.add_parser("list", help="List cached words")
    list_p.set_defaults(func=cache_list)

    # show
    show_p = cache_sub.add_parser("show", help="Show a cached response")
    show_p.add_argument("word", help="Cached word")
    show_p.set_defaults(func=cache_show)

    # rm
    rm_p = cache_sub.add_parser("rm", help="Remove a cached word")
    rm_p.add_argument("word", help="Cached word")
    rm_p.set_defaults(func=cache_rm)

    # clear
    clear_p = cache_sub.add_parser("clear", help="Remove every cached word")
    clear_p.set_defaults(func=cache_clear)


def _store() -> CacheStore:
    return CacheStore(get_settings().cache_dir)


def cache_path(args):
    store = _store()
    print(store.root if store.enabled else "disabled")


def cache_list(args):
    keys = _store().keys()
    if not keys:
        print("No cached words.")
        return
    for key in keys:
        print(key)


def cache_show(args):
    read = _store().get(normalize_key(args.word))
    if not read.hit:
        print(f"✗ Error: {args.word!r} is not cached ({read.status.value})")
        sys.exit(1)
    try:
        print_json(read.data.decode("utf-8"))
    except ValueError as e:
        print(f"✗ Error: cached data for {args.word!r} is not JSON: {e}")
        sys.exit(1)


def cache_rm(args):
    if _store().delete(normalize_key(args.word)):
        print(f"✓ Removed: {args.word}")
    else:
        print(f"✗ Error: {args.word!r} is not cached")
        sys.exit(1)


def cache_clear(args):
    removed = _store().clear()
    print(f"✓ Removed {removed} cached word(s)")
