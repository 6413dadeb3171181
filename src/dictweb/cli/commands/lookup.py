"""
Lookup command: resolve a word without going through the server.
"""

import sys

import httpx
from rich import print_json
from rich.console import Console
from rich.markup import escape

from dictweb.config import Settings, get_settings, init_cache_dir
from dictweb.core.cache import CacheStore
from dictweb.core.client import DictionaryClient
from dictweb.core.context import PresentationContext
from dictweb.core.errors import DictwebError
from dictweb.core.lookup import LookupService
from dictweb.core.models import encode_entries

console = Console()


def add_subparser(subparsers):
    parser = subparsers.add_parser("lookup", help="Look up a word")
    parser.add_argument("word", help="Word to look up")
    parser.add_argument("--json", action="store_true", help="Print entries as JSON")
    parser.add_argument("--no-cache", action="store_true", help="Skip the local cache")
    parser.set_defaults(func=lookup)


def make_service(settings: Settings, use_cache: bool = True, http: httpx.Client | None = None) -> LookupService:
    root = init_cache_dir(settings) if use_cache else None
    client = DictionaryClient(settings.api_url, settings.timeout, http=http)
    return LookupService(CacheStore(root), client)


def print_context(ctx: PresentationContext):
    if ctx.error:
        console.print(f"[bold red]{escape(ctx.error.title)}[/]")
        console.print(escape(ctx.error.message))
        return
    if not ctx.has_results:
        console.print("No results.")
        return
    for entry in ctx.words:
        phonetics = ", ".join(p.text for p in entry.phonetics if p.text)
        console.print(f"[bold]{escape(entry.word)}[/]  {escape(phonetics)}")
        for meaning in entry.meanings:
            console.print(f"  [italic]{escape(meaning.part_of_speech)}[/]")
            for i, d in enumerate(meaning.definitions, 1):
                console.print(f"    {i}. {escape(d.definition)}")
                if d.example:
                    console.print(f"       [dim]“{escape(d.example)}”[/]")
            if meaning.synonyms:
                console.print(f"    synonyms: {', '.join(meaning.synonyms)}")
            if meaning.antonyms:
                console.print(f"    antonyms: {', '.join(meaning.antonyms)}")
        console.print()


def lookup(args):
    service = make_service(get_settings(), use_cache=not args.no_cache)
    try:
        with service.client:
            ctx = service.resolve(args.word)
    except DictwebError as e:
        print(f"✗ Error: {e}")
        sys.exit(1)

    if args.json and not ctx.error:
        print_json(encode_entries(list(ctx.words)).decode())
    else:
        print_context(ctx)

    if ctx.error:
        sys.exit(1)
