# -*- coding: utf-8 -*-
"""Command-line lookup of localized strings."""
from __future__ import annotations

import argparse
import asyncio
import sys
from typing import List, Optional

from core.exceptions import LocalizerError
from core.localizer import Localizer
from infra.config import DEFAULT_LANGUAGE
from infra.dictionaries import builtin_dictionaries, language_name
from infra.logging_config import setup_logging
from infra.models import LocalizerOptions


def build_localizer(use_uid_when_not_found: bool = False) -> Localizer:
    localizer = Localizer(LocalizerOptions(use_uid_when_not_found=use_uid_when_not_found))
    for dictionary in builtin_dictionaries():
        localizer.add_language_dictionary(dictionary)
    return localizer


def build_parser(localizer: Localizer) -> argparse.ArgumentParser:
    T = localizer.get_localized_string

    parser = argparse.ArgumentParser(description=T("Cli.Description"))
    parser.add_argument("uids", nargs="*", help=T("Cli.Arg.Uids"))
    parser.add_argument(
        "--language",
        dest="language",
        default=DEFAULT_LANGUAGE,
        help=T("Cli.Arg.Language"),
    )
    parser.add_argument("--list", dest="list_languages", action="store_true", help=T("Cli.Arg.List"))
    parser.add_argument("--all", dest="all_values", action="store_true", help=T("Cli.Arg.All"))
    parser.add_argument("--use-uid", dest="use_uid", action="store_true", help=T("Cli.Arg.UseUid"))
    parser.add_argument("--log-level", dest="log_level", default="WARNING")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    # Help texts come from the default language.
    with build_localizer() as help_localizer:
        asyncio.run(help_localizer.set_language(DEFAULT_LANGUAGE))
        args = build_parser(help_localizer).parse_args(argv)
        unknown_language = help_localizer.get_localized_string("Cli.UnknownLanguage")

    setup_logging(args.log_level.upper())

    with build_localizer(use_uid_when_not_found=args.use_uid) as localizer:
        try:
            if args.list_languages:
                for code in sorted(localizer.get_available_languages()):
                    print(f"{code}\t{language_name(code)}", flush=True)
                return 0

            asyncio.run(localizer.set_language(args.language))
            if localizer.get_current_language() != args.language:
                # Unknown languages are ignored by the localizer itself.
                print(unknown_language.format(language=args.language), file=sys.stderr, flush=True)
                return 2

            for uid in args.uids:
                if args.all_values:
                    for value in localizer.get_localized_strings(uid):
                        print(f"{uid}\t{value}", flush=True)
                else:
                    print(f"{uid}\t{localizer.get_localized_string(uid)}", flush=True)
        except LocalizerError as exc:
            print(str(exc), file=sys.stderr, flush=True)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
