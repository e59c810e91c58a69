"""Console front end: describe every character of the given text."""

import argparse
import sys
from typing import List, Optional

from CharacterInformation.dictionary import CharacterLookupTable
from CharacterInformation.errors import CharacterInformationError
from CharacterInformation.report import describe_text, format_statistics
from CharacterInformation.segmenter import iter_user_characters
from CharacterInformation.util.config.configuration import Config, get_config, reload_config
from CharacterInformation.util.logging_config import cleanup_old_logs, logger, set_level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="charinfo",
        description="Look up JIS level, jouyou/jinmeiyou, e-Tax, grade and NISA information per character"
    )
    parser.add_argument(
        "text",
        nargs="*",
        help="Text to describe (interactive prompt when omitted)"
    )
    parser.add_argument(
        "--dictionary",
        type=str,
        default=None,
        help="Dictionary file to load (default: configured path, then the bundled sample)"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Configuration file to use instead of the one in the app directory"
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print record statistics after loading"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print one JSON record per character instead of the text report"
    )
    return parser


def load_table(path: Optional[str]) -> CharacterLookupTable:
    if path:
        return CharacterLookupTable.from_file(path)
    return CharacterLookupTable.bundled()


def render(table: CharacterLookupTable, text: str, as_json: bool) -> str:
    if not as_json:
        return describe_text(table, text)
    return "\n".join(table.lookup_or_default(chars).to_json(ensure_ascii=False)
                     for chars in iter_user_characters(text))


def interactive_loop(table: CharacterLookupTable, config: Config, as_json: bool):
    while True:
        print(config.display.prompt)
        try:
            text = input()
        except (EOFError, KeyboardInterrupt):
            return
        print(render(table, text, as_json))
        print()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    config = reload_config(args.config) if args.config else get_config()
    try:
        set_level(config.logging.console_level, config.logging.file_level)
    except ValueError as e:
        logger.error(f"Invalid logging level in configuration: {e}")
        return 1
    cleanup_old_logs(config.logging.retention_days)

    path = args.dictionary or config.get_dictionary_path()
    try:
        table = load_table(path)
    except (CharacterInformationError, OSError) as e:
        logger.error(f"Failed to load dictionary {path or '(bundled)'}: {e}")
        return 1

    if args.stats or config.display.show_statistics:
        print(format_statistics(table))

    as_json = args.json or config.display.output_json
    if args.text:
        print(render(table, " ".join(args.text), as_json))
        return 0

    interactive_loop(table, config, as_json)
    return 0


if __name__ == "__main__":
    sys.exit(main())
