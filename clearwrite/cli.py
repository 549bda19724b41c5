"""Command line interface for clearwrite."""
import sys
import argparse
from typing import List, Optional

from colorama import Fore, init

from clearwrite.config import Config, find_config
from clearwrite.core import Rewriter
from clearwrite.errors import ClearwriteError
from clearwrite.utils import log_msg, setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='clearwrite: rewrite text to be clearer and more concise')
    parser.add_argument('text', nargs='?', help='Text to rewrite (reads stdin when omitted)')
    parser.add_argument('--file', '-f', help='Rewrite a text file paragraph by paragraph')
    parser.add_argument('--output', '-o', help='Output path for --file (default: <name>.clean<ext>)')
    parser.add_argument('--tone', '-t', help='Desired tone, e.g. formal')
    parser.add_argument('--context-file', action='append', default=[],
                        help='File whose contents are added as context (repeatable)')
    parser.add_argument('--no-context', action='store_true', help='Ignore accumulated context and tone')
    parser.add_argument('--backend', choices=['rest', 'sdk'], help='API backend to use')
    parser.add_argument('--model', help='Gemini model name')
    parser.add_argument('--api-key', help='API key to save in the session store for this run')
    parser.add_argument('--config', '-c', help='Path to config file (default: search for clearwrite.yaml)')
    parser.add_argument('--list-tones', action='store_true', help='List suggested tones')
    parser.add_argument('--verbose', '-v', action='store_true', help='Show debug logging and before/after output')
    return parser


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point for the clearwrite command line tool."""
    init(autoreset=True)
    if args is None:
        args = sys.argv[1:]

    parsed_args = build_parser().parse_args(args)
    setup_logging(parsed_args.verbose)

    try:
        config = Config(parsed_args.config or find_config())
    except ValueError as e:
        log_msg(f"Error: {e}", Fore.RED, '❌')
        return 1
    config.update({'backend': parsed_args.backend, 'model': parsed_args.model})

    if parsed_args.list_tones:
        print("Suggested tones:")
        for tone in config['tones']:
            print(f"  - {tone}")
        return 0

    rewriter = Rewriter(config)
    if parsed_args.api_key:
        rewriter.keys.save_api_key(parsed_args.api_key)

    if parsed_args.tone:
        rewriter.context.set_tone(parsed_args.tone)
    try:
        for path in parsed_args.context_file:
            with open(path, 'r', encoding='utf-8') as f:
                rewriter.context.add_to_context(f.read())
    except (OSError, UnicodeDecodeError) as e:
        log_msg(f"Error reading context file: {e}", Fore.RED, '❌')
        return 1

    try:
        if parsed_args.file:
            outfile = rewriter.rewrite_file(parsed_args.file, parsed_args.output,
                                            remember=not parsed_args.no_context,
                                            use_context=not parsed_args.no_context,
                                            verbose=parsed_args.verbose)
            log_msg(f"Saved to {outfile}", Fore.GREEN, '💾')
            return 0

        text = parsed_args.text if parsed_args.text is not None else sys.stdin.read()
        if not text.strip():
            log_msg("Error: No text given. Pass TEXT, --file or pipe text on stdin.", Fore.RED, '❌')
            return 1

        result = rewriter.rewrite_text(text, use_context=not parsed_args.no_context)
        print(result)
        return 0
    except (ClearwriteError, OSError, ValueError) as e:
        log_msg(f"Error: {e}", Fore.RED, '❌')
        return 1


if __name__ == "__main__":
    sys.exit(main())
