"""Utility functions for clearwrite."""

import logging
import os
import re
import sys
from typing import List

from colorama import Fore, Style

_BLANK_LINES = re.compile(r'\n\s*\n')


def log_msg(msg: str, color=Fore.WHITE, emoji: str = '') -> None:
    """Print a formatted log message with optional color and emoji."""
    prefix = f"{emoji} " if emoji else ''
    print(f"{prefix}{color}{msg}{Style.RESET_ALL}")


def log_change(original: str, rewritten: str) -> None:
    """Show a before/after pair."""
    log_msg("Original:", Fore.RED, '📄')
    log_msg(original, Fore.RED)
    log_msg("Rewritten:", Fore.GREEN, '✨')
    log_msg(rewritten, Fore.GREEN)
    log_msg("-" * 80)


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(message)s',
        stream=sys.stderr,
    )


def split_paragraphs(text: str) -> List[str]:
    """Split text on blank lines, dropping empty chunks."""
    return [chunk.strip() for chunk in _BLANK_LINES.split(text) if chunk.strip()]


def get_output_filename(input_path: str) -> str:
    """Generate output filename by adding 'clean' before the extension."""
    base, ext = os.path.splitext(input_path)
    return f"{base}.clean{ext}"
