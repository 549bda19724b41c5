"""Rewrite orchestration: key guard, prompt assembly, loading flag, backend call."""

import logging
import time
from typing import Iterable, List, Optional

from tqdm import tqdm

from clearwrite import utils
from clearwrite.config import Config
from clearwrite.context import ContextManager
from clearwrite.errors import ClearwriteError
from clearwrite.keys import APIKeyManager, SessionStore
from clearwrite.llm import build_service
from clearwrite.prompts import build_prompt
from clearwrite.state import AppState

logger = logging.getLogger(__name__)


class Rewriter:
    """Rewrites text through the configured Gemini backend.

    All collaborators are optional so a front-end can share its own state,
    key manager and context with the rewriter.
    """

    def __init__(self, config: Optional[Config] = None, state=None,
                 keys: Optional[APIKeyManager] = None,
                 context: Optional[ContextManager] = None,
                 service_factory=build_service):
        self.config = config or Config()
        self.state = state or AppState()
        self.keys = keys or APIKeyManager(self.state, SessionStore())
        self.context = context or ContextManager(self.state.writing_context)
        self.service_factory = service_factory
        self.keys.initialize_api_key_state()

    def build_prompt(self, text: str, use_context: bool = True) -> str:
        if not use_context:
            return build_prompt(text)
        return build_prompt(text, self.context.get_context_string(), self.context.get_current_tone())

    def rewrite_text(self, text: str, use_context: bool = True) -> str:
        """Rewrite one text and return the trimmed result.

        Raises MissingAPIKeyError before any network call when no key
        resolves. Backend errors are logged and re-raised unchanged.
        """
        try:
            api_key = self.keys.require_api_key()
            service = self.service_factory(self.config, api_key)
        except (ClearwriteError, ValueError) as e:
            logger.error(f"Error in rewrite_text: {e}")
            raise

        prompt = self.build_prompt(text, use_context)

        self.state.is_loading.set(True)
        try:
            start_time = time.time()
            result = service.generate(prompt)
            logger.debug(f"LLM call took {time.time() - start_time:.2f} seconds")
            return result
        except Exception as e:
            logger.error(f"Error in rewrite_text: {e}")
            raise
        finally:
            self.state.is_loading.set(False)

    def rewrite_paragraphs(self, paragraphs: Iterable[str], remember: bool = True,
                           use_context: bool = True, show_progress: bool = False) -> List[str]:
        """Rewrite paragraphs in order, optionally feeding each one into the context."""
        paragraphs = list(paragraphs)
        results = []
        for paragraph in tqdm(paragraphs, desc="Rewriting", disable=not show_progress):
            if not paragraph.strip():
                results.append(paragraph)
                continue
            rewritten = self.rewrite_text(paragraph, use_context)
            results.append(rewritten)
            if remember:
                self.context.add_to_context(paragraph)
        return results

    def rewrite_file(self, infile: str, outfile: Optional[str] = None,
                     remember: bool = True, use_context: bool = True,
                     verbose: bool = False) -> str:
        """Rewrite a text file paragraph by paragraph and return the output path."""
        outfile = outfile or utils.get_output_filename(infile)

        with open(infile, 'r', encoding='utf-8') as f:
            paragraphs = utils.split_paragraphs(f.read())

        rewritten = self.rewrite_paragraphs(paragraphs, remember=remember,
                                            use_context=use_context, show_progress=True)
        if verbose:
            for original, new_text in zip(paragraphs, rewritten):
                utils.log_change(original, new_text)

        with open(outfile, 'w', encoding='utf-8') as f:
            f.write("\n\n".join(rewritten) + "\n")
        return outfile
