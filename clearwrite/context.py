"""Writing context: previously submitted snippets and the desired tone."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Iterable, Optional, Tuple

CONTEXT_SEPARATOR = "\n\n"


@dataclass(frozen=True)
class WritingContext:
    """Snapshot of the context used for prompt construction."""
    items: Tuple[str, ...] = ()
    tone: Optional[str] = None


@dataclass
class HistoryItem:
    """A text the user submitted earlier, with its rewrite if there was one."""
    text: str
    rewritten: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.now)


class ContextManager:
    """Mutates a writing-context store, always publishing a fresh snapshot."""

    def __init__(self, store):
        self.store = store

    @property
    def current(self) -> WritingContext:
        return self.store.get()

    def add_to_context(self, text: str) -> None:
        """Append a snippet, ignoring empty or whitespace-only text."""
        if not text or not text.strip():
            return
        self.store.update(lambda ctx: replace(ctx, items=ctx.items + (text.strip(),)))

    def has_context(self) -> bool:
        return len(self.current.items) > 0

    def clear_context(self) -> None:
        """Drop every snippet and the tone."""
        self.store.set(WritingContext())

    def set_history_as_context(self, history: Iterable[HistoryItem]) -> None:
        """Replace the snippets with the texts of the given history, keeping the tone."""
        texts = tuple(item.text for item in history)
        self.store.update(lambda ctx: replace(ctx, items=texts))

    def set_tone(self, tone: Optional[str]) -> None:
        self.store.update(lambda ctx: replace(ctx, tone=tone))

    def get_current_tone(self) -> Optional[str]:
        return self.current.tone

    def get_context_string(self) -> str:
        """Join all snippets with a blank line, or return '' when there are none."""
        return context_string(self.current)


def context_string(ctx: WritingContext) -> str:
    if not ctx.items:
        return ""
    return CONTEXT_SEPARATOR.join(ctx.items)
