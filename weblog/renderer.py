from __future__ import annotations

from .config import FilterConfig
from .core.types import Comment, Entry
from .filters.pipeline import Chain, FilterPipeline
from .filters.registry import TransformRegistry, default_registry


class ContentRenderer:
    """Renders entry and comment text through the filter pipeline.

    Every configured chain is resolved on construction so a chain naming an
    unknown transform fails at start-up rather than on first render.
    """

    def __init__(self, cfg: FilterConfig, registry: TransformRegistry | None = None):
        self.cfg = cfg
        self.pipeline = FilterPipeline(registry or default_registry(), cfg.chains)
        self.comment_chain = self.pipeline.resolve(cfg.comment_filters)
        self.summary_chain = self.pipeline.resolve(cfg.summary_filters)
        for name in self.pipeline.chains:
            self.pipeline.resolve(name)

    def render(self, text: str | None, chain: Chain) -> str:
        return self.pipeline.apply(text, chain)

    def entry_body(self, entry: Entry) -> str:
        return self.pipeline.apply(entry.body, entry.effective_filter)

    def entry_summary(self, entry: Entry) -> str:
        return self.pipeline.apply(entry.summary, self.summary_chain)

    def comment_body(self, comment: Comment) -> str:
        return self.pipeline.apply(comment.body, self.comment_chain)
