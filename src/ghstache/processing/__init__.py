"""
ghstache.processing – Text helpers (trim, split, HTML escaping).
"""
from .text_ops import html_escape, split, trim

__all__ = ["html_escape", "split", "trim"]
