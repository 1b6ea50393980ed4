"""Service exports."""

from .text_cleaner import clean_cv_text, split_lines

__all__ = ["clean_cv_text", "split_lines"]
