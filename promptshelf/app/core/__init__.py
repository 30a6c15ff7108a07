"""
Core components: placeholder engine, prompt library and submissions.
"""

from .placeholders import (
    Placeholder,
    PlaceholderInserter,
    PlaceholderRegistry,
    extract_placeholders,
    format_placeholders,
)
from .prompt_library import Page, Prompt, PromptLibrary, load_prompt_library, paginate
from .submission import PromptSubmission, SubmissionValidationError, submit_prompt

__all__ = [
    'Page',
    'Placeholder',
    'PlaceholderInserter',
    'PlaceholderRegistry',
    'Prompt',
    'PromptLibrary',
    'PromptSubmission',
    'SubmissionValidationError',
    'extract_placeholders',
    'format_placeholders',
    'load_prompt_library',
    'paginate',
    'submit_prompt',
]
