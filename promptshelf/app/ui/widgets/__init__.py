"""Reusable widgets for browsing prompts and editing templates."""

from .placeholder_picker import PlaceholderPickerDialog
from .prompt_library_view import PromptLibraryView
from .submit_prompt_form import SubmitPromptForm
from .template_editor import PromptTemplateEdit

__all__ = [
    "PlaceholderPickerDialog",
    "PromptLibraryView",
    "PromptTemplateEdit",
    "SubmitPromptForm",
]
