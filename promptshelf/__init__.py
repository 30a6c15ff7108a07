"""PromptShelf: browse, edit and submit AI prompt templates."""

__version__ = "0.1.0"
