"""Application package for PromptShelf."""
