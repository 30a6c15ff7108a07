#!/usr/bin/env python3
"""Entry point for the PromptShelf template editor."""


def main() -> int:
    """Launch the main window."""
    from promptshelf.app.main_window import main as run

    print("Starting PromptShelf...")
    return run()


if __name__ == "__main__":
    raise SystemExit(main())
