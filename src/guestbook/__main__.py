"""``python -m guestbook`` entry point."""

from guestbook.cli.app import app

if __name__ == "__main__":
    app()
