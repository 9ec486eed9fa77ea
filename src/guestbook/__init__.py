"""
Guestbook - sign and read a shared list of messages.

Packages:
- guestbook.core: store bootstrap, entry repository, errors, logging, settings
- guestbook.render: Jinja2 rendering of entries and the home page
- guestbook.api: FastAPI application
- guestbook.cli: Typer command line
"""

__version__ = "0.1.0"
