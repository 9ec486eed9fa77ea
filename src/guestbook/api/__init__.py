"""
HTTP surface for the guestbook.

Provides a FastAPI application factory. All persistence lives in
``guestbook.core`` and all markup in ``guestbook.render``; this package
handles only transport concerns: form parsing, error mapping, request
context.

Quick start::

    from guestbook.api import create_app

    app = create_app()  # ready for uvicorn
"""

from guestbook.api.app import create_app

__all__ = ["create_app"]
