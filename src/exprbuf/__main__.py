"""Allow running as ``python -m exprbuf``."""

from exprbuf.cli import app

app()
