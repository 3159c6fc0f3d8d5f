"""Server-side form actions for the invoicing dashboard."""

__version__ = "0.1.0"
