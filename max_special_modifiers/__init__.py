"""Max Special Modifiers: forced and maximized special affixes."""

__version__ = "1.0.0"
