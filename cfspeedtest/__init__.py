"""Duration parsing, unit formatting and exit statuses for speed-test tools."""

__version__ = "1.2.0"
__all__ = ["duration", "exitcodes", "units"]