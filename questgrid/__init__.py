"""Grid-based hero adventure simulation driven by CSV scenario files."""

__version__ = "0.1.0"