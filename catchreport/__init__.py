"""Convert Catch2 XML test reports into test-runner JSON results."""

__version__ = "0.1.0"
__all__ = ["cli", "helpers", "results"]