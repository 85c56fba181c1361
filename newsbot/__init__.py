"""NewsBot: retrieval-augmented chat over a news article corpus."""

__version__ = "0.1.0"
