"""
Lingobot Gateway: HTTP front door for several hosted LLM APIs, with
cross-provider fallback, per-model fallback and retry with backoff.
Layout: api/, core/, providers/, schemas/, services/.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
