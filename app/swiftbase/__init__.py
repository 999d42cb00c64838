"""swiftbase - message-key localization engine.

Resolves strongly identified message keys into formatted, per-language text
with a fallback chain, and reports missing translations per language.
"""

__version__ = "0.1.0"
