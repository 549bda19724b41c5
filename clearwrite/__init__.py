"""
clearwrite - Rewrite text to be clearer and more concise using Gemini.
"""

__version__ = "0.1.0"
