"""
YouTube Synthesis.

Fetches YouTube metadata and transcripts and uses an OpenAI chat model to
analyze single videos or synthesize themes and titles across several.
"""

from .core.config import config

__version__ = config.app.version
