"""AI Resume Builder backend: resume optimization and career documents via LLMs."""

__version__ = "1.0.0"
