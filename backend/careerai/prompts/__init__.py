"""Prompt templates for LLM interactions.

Modules:
    career: Career suggestions, learning roadmap, resume feedback prompts
        and chat persona instructions
"""
