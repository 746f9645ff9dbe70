"""Command-line interface for capscope."""
