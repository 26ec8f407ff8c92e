"""Helpers for small Rust exercises: terminal messages, rust-analyzer project files and worked answers."""

__version__ = "5.5.1"