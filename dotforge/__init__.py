"""Symlink, backup and scanning helpers for managing dotfiles, with a command-line entry point."""

__version__ = "0.2.0"