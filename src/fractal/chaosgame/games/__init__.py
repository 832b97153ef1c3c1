"""Chaos games. Every public module exposes ``build()``."""
