"""Donorbase - donor and donation registries over a key-value store.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
