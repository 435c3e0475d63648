"""Post Store Application Package: blog post persistence with ownership rules.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
