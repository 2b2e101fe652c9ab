"""Adapter package for concrete port implementations.

Purpose:
    Collect implementations of the persistence ports (in-memory services) and
    local storage for form settings.

Dependencies:
    Submodules depend on the standard library, domain entities and errors.

Call context:
    Imported by the app composition root for runtime wiring and by tests.
"""
