"""System information layouts, one module per stealer family.

Every public module defines a module-level ``LAYOUT`` which the adapter registry
discovers on import. Modules whose name starts with an underscore hold shared
helpers and are skipped.
"""
