"""Pattern generators. Importing this package registers all six."""

from sigil.engine.patterns import classic, geometric, orbital, scatter, spiral, wave  # noqa: F401
