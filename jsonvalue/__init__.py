"""In-memory JSON values with strict checks, ordered objects and loop-safe copying."""

__version__ = "2.14.0"

__all__ = ["base", "containers", "lookup3", "strconv", "utf8", "version"]