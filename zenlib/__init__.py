"""Type utilities: checked numeric conversions, constraint checks, range views and type-erased holders."""

__version__ = "1.0.0"
__all__ = ["type_convert", "concepts", "ranges", "type_erasure"]