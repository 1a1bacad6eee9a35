from .register import ALIASES, KNOWN_TYPES, VERSION, add_to_scheme, codec

__all__ = ["ALIASES", "KNOWN_TYPES", "VERSION", "add_to_scheme", "codec"]
