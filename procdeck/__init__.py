"""Terminal process manager building blocks: keys, key and mouse encoding, config values, selection, framing and clipboard."""

__version__ = "0.1.0"

__all__ = [
    "clipboard",
    "encode_term",
    "framing",
    "key",
    "mouse",
    "selection",
    "yaml_val",
]