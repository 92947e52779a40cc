"""Provider adapters - Legacy Directions JSON decoding and mapping."""

from .mapper import clean_instruction, decode_envelope, map_directions_payload

__all__ = ["clean_instruction", "decode_envelope", "map_directions_payload"]
