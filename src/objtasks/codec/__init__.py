from objtasks.codec.json_codec import decode_with_template, encode_to_text

__all__ = ["encode_to_text", "decode_with_template"]
