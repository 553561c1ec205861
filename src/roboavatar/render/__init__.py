"""Avatar rendering -- compositing and encoding."""

from roboavatar.render.image import build_image, encode_png, to_base64

__all__ = ["build_image", "encode_png", "to_base64"]
