"""framesync UI generation helpers."""
