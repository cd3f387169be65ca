"""Domain layer — checksum rules and the validated IMEI type.

This layer depends only on the standard library and never logs.
It must never import from adapters.
"""
