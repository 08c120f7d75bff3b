"""
viewcore - link resolution and access decisions for server-rendered pages.
"""
