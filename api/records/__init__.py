"""
Generic entity mapping, persistence and HTTP handlers shared by every collection.
"""
