"""
HTTP API for the story flow.
"""
