"""
Ways of watching: shapes to draw, metrics to track, a renderer.
"""
