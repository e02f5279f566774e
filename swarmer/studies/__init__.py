"""
Studies: runnable observations of the flock.

1. Flock - a full arena, with or without trees
"""
