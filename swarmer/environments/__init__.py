"""
Worlds for the flock to live in.

- obstacles: Static repellers (trees)
- arena: The walled host that spawns and steps a swarm
"""
