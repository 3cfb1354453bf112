"""
Simulation systems, in per-frame order: combat (fire control), spawner,
movement, collision_manager.
"""
