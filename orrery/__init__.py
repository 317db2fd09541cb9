"""Toy orrery: pairwise Newtonian gravity and RGBA rasterization of a star and its planets."""
