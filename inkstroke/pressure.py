"""Velocity-based pressure simulation."""


def simulate_pressure(prev: float, distance: float, size: float) -> float:
    """Next simulated pressure after a segment of length distance.

    Short segments (slow pen) pull pressure toward 1, long segments toward 0.
    """
    release = min(1 - distance / size, 1)
    speed = min(distance / size, 1)
    return min(1, prev + (release - prev) * speed / 2)
