class ChannelWalls:
    """
    Mirror reflection off two vertical walls plus a top recycle.

    Reflections are undamped: position is mirrored about the wall and the
    normal velocity flips sign. A bubble leaving through the top reappears at
    y = 0 with its horizontal position and velocity unchanged.
    """

    def __init__(self, x_min: float, x_max: float, y_top: float):
        if not x_min < x_max:
            raise ValueError(f"x_min ({x_min}) must be below x_max ({x_max})")
        if y_top <= 0.0:
            raise ValueError("y_top must be positive")
        self.x_min = float(x_min)
        self.x_max = float(x_max)
        self.y_top = float(y_top)

    def apply(self, bubble) -> bool:
        """Clamp `bubble` into the domain. Returns True if it was recycled."""
        if bubble.x < self.x_min:
            bubble.x = self.x_min - (bubble.x - self.x_min)
            bubble.u = -bubble.u
        elif bubble.x >= self.x_max:
            bubble.x = self.x_max - (bubble.x - self.x_max)
            bubble.u = -bubble.u

        if bubble.y >= self.y_top:
            bubble.y = 0.0
            return True
        return False
