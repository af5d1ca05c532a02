import random

import matplotlib.pyplot as plt

from config import SimulationConfig
from equations import Equations
from entities import Bubble

sizes = [0.2, 0.35, 0.5, 0.7, 0.9]   # nominal size parameter
N_trials = 20                        # random starting offsets per size
steps = 2000                         # micro-steps of dt per trial
dt = 1.0e-4


def lateral_drift(eq, size, x0, rho):
    """Track one bubble from rest and return its net horizontal displacement."""
    b = Bubble(x0, 0.0, size, rho=rho)
    for _ in range(steps):
        b.step(eq, dt)
    return b.x - x0


def main():
    cfg = SimulationConfig().validate()
    eq = Equations.from_config(cfg)
    lo, hi = cfg.spawn.x_range

    results = []
    for size in sizes:
        for _ in range(N_trials):
            x0 = random.uniform(lo, hi)
            results.append({
                "size": size,
                "x0": x0,
                "drift": lateral_drift(eq, size, x0, cfg.spawn.bubble_density),
            })

    for size in sizes:
        xs = [r["x0"] for r in results if r["size"] == size]
        ys = [r["drift"] for r in results if r["size"] == size]
        plt.scatter(xs, ys, label=f"size {size}")

    plt.xlabel("Starting offset from centerline (m)")
    plt.ylabel(f"Lateral drift after {steps * dt:.2f} s (m)")
    plt.legend()
    plt.show()


if __name__ == "__main__":
    main()
