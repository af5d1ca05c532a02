import math
import random

from config import SimulationConfig
from equations import build_simulation


def run_case(peak_velocity=1.0, width=1.0, cap=50, ticks=2000, seed=0, max_recycles=None):
    """Run the simulation headless and return one row per tick."""
    cfg = SimulationConfig(max_recycles=max_recycles)
    cfg.channel.peak_velocity = peak_velocity
    cfg.channel.width = width
    cfg.spawn.cap = cap

    population, clock = build_simulation(cfg, rng=random.Random(seed))
    clock.start()

    results = []
    for _ in range(ticks):
        clock.tick()
        n = len(population)
        if n:
            mean_x = sum(b.x for b in population) / n
            mean_y = sum(b.y for b in population) / n
            mean_speed = sum(b.speed for b in population) / n
        else:
            mean_x = mean_y = mean_speed = math.nan
        results.append({
            "time": clock.sim_time,
            "count": n,
            "mean_x": mean_x,
            "mean_y": mean_y,
            "mean_speed": mean_speed,
            "retired": population.retired_total,
        })
    clock.stop()
    return results


if __name__ == "__main__":
    data = run_case(peak_velocity=1.0, width=1.0, ticks=3000)
    for row in data[::250]:
        print(f"{row['time']:6.3f}s | n={row['count']:3d} | x̄={row['mean_x']:+.4f} m | "
              f"ȳ={row['mean_y']:.4f} m | |v|={row['mean_speed']:.4f} m/s")
