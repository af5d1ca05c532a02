import logging

from config import SimulationConfig
from equations import build_simulation
from ui import UI


def apply_input(ui, sim_clock, population):
    """Apply pause and pick requests; only ever called between ticks."""
    if ui.paused and sim_clock.running:
        sim_clock.stop()
    elif not ui.paused and not sim_clock.running:
        sim_clock.start()

    index = ui.take_pick()
    if index is not None:
        sim_clock.stop()
        population.pick(index)
        if not ui.paused:
            sim_clock.start()


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    cfg = SimulationConfig()
    ui = UI(width=900, height=700, bounds=cfg.bounds)
    ui.display_intro()

    cfg.channel.peak_velocity, cfg.spawn.cap = ui.get_user_choices(
        default_velocity=cfg.channel.peak_velocity, default_cap=cfg.spawn.cap
    )

    population, sim_clock = build_simulation(cfg)
    population.add_listener(ui)

    ui.init_scene()
    sim_clock.start()

    running = True
    elapsed = 0.0
    while running:
        running = ui.handle_events()
        apply_input(ui, sim_clock, population)
        sim_clock.advance(elapsed)

        ui.update_display(sim_clock, population)
        elapsed = ui.flip()

    ui.shutdown()


if __name__ == "__main__":
    main()
