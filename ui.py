import logging
import sys

import pygame

from entities import SimulationListener

logger = logging.getLogger("bubble_sim")


class UI(SimulationListener):
    def __init__(self, width=900, height=700, bounds=None):
        self.width = width
        self.height = height
        self.screen = None
        self.clock = None
        self.font = None
        self.small_font = None

        # Channel window in simulation units
        if bounds is not None:
            self.x_min, self.x_max, self.y_top = bounds.x_min, bounds.x_max, bounds.y_top
        else:
            self.x_min, self.x_max, self.y_top = -0.25, 0.25, 1.2
        self.view_height = 1.0       # m of channel visible below y_top
        self.bubble_radius_px = 22   # radius at size 1.0

        # Layout: left panel (200px) | channel
        self.left_panel_width = 200
        self.viz_left = self.left_panel_width
        self.viz_right = self.width
        self.margin_top = 20
        self.margin_bottom = 20

        # Mirror of the population, index for index
        self.sprites = []

        # Input state
        self.paused = False
        self.pending_pick = None
        # Wall-clock seconds spent unpaused, for the HUD rate readout
        self.wall_time = 0.0

        # Colors
        self.water_color = (18, 70, 120)
        self.wall_color = (90, 110, 130)
        self.bubble_color = (200, 235, 255)
        self.bubble_edge = (240, 250, 255)
        self.panel_bg = (20, 25, 40)
        self.panel_border = (60, 70, 100)
        self.text_color = (220, 220, 220)
        self.header_color = (100, 180, 255)

    def display_intro(self):
        print("=== Bubble Channel Simulator ===")
        print("Air bubbles are released into a water channel with a parabolic")
        print("velocity profile. Click a bubble to pop it, Space pauses.\n")

    def get_user_choices(self, default_velocity=1.0, default_cap=50):
        while True:
            s = input(f"Peak centerline velocity in m/s [{default_velocity}]: ").strip()
            if s == "":
                velocity = default_velocity
                break
            try:
                velocity = float(s)
                if velocity <= 0.0:
                    raise ValueError
                break
            except ValueError:
                print("Please enter a positive number.")

        while True:
            s = input(f"Maximum number of bubbles [{default_cap}]: ").strip()
            if s == "":
                cap = default_cap
                break
            try:
                cap = int(s)
                if cap < 1:
                    raise ValueError
                break
            except ValueError:
                print("Please enter a positive whole number.")

        print(f"\nSelection → Velocity: {velocity} m/s, Max bubbles: {cap}\n")
        return velocity, cap

    def init_scene(self):
        pygame.init()
        pygame.display.set_caption("Bubble Channel Simulator")
        self.screen = pygame.display.set_mode((self.width, self.height))
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("consolas", 16)
        self.small_font = pygame.font.SysFont("consolas", 13)
        self.sprites.clear()

    # Population events

    def bubble_spawned(self, index, x, y, size):
        self.sprites.insert(index, [x, y, size])

    def bubble_removed(self, index):
        del self.sprites[index]

    def bubbles_moved(self, snapshot):
        if len(snapshot) != len(self.sprites):
            logger.warning("Renderer out of sync: %d sprites, %d bubbles", len(self.sprites), len(snapshot))
            return
        for i, x, y in snapshot:
            self.sprites[i][0] = x
            self.sprites[i][1] = y

    # Input

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return False
                if event.key == pygame.K_SPACE or event.key == pygame.K_p:
                    self.paused = not self.paused
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                hit = self.bubble_at(event.pos)
                if hit is not None:
                    self.pending_pick = hit
        return True

    def take_pick(self):
        index, self.pending_pick = self.pending_pick, None
        return index

    def bubble_at(self, pos):
        """Ordinal index of the topmost bubble under `pos`, or None."""
        px, py = pos
        for i in range(len(self.sprites) - 1, -1, -1):
            x, y, size = self.sprites[i]
            cx, cy = self.to_screen(x, y)
            r = self.radius_px(size)
            if (px - cx) ** 2 + (py - cy) ** 2 <= r * r:
                return i
        return None

    # Drawing

    def to_screen(self, x, y):
        viz_width = self.viz_right - self.viz_left
        viz_height = self.height - self.margin_top - self.margin_bottom
        fx = (x - self.x_min) / (self.x_max - self.x_min)
        fy = (y - (self.y_top - self.view_height)) / self.view_height
        sx = self.viz_left + viz_width * fx
        sy = self.height - self.margin_bottom - viz_height * fy
        return int(sx), int(sy)

    def radius_px(self, size):
        return max(2, int(self.bubble_radius_px * size))

    def draw_status_panel(self, lines):
        width, height = self.left_panel_width, 30 + 15 * len(lines) + 8
        pygame.draw.rect(self.screen, self.panel_bg, pygame.Rect(0, 0, width, height))
        pygame.draw.rect(self.screen, self.panel_border, pygame.Rect(0, 0, width, height), 1)
        self.screen.blit(self.font.render("Channel Status", True, self.header_color), (8, 5))
        for i, line in enumerate(lines):
            surf = self.small_font.render(line, True, self.text_color)
            self.screen.blit(surf, (8, 30 + 15 * i))

    def update_display(self, sim_clock, population):
        self.screen.fill(self.water_color)

        # Walls
        pygame.draw.line(self.screen, self.wall_color, (self.viz_left, 0), (self.viz_left, self.height), 3)
        pygame.draw.line(self.screen, self.wall_color, (self.viz_right - 2, 0), (self.viz_right - 2, self.height), 3)

        for x, y, size in self.sprites:
            pos = self.to_screen(x, y)
            r = self.radius_px(size)
            pygame.draw.circle(self.screen, self.bubble_color, pos, r)
            pygame.draw.circle(self.screen, self.bubble_edge, pos, r, 1)

        # Simulated time falls behind wall time once ticks get capped per frame
        rate = sim_clock.sim_time / self.wall_time if self.wall_time > 0.0 else 0.0
        hud_lines = [
            f"Sim time: {sim_clock.sim_time:8.3f} s",
            f"Rate: {rate:.2f}x real time",
            f"Ticks: {sim_clock.counter}",
            f"Bubbles: {len(population)}/{population.cap}",
            f"Retired: {population.retired_total}",
            f"State: {sim_clock.state}",
        ]
        if len(population):
            mean_v = sum(b.v for b in population) / len(population)
            hud_lines.append(f"Mean v: {mean_v:.3f} m/s")
        self.draw_status_panel(hud_lines)

        if self.paused:
            self.draw_pause_overlay(sim_clock.counter, len(population))
        self.draw_controls_hint()

    def draw_pause_overlay(self, ticks, live):
        """Dim the channel and show where the run stopped."""
        overlay = pygame.Surface((self.viz_right - self.viz_left, self.height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 110))
        self.screen.blit(overlay, (self.viz_left, 0))

        cx = (self.viz_left + self.viz_right) // 2
        cy = self.height // 2
        title = self.font.render("PAUSED", True, (255, 255, 255))
        self.screen.blit(title, title.get_rect(center=(cx, cy - 12)))
        info = self.small_font.render(f"tick {ticks}  |  {live} bubbles", True, self.text_color)
        self.screen.blit(info, info.get_rect(center=(cx, cy + 12)))

    def draw_controls_hint(self):
        hint_text = "[Click] Pop  |  [Space/P] Pause  |  [Esc] Quit"
        surf = self.small_font.render(hint_text, True, (150, 150, 150))
        self.screen.blit(surf, (self.viz_left + 10, self.height - 18))

    def flip(self):
        pygame.display.flip()
        elapsed = self.clock.tick(60) / 1000.0
        if not self.paused:
            self.wall_time += elapsed
        return elapsed

    def shutdown(self):
        pygame.quit()
        sys.exit()
