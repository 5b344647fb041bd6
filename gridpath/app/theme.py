# gridpath/app/theme.py
"""
Neon skin for the gridpath viewer (visuals only; no logic)
- Backdrop: dark vertical gradient, cached per window size
- Grid: flat tiles with black borders, translucent overlays for the search
- Path: neon mint, width pulse while running, colour pulse once done
- Right panel: frosted glass underlay (viewer draws buttons/metrics on top)

The colour helpers are pure so they can be checked without a display.
"""

from __future__ import annotations
import math
from typing import Dict, Tuple, Optional
import pygame

from gridpath.core.types import Node, Role

RGB = Tuple[int, int, int]
RGBA = Tuple[int, int, int, int]

# ---- palette ----
BLACK         = (0, 0, 0)
WHITE         = (255, 255, 255)
TEXT_LIGHT    = (230, 235, 240)
TEXT_DIM      = (150, 158, 170)
ACCENT_GOLD   = (255, 210, 0)
GREEN_NEON    = (0, 255, 200)
LIME          = (127, 255, 0)
MINT          = (144, 238, 144)
FLOOR         = (200, 200, 200)
WALL          = (34, 38, 46)
WEIGHT        = (139, 94, 60)

START_BLUE    = (70, 130, 180)
END_RED       = (220, 50, 47)
CHECKPOINT_GOLD = (240, 170, 30)

# search overlays
OVERLAYS: Dict[str, RGBA] = {
    "open":    (0, 150, 255, 110),
    "closed":  (255, 0, 120, 90),
    "second":  (150, 60, 255, 100),   # second phase of a checkpoint run
    "probe":   (120, 120, 120, 90),   # abandoned first phase before a fallback
    "current": (255, 255, 255, 140),
}

# panel colors
PANEL_FILL    = (18, 20, 28, 190)
PANEL_SHADOW  = (0, 0, 0, 140)
CARD_BG       = (24, 28, 36, 220)
CARD_HI       = (255, 255, 255, 18)

BUTTON_IDLE   = (36, 40, 48, 220)
BUTTON_HOVER  = (46, 50, 60, 230)
BUTTON_LIT    = (58, 86, 160, 235)
BUTTON_OUTLINE = (120, 170, 255, 255)

GRADIENT_TOP  = (24, 26, 32)
GRADIENT_BOT  = (36, 40, 48)

_gradient_cache: Dict[Tuple[int, int], pygame.Surface] = {}
_overlay_cache: Dict[Tuple[Tuple[int, int], RGBA], pygame.Surface] = {}


# ---------- pure colour helpers ----------
def blend(a: RGB, b: RGB, k: float) -> RGB:
    """Linear mix, k=0 -> a, k=1 -> b (clamped)."""
    k = max(0.0, min(1.0, k))
    return (
        int(a[0] + (b[0] - a[0]) * k),
        int(a[1] + (b[1] - a[1]) * k),
        int(a[2] + (b[2] - a[2]) * k),
    )


def tile_color(node: Node) -> RGB:
    if node.role is Role.START:
        return START_BLUE
    if node.role is Role.END:
        return END_RED
    if node.role is Role.CHECKPOINT:
        return CHECKPOINT_GOLD
    if node.is_wall:
        return WALL
    if node.weight:
        return WEIGHT
    return FLOOR


def role_letter(role: Role) -> str:
    return {Role.START: "S", Role.END: "E", Role.CHECKPOINT: "C"}.get(role, "")


def path_style(t: float, done: bool) -> Tuple[RGB, int]:
    """Path colour and stroke width at time t (seconds)."""
    if done:
        k = 0.5 * (1.0 + math.sin(t * 8.0))
        return blend(LIME, MINT, k), 6
    return GREEN_NEON, max(5, int(4 + 1.2 * abs(math.sin(t * 2.0))))


# ---------- drawing helpers ----------
def _rounded_rect(surface: pygame.Surface, rect: pygame.Rect, color, radius=16, width=0):
    pygame.draw.rect(surface, color, rect, width=width, border_radius=radius)


def glass_panel(screen: pygame.Surface, rect: pygame.Rect,
                fill_rgba=PANEL_FILL, shadow_rgba=PANEL_SHADOW):
    if rect.width <= 0 or rect.height <= 0:
        return
    shadow = pygame.Surface((rect.width + 18, rect.height + 18), pygame.SRCALPHA)
    _rounded_rect(shadow, pygame.Rect(9, 9, rect.width, rect.height), shadow_rgba, radius=20)
    screen.blit(shadow, (rect.x - 9, rect.y - 9))
    card = pygame.Surface(rect.size, pygame.SRCALPHA)
    _rounded_rect(card, pygame.Rect(0, 0, rect.width, rect.height), fill_rgba, radius=20)
    # subtle top sheen
    hi = pygame.Surface((rect.width, max(18, rect.height // 12)), pygame.SRCALPHA)
    pygame.draw.rect(hi, (255, 255, 255, 18), hi.get_rect(), border_radius=18)
    card.blit(hi, (0, 0))
    screen.blit(card, rect.topleft)


def card(screen: pygame.Surface, rect: pygame.Rect):
    surf = pygame.Surface(rect.size, pygame.SRCALPHA)
    pygame.draw.rect(surf, CARD_BG, surf.get_rect(), border_radius=14)
    hi = pygame.Surface((rect.width, 24), pygame.SRCALPHA)
    pygame.draw.rect(hi, CARD_HI, hi.get_rect(), border_radius=14)
    surf.blit(hi, (0, 0))
    screen.blit(surf, rect.topleft)


def draw_backdrop(screen: pygame.Surface):
    """Gradient backdrop, rendered once per window size."""
    size = screen.get_size()
    if size not in _gradient_cache:
        w, h = size
        surf = pygame.Surface(size)
        for y in range(h):
            pygame.draw.line(surf, blend(GRADIENT_TOP, GRADIENT_BOT, y / max(1, h - 1)), (0, y), (w, y))
        _gradient_cache.clear()
        _gradient_cache[size] = surf
    screen.blit(_gradient_cache[size], (0, 0))


def fill_alpha(screen: pygame.Surface, rect: pygame.Rect, rgba: RGBA):
    key = (rect.size, rgba)
    s: Optional[pygame.Surface] = _overlay_cache.get(key)
    if s is None:
        s = pygame.Surface(rect.size, pygame.SRCALPHA)
        s.fill(rgba)
        _overlay_cache[key] = s
    screen.blit(s, rect.topleft)


def draw_path(screen: pygame.Surface, pts, t: float, done: bool):
    if len(pts) < 2:
        return
    col, width = path_style(t, done)
    glow = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
    pygame.draw.lines(glow, (col[0], col[1], col[2], 70), False, pts, width + 2)
    screen.blit(glow, (0, 0), special_flags=pygame.BLEND_ADD)
    pygame.draw.lines(screen, col, False, pts, width)


def button_fill(lit: bool, hover: bool) -> RGBA:
    if lit:
        return BUTTON_LIT
    return BUTTON_HOVER if hover else BUTTON_IDLE


def button(screen: pygame.Surface, rect: pygame.Rect, lit: bool = False, hover: bool = False):
    """Rounded panel button with a top sheen; lit buttons get an outline."""
    surf = pygame.Surface(rect.size, pygame.SRCALPHA)
    pygame.draw.rect(surf, button_fill(lit, hover), surf.get_rect(), border_radius=10)
    hi = pygame.Surface((rect.width, 14), pygame.SRCALPHA)
    pygame.draw.rect(hi, CARD_HI, hi.get_rect(), border_radius=10)
    surf.blit(hi, (0, 0))
    screen.blit(surf, rect.topleft)
    if lit:
        pygame.draw.rect(screen, BUTTON_OUTLINE, rect, width=2, border_radius=10)
