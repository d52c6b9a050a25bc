"""
QuadCalc Configuration Settings
"""
import os

# Application Settings
APP_NAME = "QuadCalc"
VERSION = "1.0.0"

# Engine Settings
MAX_DIGITS = 15          # digits per entry; also significant digits shown for results

# Display Settings
WINDOW_WIDTH = 360
WINDOW_HEIGHT = 520
HISTORY_WIDTH = 260
DISPLAY_FONT = ("Consolas", 28, "bold")
EXPRESSION_FONT = ("Consolas", 13)
BUTTON_FONT = ("Segoe UI", 14)
LABEL_FONT = ("Segoe UI", 11)

# ── Neumorphic Palettes ────────────────────────────────────────────────────────

# LIGHT palette  – soft sage-green background
NEU_LIGHT = {
    "bg":           "#DDE6ED",   # base surface
    "bg_dark":      "#C8D4DF",   # pressed / inset
    "shadow_dark":  "#B2BFC8",
    "shadow_lite":  "#FFFFFF",
    "display_bg":   "#C8D4DF",
    "display_fg":   "#1A2332",
    "subtext":      "#6E8090",   # expression line
    "error_fg":     "#B03A2E",   # primary display while an error is latched
    "btn_bg":       "#DDE6ED",
    "btn_fg":       "#2B3A4A",
    "operator_fg":  "#1E7A56",
    "clear_fg":     "#B07D1E",
    "equals_bg":    "#2E8B57",
    "equals_fg":    "#FFFFFF",
    "listbox_bg":   "#C8D4DF",
    "listbox_fg":   "#1A2332",
}

# DARK palette  – deep slate with green accents
NEU_DARK = {
    "bg":           "#1E2530",
    "bg_dark":      "#161C26",
    "shadow_dark":  "#10161E",
    "shadow_lite":  "#283040",
    "display_bg":   "#161C26",
    "display_fg":   "#9ADDB0",   # LCD green-on-dark
    "subtext":      "#4E6070",
    "error_fg":     "#E55A4E",
    "btn_bg":       "#1E2530",
    "btn_fg":       "#BDD0E0",
    "operator_fg":  "#4DB888",
    "clear_fg":     "#D4A020",
    "equals_bg":    "#2D8A58",
    "equals_fg":    "#FFFFFF",
    "listbox_bg":   "#161C26",
    "listbox_fg":   "#9ADDB0",
}


def get_theme(dark: bool) -> dict:
    """Return the active neumorphic colour palette."""
    return NEU_DARK if dark else NEU_LIGHT


# Settings persistence (GUI preferences only, never calculator state)
SETTINGS_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), "settings.json")

# History Settings
MAX_HISTORY_ITEMS = 100

# Web Portal settings (standalone session, see run_web.py)
WEB_HOST = '127.0.0.1'
WEB_PORT = 8888
