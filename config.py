"""
ProCalc Configuration Settings
"""
import os

# Application Settings
APP_NAME = "ProCalc"
VERSION = "1.0.0"

# Display Settings
WINDOW_WIDTH = 360
WINDOW_HEIGHT = 520
EXPRESSION_FONT = ("Consolas", 14)
RESULT_FONT = ("Consolas", 32, "bold")   # LCD/segmented-style font
BUTTON_FONT = ("Segoe UI", 16)
LABEL_FONT = ("Segoe UI", 11)

# ── Neumorphic Palettes ────────────────────────────────────────────────────────

# LIGHT palette  – soft sage-green background
NEU_LIGHT = {
    "bg":           "#DDE6ED",   # base surface
    "bg_dark":      "#C8D4DF",   # slightly darker variant (inset feel)
    "shadow_dark":  "#B2BFC8",
    "shadow_lite":  "#FFFFFF",
    "display_bg":   "#C8D4DF",
    "display_fg":   "#1A2332",   # LCD dark on light
    "btn_bg":       "#DDE6ED",
    "btn_fg":       "#2B3A4A",
    "operator_fg":  "#1E7A56",
    "equals_bg":    "#2E8B57",
    "equals_fg":    "#FFFFFF",
    "accent":       "#2E8B57",
    "subtext":      "#6E8090",
    "danger":       "#B03A2E",
    "hdr_bg":       "#C8D4DF",
}

# DARK palette  – deep slate with green accents
NEU_DARK = {
    "bg":           "#1E2530",
    "bg_dark":      "#161C26",
    "shadow_dark":  "#10161E",
    "shadow_lite":  "#283040",
    "display_bg":   "#161C26",
    "display_fg":   "#9ADDB0",   # LCD green-on-dark
    "btn_bg":       "#1E2530",
    "btn_fg":       "#BDD0E0",
    "operator_fg":  "#4DB888",
    "equals_bg":    "#2D8A58",
    "equals_fg":    "#FFFFFF",
    "accent":       "#4DB888",
    "subtext":      "#4E6070",
    "danger":       "#E55A4E",
    "hdr_bg":       "#161C26",
}


def get_theme(dark: bool) -> dict:
    """Return the active neumorphic colour palette."""
    return NEU_DARK if dark else NEU_LIGHT


# Desktop shell settings (theme only)
SETTINGS_FILE = os.path.join(os.path.dirname(__file__), "settings.json")

# Calculator Settings
MAX_SIGNIFICANT_DIGITS = 12
ERROR_TEXT = "Error"

# Logging
LOG_LEVEL = os.environ.get("PROCALC_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Web Portal settings
WEB_HOST = '0.0.0.0'
WEB_PORT = 8888
START_WEB_PORTAL = False
