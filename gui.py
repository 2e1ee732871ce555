"""
GUI for ProCalc
Tkinter keypad and two-line display driving a CalculatorSession
"""
import json
import logging
import tkinter as tk
import config
from calculator import CalculatorSession
from keypad import KEYPAD, translate_key

logger = logging.getLogger(__name__)


class ProCalcGUI:
    def __init__(self, root, session=None):
        self.root = root
        self.root.title(config.APP_NAME)
        self.root.geometry(f"{config.WINDOW_WIDTH}x{config.WINDOW_HEIGHT}")

        self.session = session or CalculatorSession()

        # ── Theme state (load before any widget is created) ───────────────
        settings = self._load_settings()
        self.dark_mode: bool = settings.get("dark_mode", False)
        self.T: dict = config.get_theme(self.dark_mode)
        self.root.configure(bg=self.T["bg"])

        self.create_widgets()
        self.root.bind('<Key>', self.on_key_press)
        self.update_display(self.session.render())

    # ── Settings persistence ─────────────────────────────────────────────

    def _load_settings(self):
        try:
            with open(config.SETTINGS_FILE, "r") as f:
                return json.load(f)
        except (OSError, ValueError):
            return {}

    def _save_settings(self):
        try:
            with open(config.SETTINGS_FILE, "w") as f:
                json.dump({"dark_mode": self.dark_mode}, f)
        except OSError as e:
            logger.warning("Could not save settings: %s", e)

    def toggle_theme(self):
        """Switch light/dark palette and rebuild the widgets"""
        self.dark_mode = not self.dark_mode
        self.T = config.get_theme(self.dark_mode)
        self._save_settings()
        for widget in self.root.winfo_children():
            widget.destroy()
        self.root.configure(bg=self.T["bg"])
        self.create_widgets()
        self.update_display(self.session.render())

    # ── Widgets ──────────────────────────────────────────────────────────

    def _neu_btn(self, parent, text, command=None, kind="normal", **kw):
        """Create a neumorphic styled flat button."""
        T = self.T
        if kind == "equals":
            bg, fg, abg = T["equals_bg"], T["equals_fg"], T["accent"]
        elif kind == "operator":
            bg, fg, abg = T["btn_bg"], T["operator_fg"], T["bg_dark"]
        elif kind == "mode":
            bg, fg, abg = T["bg_dark"], T["accent"], T["shadow_dark"]
        elif kind == "danger":
            bg, fg, abg = T["danger"], "#FFFFFF", T["bg_dark"]
        else:
            bg, fg, abg = T["btn_bg"], T["btn_fg"], T["bg_dark"]
        return tk.Button(
            parent, text=text, command=command,
            font=kw.pop("font", config.BUTTON_FONT),
            bg=bg, fg=fg,
            activebackground=abg, activeforeground=fg,
            relief=tk.FLAT, bd=0, cursor="hand2",
            highlightthickness=1,
            highlightbackground=T["shadow_dark"],
            highlightcolor=T["shadow_lite"],
            **kw
        )

    def create_widgets(self):
        """Create main UI components"""
        T = self.T
        # Top bar
        top_frame = tk.Frame(self.root, bg=T["hdr_bg"], height=40)
        top_frame.pack(fill=tk.X, padx=2, pady=2)
        tk.Label(
            top_frame, text=config.APP_NAME,
            font=(config.LABEL_FONT[0], 14, "bold"),
            bg=T["hdr_bg"], fg=T["accent"]
        ).pack(side=tk.LEFT, padx=8)
        self._neu_btn(
            top_frame, "☾" if not self.dark_mode else "☀",
            command=self.toggle_theme, kind="mode",
            font=(config.LABEL_FONT[0], 12)
        ).pack(side=tk.RIGHT, padx=4, pady=2)

        # Display area — neumorphic inset card with LCD-style font
        outer = tk.Frame(self.root, bg=T["shadow_dark"], bd=0)
        outer.pack(fill=tk.X, padx=6, pady=(4, 6))
        inner = tk.Frame(outer, bg=T["shadow_lite"], bd=0)
        inner.pack(fill=tk.X, padx=(1, 0), pady=(1, 0))
        display_frame = tk.Frame(inner, bg=T["display_bg"])
        display_frame.pack(fill=tk.X, padx=(0, 1), pady=(0, 1))

        self.expression_label = tk.Label(
            display_frame, text="",
            font=config.EXPRESSION_FONT,
            bg=T["display_bg"], fg=T["subtext"],
            anchor=tk.E, padx=12, pady=4
        )
        self.expression_label.pack(side=tk.TOP, fill=tk.X)

        self.result_label = tk.Label(
            display_frame, text="0",
            font=config.RESULT_FONT,
            bg=T["display_bg"], fg=T["display_fg"],
            anchor=tk.E, padx=12, pady=2
        )
        self.result_label.pack(side=tk.TOP, fill=tk.X)

        # Keypad
        keypad_frame = tk.Frame(self.root, bg=T["bg"])
        keypad_frame.pack(fill=tk.BOTH, expand=True, padx=5, pady=3)
        for r, row in enumerate(KEYPAD):
            for c, (label, button_id, kind) in enumerate(row):
                self._neu_btn(
                    keypad_frame, label, kind=kind,
                    command=lambda b=button_id: self.calculator_button_click(b)
                ).grid(row=r, column=c, sticky="nsew", padx=2, pady=2)
        self._neu_btn(
            keypad_frame, "=", kind="equals",
            command=lambda: self.calculator_button_click("equals")
        ).grid(row=len(KEYPAD), column=0, columnspan=4, sticky="nsew", padx=2, pady=2)

        for c in range(4):
            keypad_frame.grid_columnconfigure(c, weight=1, uniform="keys")
        for r in range(len(KEYPAD) + 1):
            keypad_frame.grid_rowconfigure(r, weight=1, uniform="keys")

    # ── Events ───────────────────────────────────────────────────────────

    def update_display(self, display):
        """Paint the expression and result lines"""
        T = self.T
        self.expression_label.config(text=display.expression)
        self.result_label.config(
            text=display.result,
            fg=T["danger"] if display.is_error else T["display_fg"]
        )

    def calculator_button_click(self, button):
        """Handle calculator button clicks"""
        self.update_display(self.session.press(button))

    def on_key_press(self, event):
        """Handle keyboard input"""
        key = translate_key(event.keysym, event.char)
        if key:
            self.update_display(self.session.handle_key(key))
