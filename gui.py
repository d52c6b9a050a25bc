"""
GUI for QuadCalc
Tkinter view: two displays, the button grid and the session history
"""
import tkinter as tk
import json
import config
from calculator import Calculator
from controller import BUTTON_LAYOUT, CalculatorController
from history_manager import HistoryManager


class CalculatorGUI:
    def __init__(self, root):
        self.root = root
        self.root.title(config.APP_NAME)
        self.root.geometry(f"{config.WINDOW_WIDTH}x{config.WINDOW_HEIGHT}")

        # Initialize components
        self.calculator = Calculator()
        self.history_manager = HistoryManager()
        self.controller = CalculatorController(self.calculator, self.history_manager)

        # ── Theme state (load before any widget is created) ───────────────
        settings = self._load_settings()
        self.dark_mode: bool = settings.get("dark_mode", False)
        self.show_history: bool = settings.get("show_history", False)
        self.T: dict = config.get_theme(self.dark_mode)
        self.root.configure(bg=self.T["bg"])

        # Create UI
        self.create_widgets()
        self.root.bind('<Key>', self.on_key_press)
        self.refresh()

    # ── Settings persistence ─────────────────────────────────────────────
    _SETTINGS_FILE = config.SETTINGS_FILE

    def _load_settings(self):
        try:
            with open(self._SETTINGS_FILE, "r") as f:
                return json.load(f)
        except (OSError, ValueError):
            return {}

    def _save_settings(self, data):
        existing = self._load_settings()
        existing.update(data)
        with open(self._SETTINGS_FILE, "w") as f:
            json.dump(existing, f, indent=2)

    # ── Theme helpers ──────────────────────────────────────────────────────────
    def apply_theme(self):
        """Refresh T, then destroy+rebuild all widgets."""
        self.T = config.get_theme(self.dark_mode)
        self.root.configure(bg=self.T["bg"])
        for w in self.root.winfo_children():
            w.destroy()
        self.create_widgets()
        self.refresh()

    def _toggle_dark_mode(self):
        """Persist dark_mode setting and apply theme immediately."""
        self.dark_mode = not self.dark_mode
        self._save_settings({"dark_mode": self.dark_mode})
        self.apply_theme()

    def _toggle_history(self):
        self.show_history = not self.show_history
        self._save_settings({"show_history": self.show_history})
        self.apply_theme()

    def _neu_btn(self, parent, text, command=None, kind="number", **kw):
        """Create a neumorphic styled flat button."""
        T = self.T
        if kind == "equals":
            bg, fg, abg = T["equals_bg"], T["equals_fg"], T["operator_fg"]
        elif kind == "operator":
            bg, fg, abg = T["btn_bg"], T["operator_fg"], T["bg_dark"]
        elif kind == "clear":
            bg, fg, abg = T["btn_bg"], T["clear_fg"], T["bg_dark"]
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

    # ── Layout ────────────────────────────────────────────────────────────
    def create_widgets(self):
        T = self.T

        # --- Top bar: theme + history toggles ---
        top_bar = tk.Frame(self.root, bg=T["bg"])
        top_bar.pack(side=tk.TOP, fill=tk.X, padx=8, pady=(6, 0))
        tk.Label(top_bar, text=config.APP_NAME, font=config.LABEL_FONT,
                 bg=T["bg"], fg=T["subtext"]).pack(side=tk.LEFT)
        self._neu_btn(top_bar, "☾" if not self.dark_mode else "☀",
                      command=self._toggle_dark_mode, font=config.LABEL_FONT,
                      width=3, takefocus=0).pack(side=tk.RIGHT, padx=2)
        self._neu_btn(top_bar, "History", command=self._toggle_history,
                      font=config.LABEL_FONT, takefocus=0).pack(side=tk.RIGHT, padx=2)

        body = tk.Frame(self.root, bg=T["bg"])
        body.pack(side=tk.TOP, fill=tk.BOTH, expand=True)

        if self.show_history:
            self._create_history_panel(body)

        calc_frame = tk.Frame(body, bg=T["bg"])
        calc_frame.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)

        # --- Displays: expression above, primary below ---
        display_frame = tk.Frame(calc_frame, bg=T["display_bg"])
        display_frame.pack(side=tk.TOP, fill=tk.X, padx=10, pady=10)

        self.expression_display = tk.Label(
            display_frame, text="", font=config.EXPRESSION_FONT,
            bg=T["display_bg"], fg=T["subtext"], anchor=tk.E, padx=10
        )
        self.expression_display.pack(side=tk.TOP, fill=tk.X, pady=(6, 0))

        self.display = tk.Label(
            display_frame, text="0", font=config.DISPLAY_FONT,
            bg=T["display_bg"], fg=T["display_fg"], anchor=tk.E, padx=10
        )
        self.display.pack(side=tk.TOP, fill=tk.X, pady=(0, 6))

        # --- Button grid ---
        grid = tk.Frame(calc_frame, bg=T["bg"])
        grid.pack(side=tk.TOP, fill=tk.BOTH, expand=True, padx=10, pady=(0, 10))

        for r, row in enumerate(BUTTON_LAYOUT):
            grid.rowconfigure(r, weight=1, uniform="row")
            for c, (label, kind) in enumerate(row):
                grid.columnconfigure(c, weight=1, uniform="col")
                btn = self._neu_btn(grid, label, kind=kind, takefocus=0,
                                    command=lambda b=label: self.calculator_button_click(b))
                btn.grid(row=r, column=c, sticky="nsew", padx=3, pady=3)

    def _create_history_panel(self, parent):
        T = self.T
        panel = tk.Frame(parent, bg=T["bg"], width=config.HISTORY_WIDTH)
        panel.pack(side=tk.RIGHT, fill=tk.Y, padx=(0, 10), pady=10)
        panel.pack_propagate(False)

        tk.Label(panel, text="History", font=config.LABEL_FONT,
                 bg=T["bg"], fg=T["subtext"], anchor=tk.W).pack(side=tk.TOP, fill=tk.X)
        self.history_list = tk.Listbox(
            panel, font=config.LABEL_FONT, bg=T["listbox_bg"], fg=T["listbox_fg"],
            relief=tk.FLAT, bd=0, highlightthickness=0, activestyle="none"
        )
        self.history_list.pack(side=tk.TOP, fill=tk.BOTH, expand=True)
        self._neu_btn(panel, "Clear history", kind="clear", font=config.LABEL_FONT,
                      takefocus=0, command=self._clear_history).pack(side=tk.BOTTOM, fill=tk.X, pady=(6, 0))

    # ── Events ────────────────────────────────────────────────────────────
    def calculator_button_click(self, button):
        """Handle calculator button clicks"""
        self.controller.press(button)
        self.refresh()

    def on_key_press(self, event):
        """Handle keyboard input"""
        if self.controller.handle_key(event.char, event.keysym) is not None:
            self.refresh()
            return "break"

    def _clear_history(self):
        self.history_manager.clear_calculation_history()
        self.refresh()

    # ── Rendering ─────────────────────────────────────────────────────────
    def refresh(self):
        """Re-render both displays and the history from the calculator state"""
        state = self.controller.snapshot()
        self.update_display(state.primary, state.error)
        self.expression_display.config(text=state.secondary)

        if self.show_history and hasattr(self, "history_list"):
            self.history_list.delete(0, tk.END)
            for expr, result, _ in self.history_manager.get_calculation_history():
                self.history_list.insert(tk.END, f"{expr} {result}")

    def update_display(self, text, error=False):
        """Update the display"""
        fg = self.T["error_fg"] if error else self.T["display_fg"]
        font = config.LABEL_FONT if error else config.DISPLAY_FONT
        self.display.config(text=str(text), fg=fg, font=font)
