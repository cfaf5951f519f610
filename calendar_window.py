"""Single-month calendar window (tkinter) driven by MonthViewModel."""

from datetime import date
from tkinter import font as tkfont
import tkinter as tk

from PIL import ImageTk

from icon_gen import create_icon_image
from settings import config_from_settings, load_settings, save_settings
from view_model import DATE_CELLS, GRID_COLS, GRID_ROWS, HEADER_CELLS, MonthViewModel

# Colours
ACCENT = "#0078D4"
HEADER_BG = "#F3F3F3"
GRID_BG = "white"
BORDER = "#333333"
WEEKEND_FG = "#CC0000"


class CalendarWindow:
    """Month grid: title with navigation, weekday header row, 6×7 date cells."""

    def __init__(self, settings: dict | None = None) -> None:
        self.root = tk.Tk()
        self.root.title("Month Calendar")
        self.root.resizable(True, True)
        self.root.configure(bg=GRID_BG)

        self._setup_fonts()

        self.settings = settings if settings is not None else load_settings()
        self._saved_width: int | None = self.settings.get("window_width")
        self._saved_height: int | None = self.settings.get("window_height")
        self.view_model = MonthViewModel(config_from_settings(self.settings))

        self._icon = ImageTk.PhotoImage(create_icon_image(), master=self.root)
        self.root.iconphoto(True, self._icon)

        self._title_label: tk.Label | None = None
        self.header_cells: list[tk.Label] = []
        self.date_cells: list[tk.Label] = []
        self._build()
        self.refresh()

        self.root.bind("<Escape>", lambda _e: self.hide())
        self.root.bind("<Left>", lambda _e: self._navigate(-1))
        self.root.bind("<Right>", lambda _e: self._navigate(1))
        self.root.bind("<Configure>", self._on_configure)
        self.root.protocol("WM_DELETE_WINDOW", self.hide)

    # ------------------------------------------------------------------
    # Fonts
    # ------------------------------------------------------------------
    def _setup_fonts(self) -> None:
        families = tkfont.families(self.root)
        base = "Segoe UI" if "Segoe UI" in families else "TkDefaultFont"
        self.font_normal = tkfont.Font(family=base, size=11)
        self.font_bold = tkfont.Font(family=base, size=11, weight="bold")
        self.font_title = tkfont.Font(family=base, size=12, weight="bold")
        self.font_nav = tkfont.Font(family=base, size=12, weight="bold")

    # ------------------------------------------------------------------
    # Build widgets (once) — nav bar + header row + date grid
    # ------------------------------------------------------------------
    def _build(self) -> None:
        outer = tk.Frame(self.root, bg=GRID_BG)
        outer.pack(fill="both", expand=True, padx=6, pady=4)

        # Navigation row: ◀  MM-YYYY  Today  ▶
        nav = tk.Frame(outer, bg=GRID_BG)
        nav.pack(fill="x", pady=(0, 4))

        btn_prev = tk.Label(
            nav, text="◀", font=self.font_nav, bg=GRID_BG, cursor="hand2"
        )
        btn_prev.pack(side="left", padx=6)
        btn_prev.bind("<Button-1>", lambda _e: self._navigate(-1))

        btn_next = tk.Label(
            nav, text="▶", font=self.font_nav, bg=GRID_BG, cursor="hand2"
        )
        btn_next.pack(side="right", padx=6)
        btn_next.bind("<Button-1>", lambda _e: self._navigate(1))

        btn_today = tk.Label(
            nav, text="Today", font=self.font_bold, bg=GRID_BG, fg=ACCENT,
            cursor="hand2",
        )
        btn_today.pack(side="right", padx=6)
        btn_today.bind("<Button-1>", lambda _e: self.go_today())

        self._title_label = tk.Label(
            nav, font=self.font_title, bg=GRID_BG, fg="#333333",
        )
        self._title_label.pack(side="left", expand=True)

        grid = tk.Frame(outer, bg=GRID_BG)
        grid.pack(fill="both", expand=True)
        for c in range(GRID_COLS):
            grid.columnconfigure(c, weight=1, uniform="col")
        for r in range(GRID_ROWS + 1):
            grid.rowconfigure(r, weight=1, uniform="row")

        for col in range(HEADER_CELLS):
            lbl = tk.Label(
                grid, font=self.font_bold, bg=HEADER_BG, width=4,
                highlightthickness=1, highlightbackground=BORDER,
            )
            lbl.grid(row=0, column=col, sticky="nsew")
            self.header_cells.append(lbl)

        for index in range(DATE_CELLS):
            r, c = divmod(index, GRID_COLS)
            cell = tk.Label(
                grid, font=self.font_normal, bg=GRID_BG, width=4, height=2,
                highlightthickness=1, highlightbackground=BORDER,
            )
            cell.grid(row=r + 1, column=c, sticky="nsew")
            self.date_cells.append(cell)

    # ------------------------------------------------------------------
    # Redraw title, header row and all date cells from the view-model
    # ------------------------------------------------------------------
    def refresh(self) -> None:
        vm = self.view_model
        self._title_label.configure(text=vm.month_year_label())

        for col, lbl in enumerate(self.header_cells):
            fg = WEEKEND_FG if vm.is_weekend_column(col) else "#333333"
            lbl.configure(text=vm.weekday_label(col), fg=fg)

        today_idx = vm.today_index(date.today())
        for index, cell in enumerate(self.date_cells):
            text = vm.day_label(index)
            if text and index == today_idx:
                cell.configure(text=text, bg=ACCENT, fg="white", font=self.font_bold)
            else:
                weekend = vm.is_weekend_column(index % GRID_COLS)
                cell.configure(
                    text=text, bg=GRID_BG, font=self.font_normal,
                    fg=WEEKEND_FG if weekend else "black",
                )

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def _navigate(self, direction: int) -> None:
        if direction < 0:
            self.view_model.retreat_month()
        else:
            self.view_model.advance_month()
        self.refresh()

    def go_today(self) -> None:
        self.view_model.go_today()
        self.refresh()

    # ------------------------------------------------------------------
    # Window size tracking (persisted on hide)
    # ------------------------------------------------------------------
    def _on_configure(self, event: tk.Event) -> None:
        if event.widget is not self.root:
            return
        self._saved_width = self.root.winfo_width()
        self._saved_height = self.root.winfo_height()

    def _persist_size(self) -> None:
        settings = load_settings()
        settings["window_width"] = self._saved_width
        settings["window_height"] = self._saved_height
        save_settings(settings)

    # ------------------------------------------------------------------
    # Show / Hide / Toggle
    # ------------------------------------------------------------------
    def toggle(self) -> None:
        if self.root.state() == "withdrawn" or not self.root.winfo_viewable():
            self.show()
        else:
            self.hide()

    def show(self) -> None:
        self.refresh()
        self.root.deiconify()
        if self._saved_width is not None and self._saved_height is not None:
            self.root.geometry(f"{self._saved_width}x{self._saved_height}")
        self.root.lift()
        self.root.focus_force()

    def hide(self) -> None:
        try:
            if self._saved_width is not None and self._saved_height is not None:
                self._persist_size()
        finally:
            self.root.withdraw()
