# -*- coding: utf-8 -*-

import logging
import tkinter as tk
from typing import Optional

from core.scheduler import TkScheduler
from domain.models import Appearance
from services.appearance_service import AppearanceService
from services.countdown_service import CountdownService
from ui.countdown_widget import CountdownWidget
from ui.duration_dialog import DurationDialog

log = logging.getLogger(__name__)

# these classes already handle <space> themselves
SPACE_HANDLING_CLASSES = ("Entry", "Spinbox", "Button", "Checkbutton", "Radiobutton")


def space_toggles(widget_class: str) -> bool:
    return widget_class not in SPACE_HANDLING_CLASSES


class MainWindow:
    def __init__(
        self,
        appearance_service: AppearanceService,
        target_seconds: int,
        max_seconds: int,
    ):
        self.appearance_service = appearance_service

        self.root = tk.Tk()
        self.root.title("Tiny Countdown")
        self.root.geometry("460x300")
        self.root.minsize(380, 260)

        # the tick source lives on this window's event loop
        self.countdown_service = CountdownService(
            TkScheduler(self.root),
            target_seconds=target_seconds,
            max_seconds=max_seconds,
        )

        self.theme = self.appearance_service.resolve()
        self._dialog: Optional[DurationDialog] = None

        self._build_ui()
        self._apply_theme()

        self.root.bind("<space>", self._on_space)
        self.root.protocol("WM_DELETE_WINDOW", self._on_close)

    def _build_ui(self):
        root = self.root

        menubar = tk.Menu(root)
        self.appearance_var = tk.StringVar(value=self.appearance_service.get().value)
        appearance_menu = tk.Menu(menubar, tearoff=0)
        for label, value in (
            ("Light", Appearance.LIGHT),
            ("Dark", Appearance.DARK),
            ("System", Appearance.SYSTEM),
        ):
            appearance_menu.add_radiobutton(
                label=label,
                value=value.value,
                variable=self.appearance_var,
                command=self._on_appearance_selected,
            )
        menubar.add_cascade(label="Appearance", menu=appearance_menu)
        root.config(menu=menubar)

        self.countdown = CountdownWidget(
            root,
            countdown_service=self.countdown_service,
            on_request_duration=self._open_duration_dialog,
            theme=self.theme,
        )
        self.countdown.pack(fill="both", expand=True, padx=20, pady=20)

    def run(self):
        self.root.mainloop()

    # ----- Appearance -----
    def _on_appearance_selected(self):
        self.appearance_service.set(self.appearance_var.get())
        self.theme = self.appearance_service.resolve()
        self._apply_theme()

    def _apply_theme(self):
        self.root.configure(bg=self.theme.bg)
        self.countdown.apply_theme(self.theme)

    # ----- Duration dialog -----
    def _open_duration_dialog(self):
        if self._dialog is not None or not self.countdown_service.can_edit_duration:
            return
        self._dialog = DurationDialog(
            self.root,
            self.countdown_service,
            self.theme,
            on_close=self._on_dialog_closed,
        )

    def _on_dialog_closed(self):
        self._dialog = None

    # ----- Keys / lifecycle -----
    def _on_space(self, event=None):
        if not space_toggles(event.widget.winfo_class()):
            return
        if self._dialog is None:
            self.countdown_service.toggle_running()

    def _on_close(self):
        self.countdown_service.close()
        log.debug("window closed")
        self.root.destroy()
