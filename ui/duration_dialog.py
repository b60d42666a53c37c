# -*- coding: utf-8 -*-

import tkinter as tk
from typing import Callable, Optional

from core.duration import MIN_SECONDS, InvalidDuration
from domain.models import Theme
from services.countdown_service import CountdownService

WARNING_MS = 5000


class DurationDialog:
    """
    Modal "Set Duration" sheet.
    Every edit goes through the sanitizer; Done is only enabled for a value
    the service would accept.
    """

    def __init__(
        self,
        master,
        countdown_service: CountdownService,
        theme: Theme,
        on_close: Optional[Callable[[], None]] = None,
    ):
        self.countdown_service = countdown_service
        self.theme = theme
        self.on_close = on_close

        self._warning_job = None
        self._programmatic = False

        self.win = tk.Toplevel(master)
        self.win.title("Set Duration")
        self.win.configure(bg=theme.bg)
        self.win.resizable(False, False)
        self.win.transient(master)

        self._build_ui()

        self.input_var.set(str(countdown_service.target_seconds))
        self._refresh_done()

        self.win.bind("<Escape>", lambda e: self.cancel())
        self.win.bind("<Return>", lambda e: self.done())
        self.win.protocol("WM_DELETE_WINDOW", self.cancel)
        self.win.grab_set()
        self.entry.focus_set()
        self.entry.select_range(0, tk.END)

    def _build_ui(self):
        t = self.theme
        max_s = self.countdown_service.max_seconds

        tk.Label(
            self.win,
            text=f"Seconds ({MIN_SECONDS}–{max_s})",
            bg=t.bg,
            fg=t.fg,
            font=("Sans", 11, "bold"),
        ).pack(anchor="w", padx=14, pady=(14, 6))

        self.input_var = tk.StringVar()
        self.input_var.trace_add("write", self._on_input_changed)
        self.entry = tk.Entry(
            self.win,
            textvariable=self.input_var,
            bg=t.bg,
            fg=t.fg,
            insertbackground=t.fg,
            width=24,
        )
        self.entry.pack(fill="x", padx=14)

        self.warning_var = tk.StringVar(value="")
        tk.Label(
            self.win,
            textvariable=self.warning_var,
            bg=t.bg,
            fg=t.danger,
            font=("Sans", 8),
        ).pack(anchor="w", padx=14, pady=(4, 8))

        btns = tk.Frame(self.win, bg=t.bg)
        btns.pack(fill="x", padx=14, pady=(0, 14))

        self.done_btn = tk.Button(
            btns,
            text="Done",
            command=self.done,
            bg=t.accent,
            fg="white",
            relief="flat",
            activebackground=t.accent,
            activeforeground="white",
            padx=14,
        )
        self.done_btn.pack(side="right")

        tk.Button(
            btns,
            text="Cancel",
            command=self.cancel,
            bg=t.bg,
            fg=t.fg,
            relief="flat",
            activebackground=t.bg,
            activeforeground=t.fg,
            padx=14,
        ).pack(side="right", padx=(0, 6))

    # ---------- input ----------
    def _on_input_changed(self, *_):
        if self._programmatic:
            return
        raw = self.input_var.get()
        check = self.countdown_service.validate_duration_input(raw)
        if not check.accepted:
            self._show_warning()
        if check.cleaned != raw:
            self._programmatic = True
            try:
                self.input_var.set(check.cleaned)
                self.entry.icursor(tk.END)
            finally:
                self._programmatic = False
        self._refresh_done()

    def _show_warning(self):
        self.warning_var.set(
            f"Duration must be between {MIN_SECONDS} and "
            f"{self.countdown_service.max_seconds} seconds"
        )
        if self._warning_job is not None:
            self.win.after_cancel(self._warning_job)
        self._warning_job = self.win.after(WARNING_MS, self._hide_warning)

    def _hide_warning(self):
        self._warning_job = None
        self.warning_var.set("")

    def _refresh_done(self):
        ok = self.countdown_service.can_commit(self.input_var.get())
        self.done_btn.config(state="normal" if ok else "disabled")

    # ---------- actions ----------
    def done(self):
        try:
            self.countdown_service.commit_duration(self.input_var.get())
        except InvalidDuration as e:
            self.warning_var.set(str(e))
            return
        self._close()

    def cancel(self):
        self._close()

    def _close(self):
        if self._warning_job is not None:
            self.win.after_cancel(self._warning_job)
            self._warning_job = None
        self.win.grab_release()
        self.win.destroy()
        if self.on_close:
            self.on_close()
