# -*- coding: utf-8 -*-

import tkinter as tk
from typing import Callable, Optional

from core.timer_engine import CountdownSnapshot
from domain.models import LIGHT_THEME, Theme
from services.countdown_service import CountdownService


class CountdownWidget(tk.Frame):
    def __init__(
        self,
        master,
        countdown_service: CountdownService,
        on_request_duration: Optional[Callable[[], None]] = None,
        theme: Theme = LIGHT_THEME,
    ):
        super().__init__(master)

        self.countdown_service = countdown_service
        self.on_request_duration = on_request_duration
        self.theme = theme

        self._build_ui()

        # wire callbacks from service -> widget UI
        self.countdown_service.set_on_tick(self._on_tick)
        self.countdown_service.set_on_state_change(self._on_state_change)
        self.countdown_service.set_on_complete(self._on_complete)

        # initial render
        self._render(self.countdown_service.snapshot())
        self.apply_theme(theme)

    def _build_ui(self):
        self.columnconfigure(0, weight=1)

        self.time_var = tk.StringVar(value=self.countdown_service.display_text)
        self.info_var = tk.StringVar(value="Tap the time to set a duration")
        self.stepper_var = tk.StringVar(value=str(self.countdown_service.target_seconds))

        self.time_label = tk.Label(
            self,
            textvariable=self.time_var,
            font=("Courier", 64, "bold"),
            cursor="hand2",
        )
        self.time_label.grid(row=0, column=0, pady=(16, 4))
        self.time_label.bind("<Button-1>", lambda e: self._request_duration())

        self.info_label = tk.Label(self, textvariable=self.info_var, font=("Sans", 9))
        self.info_label.grid(row=1, column=0, pady=(0, 16))

        self.btns = tk.Frame(self)
        self.btns.grid(row=2, column=0)

        self.toggle_btn = tk.Button(
            self.btns,
            text="Start",
            width=8,
            relief="flat",
            takefocus=0,
            command=self._toggle,
        )
        self.reset_btn = tk.Button(
            self.btns,
            text="Reset",
            width=8,
            relief="flat",
            takefocus=0,
            command=self._reset,
        )
        self.stepper = tk.Spinbox(
            self.btns,
            from_=1,
            to=self.countdown_service.max_seconds,
            increment=1,
            width=7,
            textvariable=self.stepper_var,
            # arrows pass "up" / "down"
            command=(self.register(self._on_arrow), "%d"),
        )
        self.stepper.bind("<Return>", lambda e: self._on_step())
        self.stepper.bind("<FocusOut>", lambda e: self._on_step())

        self.toggle_btn.grid(row=0, column=0, padx=(0, 6))
        self.reset_btn.grid(row=0, column=1, padx=(0, 6))
        self.stepper.grid(row=0, column=2)

    def apply_theme(self, theme: Theme):
        self.theme = theme
        for w in (self, self.btns, self.time_label, self.info_label):
            w.configure(bg=theme.bg)
        self.time_label.configure(fg=theme.fg)
        self.info_label.configure(fg=theme.muted)
        for b in (self.toggle_btn, self.reset_btn):
            b.configure(
                bg=theme.accent,
                fg="white",
                activebackground=theme.accent,
                activeforeground="white",
                disabledforeground=theme.muted,
            )
        self.stepper.configure(
            bg=theme.bg,
            fg=theme.fg,
            buttonbackground=theme.bg,
            insertbackground=theme.fg,
        )

    def _update_buttons(self):
        svc = self.countdown_service

        self.toggle_btn.config(text="Pause" if svc.is_running else "Start")
        self.reset_btn.config(state="normal" if svc.can_reset else "disabled")
        # stepper only while idle
        self.stepper.config(state="normal" if svc.can_edit_duration else "disabled")

    # ---- Actions ----
    def _toggle(self):
        self.countdown_service.toggle_running()

    def _reset(self):
        self.countdown_service.reset()

    def _on_arrow(self, direction: str):
        delta = 1 if direction == "up" else -1
        if not self.countdown_service.step_target(delta):
            self.stepper_var.set(str(self.countdown_service.target_seconds))

    def _on_step(self):
        # typed text: anything but a valid duration restores the current target
        if not self.countdown_service.try_commit_duration(self.stepper_var.get()):
            self.stepper_var.set(str(self.countdown_service.target_seconds))

    def _request_duration(self):
        if self.countdown_service.is_running:
            return
        if self.on_request_duration:
            self.on_request_duration()

    # ---- Service callbacks ----
    def _on_tick(self, snap: CountdownSnapshot):
        self._render(snap)

    def _on_state_change(self, snap: CountdownSnapshot):
        self._render(snap)

    def _on_complete(self, snap: CountdownSnapshot):
        self._render(snap)
        self.info_var.set("Done!")
        self.bell()

    def _render(self, snap: CountdownSnapshot):
        self.time_var.set(self.countdown_service.display_text)
        self.stepper_var.set(str(snap.target_seconds))

        if snap.is_running:
            self.info_var.set("Running...")
        elif snap.remaining_seconds == snap.target_seconds:
            self.info_var.set("Tap the time to set a duration")
        else:
            self.info_var.set("Paused")
        self._update_buttons()
