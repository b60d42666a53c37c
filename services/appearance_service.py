# -*- coding: utf-8 -*-

import logging
from typing import Union

from domain.models import DARK_THEME, LIGHT_THEME, Appearance, Theme
from storage.repos import AppStateRepo

log = logging.getLogger(__name__)

APPEARANCE_KEY = "selectedAppearance"


class AppearanceService:
    """
    Light / Dark / System preference, persisted in app_state.
    "system" resolves to the platform default (light unless told otherwise).
    """

    def __init__(self, state_repo: AppStateRepo, platform_default: Appearance = Appearance.LIGHT):
        if platform_default == Appearance.SYSTEM:
            raise ValueError("platform default must be light or dark")
        self.state = state_repo
        self.platform_default = platform_default

    def get(self) -> Appearance:
        raw = self.state.get(APPEARANCE_KEY, Appearance.SYSTEM.value)
        try:
            return Appearance(raw)
        except ValueError:
            log.warning("ignoring unknown appearance %r", raw)
            return Appearance.SYSTEM

    def set(self, value: Union[Appearance, str]) -> Appearance:
        appearance = Appearance(value)  # ValueError on unknown names
        self.state.set(APPEARANCE_KEY, appearance.value)
        log.info("appearance set to %s", appearance.value)
        return appearance

    def resolve(self) -> Theme:
        appearance = self.get()
        if appearance == Appearance.SYSTEM:
            appearance = self.platform_default
        return DARK_THEME if appearance == Appearance.DARK else LIGHT_THEME
