# -*- coding: utf-8 -*-

from dataclasses import dataclass
from enum import Enum


class Appearance(str, Enum):
    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"


@dataclass(frozen=True)
class Theme:
    name: str  # light | dark
    bg: str
    fg: str
    muted: str
    accent: str
    danger: str


LIGHT_THEME = Theme(
    name="light",
    bg="#F4F6FA",
    fg="#111827",
    muted="#6B7280",
    accent="#3B82F6",
    danger="#EF4444",
)

DARK_THEME = Theme(
    name="dark",
    bg="#111827",
    fg="#F9FAFB",
    muted="#9CA3AF",
    accent="#60A5FA",
    danger="#F87171",
)


@dataclass(frozen=True)
class DurationCheck:
    cleaned: str
    accepted: bool
