"""Coloured alert boxes with a title, a description and an optional icon."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from .component import Component
from .icons import (
    ICON_FAS_CIRCLE_CHECK,
    ICON_FAS_CIRCLE_EXCLAMATION,
    ICON_FAS_CIRCLE_INFO,
    ICON_FAS_CIRCLE_XMARK,
    Icon,
)
from .markup import Element


class AlertKind(StrEnum):
    SUCCESS = "success"
    INFO = "info"
    DANGER = "danger"
    WARNING = "warning"


_COLORATION = {
    AlertKind.WARNING: "bg-yellow-50 border-yellow-200 text-yellow-800",
    AlertKind.SUCCESS: "bg-teal-100 border-teal-200 text-teal-800",
    AlertKind.DANGER: "bg-red-100 border-red-200 text-red-800",
    AlertKind.INFO: "bg-blue-100 border-blue-200 text-blue-800",
}

_ICONS = {
    AlertKind.WARNING: ICON_FAS_CIRCLE_EXCLAMATION,
    AlertKind.SUCCESS: ICON_FAS_CIRCLE_CHECK,
    AlertKind.DANGER: ICON_FAS_CIRCLE_XMARK,
    AlertKind.INFO: ICON_FAS_CIRCLE_INFO,
}


@dataclass
class AlertMod:
    kind: str = ""
    with_icon: bool = False
    title: str = ""
    description: str = ""


@dataclass
class Alert:
    """Success, warning, danger and info alerts."""

    icon: Icon = field(default_factory=Icon)
    component: Component = field(default_factory=Component)

    def success_alert(self, title: str, description: str, mod: AlertMod | None = None) -> Element:
        return self._generate(AlertKind.SUCCESS, title, description, mod)

    def warning_alert(self, title: str, description: str, mod: AlertMod | None = None) -> Element:
        return self._generate(AlertKind.WARNING, title, description, mod)

    def danger_alert(self, title: str, description: str, mod: AlertMod | None = None) -> Element:
        return self._generate(AlertKind.DANGER, title, description, mod)

    def info_alert(self, title: str, description: str, mod: AlertMod | None = None) -> Element:
        return self._generate(AlertKind.INFO, title, description, mod)

    def mod_with_description(self, description: str) -> AlertMod:
        return AlertMod(description=description)

    def _generate(self, kind: str, title: str, description: str, mod: AlertMod | None) -> Element:
        mod = mod if mod is not None else AlertMod()
        mod.kind = kind
        mod.title = title
        mod.description = description
        mod.with_icon = True
        return self.h(mod)

    def h(self, mod: AlertMod) -> Element:
        parts: list[Element] = []
        if mod.with_icon:
            parts.append(self.component.dcs("skrink-0 mt-0.5", self._icon(mod)))
        parts.append(
            self.component.dcs(
                "ms-4",
                self.component.ccv("h3", "text-sm font-semibold", mod.title),
                self.component.dcv("mt-1 text-sm", mod.description),
            )
        )
        return self.component.dcs(
            "border text-sm rounded-lg p-4 " + self._coloration(mod),
            self.component.dcs("flex", *parts),
        )

    @staticmethod
    def _coloration(mod: AlertMod) -> str:
        try:
            return _COLORATION[mod.kind]
        except KeyError:
            raise ValueError(f"Unknown alert kind coloration: {mod.kind!r}") from None

    def _icon(self, mod: AlertMod) -> Element:
        try:
            name = _ICONS[mod.kind]
        except KeyError:
            raise ValueError(f"Unknown alert kind icon: {mod.kind!r}") from None
        return self.icon.icon(name)