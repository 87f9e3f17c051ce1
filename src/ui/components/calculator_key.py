from collections.abc import Callable
from typing import Literal

import flet as ft

from src.ui.theme import AppTheme

KeyRole = Literal["digit", "operator", "command"]

OPERATOR_LABELS = frozenset({"÷", "×", "-", "+", "="})
COMMAND_LABELS = frozenset({"AC", "C", "⌫"})


def key_role(label: str) -> KeyRole:
    if label in OPERATOR_LABELS:
        return "operator"
    if label in COMMAND_LABELS:
        return "command"
    return "digit"


def key_color(role: KeyRole, theme_mode: ft.ThemeMode) -> str:
    light = theme_mode == ft.ThemeMode.LIGHT
    if role == "operator":
        return AppTheme.secondary_light if light else AppTheme.secondary_dark
    if role == "command":
        return AppTheme.primary_light if light else AppTheme.primary_dark
    return AppTheme.surface_light if light else AppTheme.surface_dark


class CalculatorKey(ft.Container): # type: ignore
    """
    Square keypad button. Forwards its label on click.
    """
    def __init__(
        self,
        label: str,
        on_press: Callable[[str], None],
        theme_mode: ft.ThemeMode = ft.ThemeMode.DARK,
    ):
        super().__init__(
            content=ft.Text(
                label,
                size=AppTheme.key_label_size,
                color="white",
                weight=ft.FontWeight.BOLD,
            ),
            alignment=ft.alignment.center,
            height=72,
            expand=1,
            margin=8,
            border_radius=ft.border_radius.all(AppTheme.key_radius),
            bgcolor=key_color(key_role(label), theme_mode),
            animate_opacity=100,
            on_click=self._on_click,
            on_hover=self._on_hover,
        )
        self.label = label
        self.on_press = on_press

    def _on_click(self, _: ft.ControlEvent) -> None:
        self.on_press(self.label)

    def _on_hover(self, e: ft.HoverEvent) -> None:
        self.opacity = 0.85 if e.data == "true" else 1.0
        self.update()
