from collections.abc import Callable

import flet as ft

from src.components.keypad import KEYPAD_ROWS, DisplayOutput
from src.ui.components.calculator_key import CalculatorKey
from src.ui.theme import AppTheme


class CalculatorLayout(ft.Column): # type: ignore
    """
    Display lines on top, keypad grid below.
    - Previous input: small, muted
    - Current input: large, bold
    Both right-aligned and rendered verbatim.
    """
    def __init__(
        self,
        display: DisplayOutput,
        on_press: Callable[[str], None],
        theme_mode: ft.ThemeMode = ft.ThemeMode.DARK,
    ):
        super().__init__(
            expand=True,
            alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
        )
        self.old_input_text = ft.Text(
            display.old_input,
            size=AppTheme.old_input_size,
            color=AppTheme.muted(theme_mode),
            text_align=ft.TextAlign.RIGHT,
        )
        self.current_input_text = ft.Text(
            display.current_input,
            size=AppTheme.current_input_size,
            color="white" if theme_mode == ft.ThemeMode.DARK else AppTheme.primary_light,
            weight=ft.FontWeight.BOLD,
            text_align=ft.TextAlign.RIGHT,
        )

        display_area = ft.Column(
            [self.old_input_text, self.current_input_text],
            horizontal_alignment=ft.CrossAxisAlignment.END,
        )

        # The last row is one key short; pad it so keys keep the same width
        keypad = ft.Column(
            [
                ft.Row(
                    [CalculatorKey(label, on_press, theme_mode) for label in row]
                    + [ft.Container(expand=1) for _ in range(4 - len(row))],
                    alignment=ft.MainAxisAlignment.SPACE_EVENLY,
                )
                for row in KEYPAD_ROWS
            ]
        )

        self.controls = [display_area, keypad]

    def show(self, display: DisplayOutput) -> None:
        self.old_input_text.value = display.old_input
        self.current_input_text.value = display.current_input
        self.update()
