import logging
import sys

import flet as ft

from src.components.keypad import PressInput, display_of, run_session_press
from src.rules.loader import load_rules_or_default, resolve_log_level, rules_path_from_env
from src.rules.models import Rules
from src.ui.layout import CalculatorLayout
from src.ui.state import AppState
from src.ui.theme import AppTheme

logger = logging.getLogger(__name__)


def build_app(rules: Rules):
    """Return the flet page builder for the given rules."""
    config = rules.arithmetic.to_config()

    def main(page: ft.Page) -> None:
        page.title = rules.display.title

        # Theme Setup
        page.theme = AppTheme.light_theme()
        page.dark_theme = AppTheme.dark_theme()
        page.theme_mode = (
            ft.ThemeMode.LIGHT if rules.display.theme == "light" else ft.ThemeMode.DARK
        )
        page.bgcolor = AppTheme.background(page.theme_mode)
        page.padding = 16

        # One calculator session per page
        state = AppState()

        def handle_press(label: str) -> None:
            result = run_session_press(PressInput(label=label), session=state, config=config)
            layout.show(result.display)

        layout = CalculatorLayout(
            display=display_of(state.load()),
            on_press=handle_press,
            theme_mode=page.theme_mode,
        )
        page.add(layout)
        logger.info("Calculator page ready (division scale %d)", config.division_scale)

    return main


if __name__ == "__main__":
    try:
        rules = load_rules_or_default(rules_path_from_env())
        level = resolve_log_level(rules)
    except ValueError as e:
        print(f"CRITICAL: {e}", file=sys.stderr)
        sys.exit(1)

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    ft.app(target=build_app(rules))
