import flet as ft


class AppTheme:
    """
    Centralized theme configuration for the calculator.
    Dark grey keypad with white result text by default.
    """

    font_family = "Roboto"

    # Colors - Light
    primary_light = "#37474f"
    on_primary_light = "#ffffff"
    secondary_light = "#ff8f00"  # Operator keys
    background_light = "#eceff1"
    surface_light = "#cfd8dc"  # Digit keys
    error_light = "#e53935"
    muted_light = "#78909c"  # Previous input line

    # Colors - Dark
    primary_dark = "#9e9e9e"
    on_primary_dark = "#ffffff"
    secondary_dark = "#ffa000"
    background_dark = "#424242"
    surface_dark = "#757575"
    muted_dark = "#bdbdbd"

    # Sizes
    old_input_size = 24
    current_input_size = 48
    key_label_size = 32
    key_radius = 12

    @classmethod
    def light_theme(cls) -> ft.Theme:
        return ft.Theme(
            color_scheme=ft.ColorScheme(
                primary=cls.primary_light,
                on_primary=cls.on_primary_light,
                secondary=cls.secondary_light,
                surface=cls.surface_light,
                error=cls.error_light,
            ),
            font_family=cls.font_family,
            use_material3=True,
        )

    @classmethod
    def dark_theme(cls) -> ft.Theme:
        return ft.Theme(
            color_scheme=ft.ColorScheme(
                primary=cls.primary_dark,
                on_primary=cls.on_primary_dark,
                secondary=cls.secondary_dark,
                surface=cls.surface_dark,
                error=cls.error_light, # Keep red for error
            ),
            font_family=cls.font_family,
            use_material3=True,
        )

    @classmethod
    def background(cls, theme_mode: ft.ThemeMode) -> str:
        if theme_mode == ft.ThemeMode.LIGHT:
            return cls.background_light
        return cls.background_dark

    @classmethod
    def muted(cls, theme_mode: ft.ThemeMode) -> str:
        if theme_mode == ft.ThemeMode.LIGHT:
            return cls.muted_light
        return cls.muted_dark
