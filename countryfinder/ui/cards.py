import flet as ft
from typing import List

from countryfinder.models import Country, ControllerState

CARD_HEIGHT = 160
CARD_BG = "#050816"
DEFAULT_FLAG_ALT = "Country flag"
EMPTY_TEXT = "No countries found"

def format_population(population: int) -> str:
    return f"Population: {population:,}"

def country_card(country: Country) -> ft.Container:
    return ft.Container(
        key=country.name,
        height=CARD_HEIGHT,
        bgcolor=CARD_BG,
        border_radius=8,
        padding=16,
        content=ft.Column(
            spacing=8,
            controls=[
                ft.Image(
                    src=country.flag_png,
                    width=64,
                    height=40,
                    fit=ft.ImageFit.COVER,
                    semantics_label=country.flag_alt or DEFAULT_FLAG_ALT,
                ),
                ft.Text(country.name, size=20, weight=ft.FontWeight.BOLD, color=ft.Colors.WHITE,
                        max_lines=1, overflow=ft.TextOverflow.ELLIPSIS),
                ft.Text(format_population(country.population), color=ft.Colors.with_opacity(0.8, ft.Colors.WHITE)),
            ],
        ),
    )

def card_placeholder(country: Country) -> ft.Container:
    return ft.Container(
        key=country.name,
        height=CARD_HEIGHT,
        bgcolor=ft.Colors.with_opacity(0.25, ft.Colors.BLUE_GREY_700),
        border_radius=8,
    )

def centered_message(text: str) -> ft.Container:
    return ft.Container(
        expand=True,
        alignment=ft.alignment.center,
        content=ft.Text(text, size=18, color=ft.Colors.RED_300),
    )

def spinner() -> ft.Container:
    return ft.Container(expand=True, alignment=ft.alignment.center, content=ft.ProgressRing())

def countries_grid(cards: List[ft.Control]) -> ft.GridView:
    return ft.GridView(
        controls=cards,
        expand=True,
        max_extent=360,
        child_aspect_ratio=2.2,
        spacing=16,
        run_spacing=16,
    )

def results_view(state: ControllerState, placeholders: bool = False) -> ft.Control:
    """Pick what the results area shows: spinner, error, grid or empty text."""
    if state.loading:
        return spinner()
    if state.error:
        return centered_message(state.error)
    if state.countries:
        make = card_placeholder if placeholders else country_card
        return countries_grid([make(c) for c in state.countries])
    return centered_message(EMPTY_TEXT)
