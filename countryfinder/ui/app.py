import flet as ft
import threading
import time
import logging
from typing import Optional

from countryfinder.config import CARD_REVEAL_DELAY_MS
from countryfinder.controller import CountrySearchController
from countryfinder.models import ControllerState
from countryfinder.services.countries_client import CountriesClient
from countryfinder.ui import cards

log = logging.getLogger("countryfinder.ui")

class CountryFinderApp:
    def __init__(
        self,
        page: ft.Page,
        client: Optional[CountriesClient] = None,
        reveal_delay_ms: int = CARD_REVEAL_DELAY_MS,
    ):
        self.page = page
        self.reveal_delay = max(0, reveal_delay_ms) / 1000.0
        self._render_gen = 0
        self._render_lock = threading.Lock()

        self.controller = CountrySearchController(client or CountriesClient(), on_change=self._on_state_change)

        self.search_field = ft.TextField()
        self.results_host = ft.Container(expand=True)

        self._build_page()
        self.page.on_close = lambda e: self.close()
        self.controller.start()

    def _build_page(self):
        self.page.title = "Countries"
        self.page.on_keyboard_event = self._on_key
        self.page.theme = ft.Theme(color_scheme_seed=ft.Colors.BLUE_GREY)
        self.page.dark_theme = ft.Theme(color_scheme_seed=ft.Colors.BLUE_GREY)
        self.page.theme_mode = ft.ThemeMode.DARK
        self.page.bgcolor = "#020617"
        self.page.padding = 24

        self.page.appbar = ft.AppBar(
            title=ft.Row(
                spacing=8,
                vertical_alignment=ft.CrossAxisAlignment.CENTER,
                controls=[
                    ft.Icon(ft.Icons.PUBLIC, size=22, color=ft.Colors.WHITE),
                    ft.Text("Countries", weight=ft.FontWeight.BOLD, size=18, color=ft.Colors.WHITE),
                ],
            ),
            center_title=False,
            bgcolor=ft.Colors.BLUE_GREY_900,
            elevation=2,
            actions=[
                ft.IconButton(
                    icon=ft.Icons.REFRESH,
                    tooltip="Refresh",
                    on_click=lambda e: self.controller.refresh(),
                ),
            ],
        )

        self.search_field = ft.TextField(
            hint_text="Search by name",
            prefix_icon=ft.Icons.SEARCH,
            on_change=self._on_search_change,
            filled=True,
            border_radius=8,
        )
        self.results_host = ft.Container(expand=True, content=cards.results_view(self.controller.state))

        self.page.controls.clear()
        self.page.add(
            ft.Column(
                [self.search_field, self.results_host],
                expand=True, spacing=16,
            )
        )
        self.page.update()

    def _on_search_change(self, e):
        self.controller.on_query_change(e.control.value or "")

    def _on_state_change(self, state: ControllerState):
        try:
            self._render(state)
        except Exception as ex:
            log.exception("Render failed")
            self._snack(str(ex))

    def _render(self, state: ControllerState):
        staggered = self.reveal_delay > 0 and bool(state.countries) and not state.loading and not state.error
        view = cards.results_view(state, placeholders=staggered)
        with self._render_lock:
            # a newer transition already landed; its own notification renders it
            if state is not self.controller.state:
                log.debug("Skipping outdated render")
                return
            self._render_gen += 1
            gen = self._render_gen
            self.results_host.content = view
        self.page.update()
        if staggered:
            threading.Thread(target=self._reveal_cards, args=(gen, state, view), daemon=True).start()

    def _reveal_cards(self, gen: int, state: ControllerState, grid: ft.GridView):
        for i, country in enumerate(state.countries):
            time.sleep(self.reveal_delay)
            with self._render_lock:
                if gen != self._render_gen:
                    return
                grid.controls[i] = cards.country_card(country)
            self.page.update()

    def _snack(self, msg: str):
        self.page.open(ft.SnackBar(content=ft.Text(msg)))

    def _on_key(self, e: ft.KeyboardEvent):
        if e.ctrl and e.key.lower() == "f":
            self.search_field.focus()
            self.page.update()

    def close(self):
        with self._render_lock:
            self._render_gen += 1
        self.controller.close()
