import flet as ft
from countryfinder.config import configure_logging
from countryfinder.ui.app import CountryFinderApp

def main(page: ft.Page):
    configure_logging()
    CountryFinderApp(page)

if __name__ == "__main__":
    ft.app(target=main)
