"""Entry point for the lunch-tray Textual app."""

from __future__ import annotations

from app.lunch_tray_app import LunchTrayApp


def main() -> None:
    LunchTrayApp().run()


if __name__ == "__main__":
    main()
