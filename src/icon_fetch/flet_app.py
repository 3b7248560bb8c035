"""Flet GUI application for icon-fetch.

Runs as a desktop window or, with ``--web``, in the browser where history
lives in the page's localStorage.
"""

import argparse
import asyncio
import logging
import sys
from dataclasses import dataclass
from functools import partial

import flet as ft

from .analysis.client import BrandAnalysisClient
from .config import Config, load_config
from .constants import SUPPORTED_LANGUAGES
from .core.controller import LookupController
from .core.favicon import build_icon_url
from .history.client_storage import ClientStorageHistoryStore
from .messages import get_message
from .models import BrandAnalysis, LookupRecord
from .utils.logger import VerbosityLevel, setup_logger

logger = logging.getLogger(__name__)


def parse_cli_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments for the GUI application.

    Args:
        argv: Argument list (default: sys.argv[1:])

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="IconFetch - GUI Application",
        prog="icon-fetch-app",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        default=None,
        help="Path to configuration file",
    )
    parser.add_argument(
        "--web",
        action="store_true",
        help="Open in the web browser instead of a desktop window",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=0,
        help="Port for the web server (default: random free port)",
    )
    parser.add_argument(
        "-v",
        "--verbosity",
        choices=[level.value for level in VerbosityLevel],
        default="normal",
        help="Log verbosity",
    )
    parser.add_argument(
        "-l",
        "--language",
        choices=SUPPORTED_LANGUAGES,
        default=None,
        help="Interface language (default: from configuration)",
    )
    parser.add_argument(
        "domain",
        nargs="?",
        default=None,
        help="Domain to look up on start (e.g., github.com)",
    )

    return parser.parse_args(argv)


@dataclass
class UITheme:
    """Centralized UI theme configuration for consistent styling."""

    # Colors
    primary_color: str = ft.Colors.INDIGO_400
    surface_color: str = "#1E293B"
    background_color: str = "#0F172A"
    text_primary: str = ft.Colors.WHITE
    text_secondary: str = ft.Colors.BLUE_GREY_300
    text_muted: str = ft.Colors.BLUE_GREY_500
    error_color: str = ft.Colors.RED_300
    success_color: str = ft.Colors.GREEN_400
    border_color: str = ft.Colors.WHITE12
    panel_color: str = ft.Colors.WHITE10

    # Sizes
    icon_preview: int = 96
    icon_history: int = 20
    swatch_size: int = 12

    # Text sizes
    text_title: int = 28
    text_heading: int = 18
    text_label: int = 14
    text_body: int = 12
    text_small: int = 11

    # Spacing
    spacing_large: int = 20
    spacing_medium: int = 15
    spacing_small: int = 10
    spacing_tiny: int = 5

    # Padding
    padding_large: int = 20
    padding_small: int = 10

    # Border radius
    border_radius_large: int = 16
    border_radius_small: int = 6

    # Seconds the "copied" confirmation stays visible
    copied_feedback_seconds: float = 2.0


class IconFetchApp:
    """Main Flet application: lookup form, result card and history list."""

    def __init__(
        self,
        page: ft.Page,
        config: Config | None = None,
        initial_domain: str | None = None,
        analysis_client: BrandAnalysisClient | None = None,
    ) -> None:
        """
        Initialize the application.

        Args:
            page: Flet page instance
            config: Application configuration (defaults if None)
            initial_domain: Optional domain to look up right away
            analysis_client: Brand analysis client (built from config if None)
        """
        self.page = page
        self.config = config or Config()
        self.language = self.config.output.language
        self.theme = UITheme()

        self.page.title = self._msg("app_title")
        self.page.theme_mode = ft.ThemeMode.DARK
        self.page.bgcolor = self.theme.background_color
        self.page.scroll = ft.ScrollMode.AUTO
        self.page.padding = self.theme.padding_large

        if analysis_client is None:
            analysis_client = BrandAnalysisClient(
                api_key=self.config.analysis.api_key,
                model=self.config.analysis.model,
                temperature=self.config.analysis.temperature,
                enabled=self.config.analysis.enabled,
            )

        self.controller = LookupController(
            history_store=ClientStorageHistoryStore(
                self.page,
                key=self.config.history.storage_key,
                max_entries=self.config.history.max_entries,
            ),
            analysis_client=analysis_client,
            icon_url_builder=partial(
                build_icon_url,
                size=self.config.favicon.size,
                service_url=self.config.favicon.service_url,
            ),
            language=self.language,
            on_change=lambda _: self.refresh(),
        )

        # UI Components
        self.domain_input = ft.TextField(
            label=self._msg("input_label"),
            hint_text=self._msg("input_hint"),
            prefix_icon=ft.Icons.SEARCH,
            expand=True,
            autofocus=True,
            value=initial_domain or "",
            on_submit=self._on_submit,
        )

        self.fetch_button = ft.ElevatedButton(
            self._msg("fetch_button"),
            icon=ft.Icons.LANGUAGE,
            on_click=self._on_submit,
            style=ft.ButtonStyle(
                color=ft.Colors.WHITE,
                bgcolor=self.theme.primary_color,
            ),
        )

        self.progress_bar = ft.ProgressBar(visible=False, color=self.theme.primary_color)
        self.error_text = ft.Text(
            "",
            size=self.theme.text_label,
            color=self.theme.error_color,
            visible=False,
        )

        self.result_column = ft.Column(
            spacing=self.theme.spacing_medium,
            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
        )
        self.result_card = self._create_card(self.result_column)

        self.history_column = ft.Column(spacing=self.theme.spacing_tiny)
        self.clear_history_button = ft.IconButton(
            icon=ft.Icons.DELETE_OUTLINE,
            tooltip=self._msg("history_clear"),
            icon_color=self.theme.text_muted,
            on_click=self._on_clear_history,
        )

        self._copied = False

        self._build_ui()
        self.refresh()

        if initial_domain:
            self.page.run_task(self.controller.submit, initial_domain)

    def _msg(self, key: str) -> str:
        return get_message(key, self.language)

    def _create_card(self, content: ft.Control) -> ft.Container:
        return ft.Container(
            content=content,
            bgcolor=self.theme.surface_color,
            border=ft.border.all(1, self.theme.border_color),
            border_radius=self.theme.border_radius_large,
            padding=self.theme.padding_large,
        )

    def _build_ui(self) -> None:
        """Build the static part of the user interface."""
        header = ft.Column(
            [
                ft.Row(
                    [
                        ft.Icon(ft.Icons.PUBLIC, size=36, color=self.theme.primary_color),
                        ft.Text(
                            self._msg("app_title"),
                            size=self.theme.text_title,
                            weight=ft.FontWeight.BOLD,
                            color=self.theme.primary_color,
                        ),
                    ],
                    alignment=ft.MainAxisAlignment.CENTER,
                ),
                ft.Text(
                    self._msg("app_subtitle"),
                    size=self.theme.text_label,
                    color=self.theme.text_secondary,
                    text_align=ft.TextAlign.CENTER,
                ),
            ],
            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
        )

        input_row = ft.Column(
            [
                ft.Row([self.domain_input, self.fetch_button]),
                self.progress_bar,
                self.error_text,
            ],
            spacing=self.theme.spacing_small,
        )

        history_card = self._create_card(
            ft.Column(
                [
                    ft.Row(
                        [
                            ft.Row(
                                [
                                    ft.Icon(ft.Icons.HISTORY, size=16, color=self.theme.text_muted),
                                    ft.Text(
                                        self._msg("history_title"),
                                        size=self.theme.text_label,
                                        weight=ft.FontWeight.BOLD,
                                    ),
                                ],
                                spacing=self.theme.spacing_tiny,
                            ),
                            self.clear_history_button,
                        ],
                        alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                    ),
                    self.history_column,
                ],
            )
        )

        body = ft.ResponsiveRow(
            [
                ft.Container(self.result_card, col={"sm": 12, "lg": 8}),
                ft.Container(history_card, col={"sm": 12, "lg": 4}),
            ],
            spacing=self.theme.spacing_large,
        )

        self.page.add(
            ft.Column(
                [header, input_row, body],
                spacing=self.theme.spacing_large,
                expand=True,
            )
        )

    # ------------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------------

    async def _on_submit(self, e: ft.ControlEvent) -> None:
        self._copied = False
        await self.controller.submit(self.domain_input.value or "")

    async def _on_history_click(self, record: LookupRecord) -> None:
        self.domain_input.value = record.domain
        self._copied = False
        await self.controller.select(record)

    def _on_clear_history(self, e: ft.ControlEvent) -> None:
        self.controller.clear_history()

    async def _on_copy(self, e: ft.ControlEvent) -> None:
        if not self.controller.current:
            return
        self.page.set_clipboard(self.controller.current.icon_url)
        self._copied = True
        self.refresh()
        await asyncio.sleep(self.theme.copied_feedback_seconds)
        self._copied = False
        self.refresh()

    def _on_open_icon(self, e: ft.ControlEvent) -> None:
        if self.controller.current:
            self.page.launch_url(self.controller.current.icon_url)

    def _on_open_site(self, e: ft.ControlEvent) -> None:
        if self.controller.current:
            self.page.launch_url(f"https://{self.controller.current.domain}")

    # ------------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------------

    def refresh(self) -> None:
        """Redraw all controller-dependent parts of the page."""
        controller = self.controller

        self.progress_bar.visible = controller.is_loading
        self.fetch_button.disabled = controller.is_loading
        self.error_text.value = controller.error or ""
        self.error_text.visible = bool(controller.error)

        self.result_column.controls = self._build_result()
        self.history_column.controls = self._build_history()
        self.clear_history_button.visible = bool(controller.history)

        self.page.update()

    def _build_result(self) -> list[ft.Control]:
        current = self.controller.current
        if current is None:
            return [
                ft.Icon(ft.Icons.PUBLIC, size=64, color=self.theme.text_muted),
                ft.Text(self._msg("empty_state"), color=self.theme.text_muted),
            ]

        controls: list[ft.Control] = [
            ft.Container(
                content=ft.Image(
                    src=current.icon_url,
                    width=self.theme.icon_preview,
                    height=self.theme.icon_preview,
                    fit=ft.ImageFit.CONTAIN,
                ),
                padding=self.theme.padding_small,
                border_radius=self.theme.border_radius_large,
                bgcolor=self.theme.panel_color,
            ),
            ft.Row(
                [
                    ft.Text(
                        current.domain,
                        size=self.theme.text_heading,
                        weight=ft.FontWeight.BOLD,
                    ),
                    ft.IconButton(
                        icon=ft.Icons.OPEN_IN_NEW,
                        icon_size=16,
                        icon_color=self.theme.text_muted,
                        tooltip=f"https://{current.domain}",
                        on_click=self._on_open_site,
                    ),
                ],
                alignment=ft.MainAxisAlignment.CENTER,
            ),
            ft.Text(
                self._msg("icon_url_label"),
                size=self.theme.text_small,
                color=self.theme.text_muted,
                weight=ft.FontWeight.BOLD,
            ),
            ft.Row(
                [
                    ft.Text(
                        current.icon_url,
                        size=self.theme.text_body,
                        font_family="monospace",
                        selectable=True,
                        expand=True,
                    ),
                    ft.IconButton(
                        icon=ft.Icons.CHECK if self._copied else ft.Icons.COPY,
                        icon_color=self.theme.success_color if self._copied else None,
                        tooltip=self._msg("copied" if self._copied else "copy_tooltip"),
                        on_click=self._on_copy,
                    ),
                ],
            ),
            ft.OutlinedButton(
                self._msg("open_icon"),
                icon=ft.Icons.DOWNLOAD,
                on_click=self._on_open_icon,
            ),
        ]

        if self.controller.analysis is not None:
            controls.append(self._build_analysis(self.controller.analysis))
        elif self.controller.is_loading:
            controls.append(
                ft.Row(
                    [
                        ft.ProgressRing(width=16, height=16, stroke_width=2),
                        ft.Text(
                            self._msg("analysis_pending"),
                            size=self.theme.text_body,
                            italic=True,
                            color=self.theme.text_muted,
                        ),
                    ],
                    alignment=ft.MainAxisAlignment.CENTER,
                )
            )

        return controls

    def _build_analysis(self, analysis: BrandAnalysis) -> ft.Control:
        """Build the brand analysis section."""
        swatches = [
            ft.Container(
                content=ft.Row(
                    [
                        ft.Container(
                            width=self.theme.swatch_size,
                            height=self.theme.swatch_size,
                            bgcolor=color,
                            border_radius=2,
                        ),
                        ft.Text(color.upper(), size=self.theme.text_small, font_family="monospace"),
                    ],
                    spacing=self.theme.spacing_tiny,
                    tight=True,
                ),
                padding=ft.padding.symmetric(horizontal=8, vertical=4),
                border_radius=self.theme.border_radius_small,
                bgcolor=self.theme.panel_color,
            )
            for color in analysis.colors
        ]

        def field(label_key: str, value: ft.Control) -> ft.Column:
            return ft.Column(
                [
                    ft.Text(
                        self._msg(label_key),
                        size=self.theme.text_small,
                        weight=ft.FontWeight.BOLD,
                        color=self.theme.text_muted,
                    ),
                    value,
                ],
                spacing=self.theme.spacing_tiny,
            )

        return ft.Container(
            content=ft.Column(
                [
                    ft.Row(
                        [
                            ft.Icon(ft.Icons.AUTO_AWESOME, size=16, color=self.theme.primary_color),
                            ft.Text(
                                self._msg("analysis_title"),
                                size=self.theme.text_label,
                                weight=ft.FontWeight.BOLD,
                                color=self.theme.primary_color,
                            ),
                        ],
                    ),
                    field("palette_label", ft.Row(swatches, wrap=True)),
                    field("style_label", ft.Text(analysis.style, size=self.theme.text_label)),
                    field(
                        "identity_label",
                        ft.Text(
                            analysis.brand_identity,
                            size=self.theme.text_body,
                            color=self.theme.text_secondary,
                        ),
                    ),
                    field(
                        "improvements_label",
                        ft.Text(
                            f'"{analysis.suggested_improvements}"',
                            size=self.theme.text_body,
                            italic=True,
                            color=self.theme.primary_color,
                        ),
                    ),
                ],
                spacing=self.theme.spacing_medium,
                horizontal_alignment=ft.CrossAxisAlignment.START,
            ),
            padding=ft.padding.only(top=self.theme.padding_large),
            border=ft.border.only(top=ft.BorderSide(1, self.theme.border_color)),
        )

    def _build_history(self) -> list[ft.Control]:
        if not self.controller.history:
            return [
                ft.Text(
                    self._msg("history_empty"),
                    size=self.theme.text_body,
                    italic=True,
                    color=self.theme.text_muted,
                )
            ]

        return [
            ft.ListTile(
                leading=ft.Image(
                    src=record.icon_url,
                    width=self.theme.icon_history,
                    height=self.theme.icon_history,
                    fit=ft.ImageFit.CONTAIN,
                ),
                title=ft.Text(record.domain, size=self.theme.text_label, no_wrap=True),
                dense=True,
                on_click=lambda _, r=record: self.page.run_task(self._on_history_click, r),
            )
            for record in self.controller.history
        ]


def main() -> None:
    """Main entry point for Flet app."""
    args = parse_cli_args()
    setup_logger(level=VerbosityLevel(args.verbosity))

    config = load_config(extra_paths=[args.config] if args.config else None)
    if args.language:
        config.output.language = args.language

    def create_app(page: ft.Page) -> None:
        """Create and initialize the app."""
        IconFetchApp(page, config=config, initial_domain=args.domain)

    logger.info(f"Starting GUI ({'web' if args.web else 'desktop'})")
    try:
        ft.app(
            target=create_app,
            view=ft.AppView.WEB_BROWSER if args.web else ft.AppView.FLET_APP,
            port=args.port,
        )
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
