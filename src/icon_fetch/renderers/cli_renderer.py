"""CLI renderer using Rich library."""

from datetime import datetime

from rich import box
from rich.color import Color, ColorParseError
from rich.console import Console
from rich.style import Style
from rich.table import Table
from rich.text import Text

from ..messages import DEFAULT_LANGUAGE, get_message
from ..models import BrandAnalysis, LookupRecord
from ..utils.logger import VerbosityLevel
from .base import BaseRenderer


class CLIRenderer(BaseRenderer):
    """
    Renders output to the terminal.

    Brand colors are shown as swatches next to their hex codes when the
    terminal supports color.
    """

    def __init__(
        self,
        verbosity: VerbosityLevel = VerbosityLevel.NORMAL,
        language: str = DEFAULT_LANGUAGE,
        color: bool = True,
    ):
        """
        Initialize CLI renderer.

        Args:
            verbosity: Output verbosity level
            language: Language for labels
            color: Enable colored output
        """
        super().__init__(verbosity, language)
        self.console = Console(color_system="auto" if color else None)

    def _label(self, key: str) -> str:
        return get_message(key, self.language)

    def render_lookup(self, record: LookupRecord, analysis: BrandAnalysis | None) -> None:
        if self.verbosity == VerbosityLevel.QUIET:
            self.console.print(record.icon_url, markup=False, highlight=False, soft_wrap=True)
            return

        self.console.print(f"\n[bold blue]{record.domain}[/bold blue]")
        self.console.print(
            f"  {self._label('icon_url_label')}: [link={record.icon_url}]{record.icon_url}[/link]",
            soft_wrap=True,
        )

        if analysis is None:
            return

        self.console.print(f"\n  [cyan]{self._label('analysis_title')}[/cyan]")

        palette = Text(f"    {self._label('palette_label')}: ")
        for color in analysis.colors:
            palette.append_text(self._swatch(color))
            palette.append(" ")
        self.console.print(palette)

        self.console.print(f"    {self._label('style_label')}: ", end="")
        self.console.print(analysis.style, markup=False)
        self.console.print(f"    {self._label('identity_label')}: ", end="")
        self.console.print(analysis.brand_identity, markup=False)
        self.console.print(f"    {self._label('improvements_label')}: ", end="")
        self.console.print(f'"{analysis.suggested_improvements}"', markup=False, style="italic")

    def render_history(self, records: list[LookupRecord]) -> None:
        if not records:
            self.console.print(f"[dim]{self._label('history_empty')}[/dim]")
            return

        if self.verbosity == VerbosityLevel.QUIET:
            for record in records:
                self.console.print(record.domain, markup=False, highlight=False)
            return

        table = Table(box=box.ROUNDED, show_header=True, header_style="bold")
        table.title = self._label("history_title")
        table.add_column("#", justify="right")
        table.add_column("Domain")
        table.add_column("Time")
        if self.verbosity in (VerbosityLevel.VERBOSE, VerbosityLevel.DEBUG):
            table.add_column(self._label("icon_url_label"))

        for index, record in enumerate(records, start=1):
            row = [str(index), record.domain, self._format_timestamp(record.timestamp)]
            if self.verbosity in (VerbosityLevel.VERBOSE, VerbosityLevel.DEBUG):
                row.append(record.icon_url)
            table.add_row(*row)

        self.console.print(table)

    @staticmethod
    def _swatch(color: str) -> Text:
        """Colored block followed by the color code; plain code if unparseable."""
        swatch = Text()
        try:
            swatch.append("  ", style=Style(bgcolor=Color.parse(color)))
            swatch.append(" ")
        except ColorParseError:
            pass
        swatch.append(color.upper())
        return swatch

    @staticmethod
    def _format_timestamp(timestamp: int) -> str:
        return datetime.fromtimestamp(timestamp / 1000).strftime("%Y-%m-%d %H:%M")
