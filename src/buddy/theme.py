"""Console theming for Buddy."""

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.text import Text
from rich.theme import Theme

from . import __version__


# City Lights palette
CITY_LIGHTS_COLORS = {
    'surface_light': '#41505E',
    'primary': '#68D5F3',
    'accent': '#B7C5D3',
    'success': '#8BD649',
    'warning': '#FFD93D',
    'error': '#F78C6C',
    'text_primary': '#B7C5D3',
    'text_muted': '#4F5B66',
    'text_bright': '#FFFFFF',
}

BUDDY_THEME = Theme({
    'default': f"{CITY_LIGHTS_COLORS['text_primary']}",
    'muted': f"{CITY_LIGHTS_COLORS['text_muted']}",
    'bright': f"{CITY_LIGHTS_COLORS['text_bright']} bold",
    'success': f"{CITY_LIGHTS_COLORS['success']} bold",
    'warning': f"{CITY_LIGHTS_COLORS['warning']} bold",
    'error': f"{CITY_LIGHTS_COLORS['error']} bold",
    'primary': f"{CITY_LIGHTS_COLORS['primary']} bold",
    'accent': f"{CITY_LIGHTS_COLORS['accent']}",
    'todo_done': f"{CITY_LIGHTS_COLORS['success']}",
    'todo_pending': f"{CITY_LIGHTS_COLORS['primary']}",
    'header': f"{CITY_LIGHTS_COLORS['text_bright']} bold",
    'border': f"{CITY_LIGHTS_COLORS['surface_light']}",
})


def get_themed_console(no_color: bool = False) -> Console:
    """Get a console instance with the Buddy theme applied."""
    return Console(theme=BUDDY_THEME, no_color=no_color, highlight=False)


def show_startup_banner(console: Console) -> None:
    """Display the startup banner."""
    title_text = Text("Buddy", style="primary")
    banner_panel = Panel(
        Align.center(title_text),
        title="[bright]Welcome to[/bright]",
        subtitle=f"[muted]v{__version__}[/muted]",
        border_style="border",
        padding=(0, 2),
    )

    console.print()
    console.print(banner_panel)
