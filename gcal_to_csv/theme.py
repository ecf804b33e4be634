from __future__ import annotations
from rich.console import Console
from rich.theme import Theme

_theme = Theme({
    "ok": "bold green",
    "err": "bold red",
})

console = Console(theme=_theme, soft_wrap=True)
err_console = Console(theme=_theme, soft_wrap=True, stderr=True)
print = console.print
