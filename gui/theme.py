"""Theme primitives and ttk style setup."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Base theme definition."""

    name: str = "Default"
    primary_color: str = "#1f2937"  # slate-800
    accent_color: str = "#3b82f6"  # blue-500
    background_color: str = "#ffffff"
    surface_color: str = "#f3f4f6"  # gray-100
    muted_color: str = "#6b7280"  # gray-500


@dataclass(frozen=True)
class ModernTheme(Theme):
    """A darker default theme."""

    name: str = "Modern"
    background_color: str = "#1e1e2e"
    surface_color: str = "#313244"
    primary_color: str = "#cdd6f4"
    accent_color: str = "#89b4fa"
    muted_color: str = "#a6adc8"


def apply_theme(root, theme: Theme = ModernTheme()) -> None:
    """Configure the named ttk styles the views rely on."""
    from tkinter import ttk

    style = ttk.Style(root)
    if "clam" in style.theme_names():
        style.theme_use("clam")

    bg = theme.background_color
    style.configure("Main.TFrame", background=bg)
    style.configure("Panel.TFrame", background=theme.surface_color)
    style.configure("TLabel", background=bg, foreground=theme.primary_color)
    style.configure(
        "Header.TLabel",
        background=bg,
        foreground=theme.primary_color,
        font=("TkDefaultFont", 14, "bold"),
    )
    style.configure("Muted.TLabel", background=theme.surface_color, foreground=theme.muted_color)
    style.configure("TButton", padding=6)
    style.configure("Accent.TButton", background=theme.accent_color)
    style.configure(
        "Treeview",
        background=theme.surface_color,
        foreground=theme.primary_color,
        fieldbackground=theme.surface_color,
    )
    root.configure(bg=bg)
