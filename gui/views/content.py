"""Root view: the list of stored items."""

from __future__ import annotations

import tkinter as tk
from datetime import datetime
from tkinter import ttk
from typing import Iterable, List, Tuple

from coinpeek.models.schemas import ItemSchema
from gui.components.status_bar import StatusBar
from gui.services.items_service import ItemsService
from gui.views.base import BaseView

DISPLAY_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_timestamp(value: datetime) -> str:
    """Render a stored UTC timestamp in the local timezone."""
    return value.astimezone().strftime(DISPLAY_FORMAT)


def item_rows(items: Iterable[ItemSchema]) -> List[Tuple[str, str]]:
    """Treeview rows as (iid, formatted timestamp) pairs."""
    return [(str(item.id), format_timestamp(item.timestamp)) for item in items]


class ContentView(BaseView):
    def _build(self):
        self.service = ItemsService(self.container)

        ttk.Label(self, text="Items", style="Header.TLabel").pack(anchor="w", pady=(0, 8))

        toolbar = ttk.Frame(self, style="Main.TFrame")
        toolbar.pack(fill="x", pady=(0, 6))
        self.add_btn = ttk.Button(toolbar, text="+ Add Item", style="Accent.TButton", command=self.add_item)
        self.add_btn.pack(side="left")
        self.delete_btn = ttk.Button(toolbar, text="Delete", command=self.delete_selected, state="disabled")
        self.delete_btn.pack(side="left", padx=(6, 0))

        body = ttk.Frame(self, style="Main.TFrame")
        body.pack(fill="both", expand=True)
        self.tree = ttk.Treeview(body, columns=("timestamp",), show="headings", selectmode="extended")
        self.tree.heading("timestamp", text="Timestamp")
        self.tree.column("timestamp", anchor="w", width=220)
        scroll = ttk.Scrollbar(body, orient=tk.VERTICAL, command=self.tree.yview)
        self.tree.configure(yscrollcommand=scroll.set)
        self.tree.pack(side="left", fill="both", expand=True)
        scroll.pack(side="right", fill="y")
        self.tree.bind("<<TreeviewSelect>>", lambda _: self._on_select())
        self.tree.bind("<Delete>", lambda _: self.delete_selected())

        self.detail_var = tk.StringVar(value="Select an item")
        ttk.Label(self, textvariable=self.detail_var).pack(anchor="w", pady=(8, 4))

        self.status_bar = StatusBar(self, self.app_state)
        self.status_bar.pack(fill="x", side="bottom")

        self.refresh()

    def refresh(self):
        rows = item_rows(self.service.fetch_items())
        self.tree.delete(*self.tree.get_children())
        for iid, timestamp in rows:
            self.tree.insert("", "end", iid=iid, values=(timestamp,))
        self.app_state.item_count = len(rows)
        self.app_state.selected_item_ids = []
        self._on_select()
        self.status_bar.update_status()

    def selected_ids(self) -> List[int]:
        return [int(iid) for iid in self.tree.selection()]

    def add_item(self):
        item = self.service.add_item()
        self.app_state.status_message = f"Added item at {format_timestamp(item.timestamp)}"
        self.refresh()
        self.tree.selection_set(str(item.id))
        self.tree.see(str(item.id))

    def delete_selected(self):
        ids = self.selected_ids()
        if not ids:
            return
        deleted = self.service.delete_items(ids)
        self.app_state.status_message = f"Deleted {deleted} item{'s' if deleted != 1 else ''}"
        self.refresh()

    def _on_select(self):
        ids = self.selected_ids()
        self.app_state.selected_item_ids = ids
        self.delete_btn.configure(state="normal" if ids else "disabled")
        if len(ids) == 1:
            timestamp = self.tree.set(str(ids[0]), "timestamp")
            self.detail_var.set(f"Item at {timestamp}")
        elif ids:
            self.detail_var.set(f"{len(ids)} items selected")
        else:
            self.detail_var.set("Select an item")
