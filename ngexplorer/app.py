"""The explorer window: navigation, search, rename and delete."""

from __future__ import annotations

import argparse
import os
import queue
import string
import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Iterable, Optional, Protocol

from ngexplorer.fileops import (
    FileOperationError,
    delete_path,
    rename_keeping_extension,
    resolve_directory,
    split_name,
)
from ngexplorer.search import SearchCriteria, search_files

WINDOW_TITLE = "NGExplorer Alpha 2.0"
NOTHING_FOUND = "❌ Ничего не найдено"
ERROR_TITLE = "Ошибка"
INVALID_PATH_MESSAGE = "Путь не существует или не является директорией."


class Dialogs(Protocol):
    """The message boxes and prompts the window needs."""

    def warning(self, title: str, message: str) -> None: ...

    def information(self, title: str, message: str) -> None: ...

    def critical(self, title: str, message: str) -> None: ...

    def question(self, title: str, message: str) -> bool: ...

    def get_text(self, title: str, label: str, initial: str) -> Optional[str]: ...


@dataclass(frozen=True)
class ResultEntry:
    """One line of the search result list; ``path`` is None for the placeholder."""

    label: str
    path: Optional[str] = None


def result_entries(paths: Iterable) -> list[ResultEntry]:
    """Turn found paths into list entries, or a single 'nothing found' entry."""
    entries = [ResultEntry(os.path.basename(p), p) for p in map(os.fspath, paths)]
    return entries or [ResultEntry(NOTHING_FOUND)]


def _filesystem_root() -> str:
    return os.path.abspath(os.sep)


class ExplorerWindow:
    """State and actions of the explorer, independent of the widget toolkit."""

    def __init__(
        self,
        dialogs: Dialogs,
        schedule: Optional[Callable[[Callable[[], None]], None]] = None,
    ) -> None:
        self.dialogs = dialogs
        self.schedule = schedule or (lambda callback: callback())
        self.current_path: Optional[str] = None
        self.table_root: Optional[str] = None
        self.path_text = ""
        self.selected: Optional[str] = None
        self.search_panel_visible = False
        self.name_filter = ""
        self.extension_filter = ""
        self.content_filter = ""
        self.include_no_extension = False
        self.recursive = False
        self.results: list[ResultEntry] = []
        self.searching = False
        self.on_search_finished: Optional[Callable[[list[ResultEntry]], None]] = None

    def navigate_to(self, path) -> bool:
        """Open a directory; warn and restore the path text when it is not one."""
        try:
            directory = resolve_directory(path)
        except FileOperationError:
            self.dialogs.warning(ERROR_TITLE, INVALID_PATH_MESSAGE)
            self.path_text = self.current_path or ""
            return False
        self.current_path = directory
        self.table_root = directory
        self.path_text = directory
        return True

    def start_search(self) -> threading.Thread:
        """Search below the current directory in a background thread."""
        if self.searching:
            raise RuntimeError("a search is already running")
        criteria = SearchCriteria(
            name=self.name_filter,
            extension=self.extension_filter,
            content=self.content_filter,
            include_no_extension=self.include_no_extension,
            recursive=self.recursive,
        )
        root = self.current_path or _filesystem_root()
        self.results = []
        self.searching = True
        worker = threading.Thread(
            target=self._run_search, args=(root, criteria), daemon=True
        )
        worker.start()
        return worker

    def _run_search(self, root: str, criteria: SearchCriteria) -> None:
        found = list(search_files(root, criteria))
        self.schedule(lambda: self._finish_search(found))

    def _finish_search(self, found: list[str]) -> None:
        self.results = result_entries(found)
        self.searching = False
        if self.on_search_finished is not None:
            self.on_search_finished(self.results)

    def rename_selected(self) -> Optional[str]:
        """Ask for a new base name for the selected item and rename it."""
        if self.selected is None:
            self.dialogs.warning(ERROR_TITLE, "Элемент не выбран.")
            return None
        base, _ = split_name(self.selected)
        new_base = self.dialogs.get_text("Переименование", "Новое имя:", base)
        if not new_base or new_base == base:
            return None
        try:
            new_path = rename_keeping_extension(self.selected, new_base)
        except FileOperationError:
            self.dialogs.critical(ERROR_TITLE, "Не удалось переименовать файл.")
            return None
        self.selected = new_path
        return new_path

    def delete_selected(self) -> bool:
        """Delete the selected item after confirmation."""
        if self.selected is None:
            self.dialogs.information("Удаление", "Ничего не выбрано.")
            return False
        name = os.path.basename(self.selected)
        message = f'Вы уверены, что хотите удалить "{name}"?'
        if not self.dialogs.question("Подтверждение удаления", message):
            return False
        try:
            delete_path(self.selected)
        except FileOperationError:
            self.dialogs.warning(ERROR_TITLE, "Не удалось удалить файл или папку.")
            return False
        self.selected = None
        return True

    def toggle_search_panel(self) -> bool:
        """Show or hide the search panel; returns whether it is now shown."""
        self.search_panel_visible = not self.search_panel_visible
        return self.search_panel_visible


def _drives() -> list[str]:
    if os.name == "nt":
        return [
            f"{letter}:\\"
            for letter in string.ascii_uppercase
            if os.path.exists(f"{letter}:\\")
        ]
    return [os.sep]


def _list_directory(path: str) -> list[os.DirEntry]:
    try:
        with os.scandir(path) as iterator:
            entries = [entry for entry in iterator if not entry.name.startswith(".")]
    except OSError:
        return []

    def sort_key(entry: os.DirEntry):
        try:
            is_dir = entry.is_dir()
        except OSError:
            is_dir = False
        return (not is_dir, entry.name.casefold())

    return sorted(entries, key=sort_key)


def _describe(entry: os.DirEntry) -> tuple[str, str, str]:
    try:
        info = entry.stat()
        is_dir = entry.is_dir()
    except OSError:
        return ("", "", "")
    modified = datetime.fromtimestamp(info.st_mtime).strftime("%d.%m.%Y %H:%M")
    if is_dir:
        return ("", "Folder", modified)
    _, suffix = split_name(entry.name)
    kind = f"{suffix} File" if suffix else "File"
    return (str(info.st_size), kind, modified)


class _TkDialogs:
    def __init__(self, parent) -> None:
        self._parent = parent

    def warning(self, title: str, message: str) -> None:
        from tkinter import messagebox

        messagebox.showwarning(title, message, parent=self._parent)

    def information(self, title: str, message: str) -> None:
        from tkinter import messagebox

        messagebox.showinfo(title, message, parent=self._parent)

    def critical(self, title: str, message: str) -> None:
        from tkinter import messagebox

        messagebox.showerror(title, message, parent=self._parent)

    def question(self, title: str, message: str) -> bool:
        from tkinter import messagebox

        return bool(messagebox.askyesno(title, message, parent=self._parent))

    def get_text(self, title: str, label: str, initial: str) -> Optional[str]:
        from tkinter import simpledialog

        return simpledialog.askstring(
            title, label, initialvalue=initial, parent=self._parent
        )


class _TkFrontend:
    """Tk widgets bound to an ExplorerWindow."""

    def __init__(self, root, start_path: Optional[str] = None) -> None:
        import tkinter as tk
        from tkinter import ttk

        self._tk = tk
        self._ttk = ttk
        self._root = root
        self._pending: queue.SimpleQueue = queue.SimpleQueue()
        self._populated: set[str] = set()
        self.window = ExplorerWindow(_TkDialogs(root), schedule=self._pending.put)
        self.window.on_search_finished = self._show_results

        root.title(WINDOW_TITLE)
        root.geometry("800x600")
        self._build()
        root.after(50, self._drain)
        if start_path is not None:
            self.window.navigate_to(start_path)
        self._refresh()

    def _build(self) -> None:
        tk, ttk = self._tk, self._ttk
        central = ttk.Frame(self._root)
        central.pack(fill="both", expand=True)

        self._path_var = tk.StringVar()
        path_entry = ttk.Entry(central, textvariable=self._path_var)
        path_entry.pack(fill="x")
        path_entry.bind("<Return>", self._on_path_entered)
        ttk.Button(central, text="🔍 Поиск", command=self._on_toggle).pack(anchor="w")

        self._main_pane = ttk.PanedWindow(central, orient=tk.VERTICAL)
        self._main_pane.pack(fill="both", expand=True)

        top = ttk.PanedWindow(self._main_pane, orient=tk.HORIZONTAL)
        self._drives = tk.Listbox(top, width=6, exportselection=False)
        self._drive_paths = _drives()
        for drive in self._drive_paths:
            self._drives.insert("end", drive)
        self._drives.bind("<<ListboxSelect>>", self._on_drive)

        self._tree = ttk.Treeview(top, show="tree", selectmode="browse")
        self._tree.column("#0", width=250)
        self._tree.bind("<<TreeviewOpen>>", self._on_tree_open)
        self._tree.bind("<<TreeviewSelect>>", self._on_tree_select)
        self._tree.bind("<Button-3>", lambda event: self._context_menu(self._tree, event))

        self._table = ttk.Treeview(
            top, columns=("size", "type", "modified"), selectmode="browse"
        )
        for column, title in (
            ("#0", "Name"),
            ("size", "Size"),
            ("type", "Type"),
            ("modified", "Date Modified"),
        ):
            self._table.heading(column, text=title)
        self._table.bind("<<TreeviewSelect>>", self._on_table_select)
        self._table.bind(
            "<Button-3>", lambda event: self._context_menu(self._table, event)
        )

        top.add(self._drives, weight=0)
        top.add(self._tree, weight=1)
        top.add(self._table, weight=2)
        self._main_pane.add(top, weight=1)

        self._search_panel = self._build_search_panel(self._main_pane)
        self._progress = ttk.Progressbar(central, mode="indeterminate")

        for drive in self._drive_paths:
            self._insert_tree_node("", drive, drive)

    def _build_search_panel(self, parent):
        tk, ttk = self._tk, self._ttk
        panel = ttk.Frame(parent)
        filters = ttk.Frame(panel)
        filters.pack(side="left", fill="y", padx=4, pady=4)

        self._name_var = tk.StringVar()
        self._extension_var = tk.StringVar()
        self._content_var = tk.StringVar()
        self._include_var = tk.BooleanVar(value=False)
        self._recursive_var = tk.BooleanVar(value=False)

        fields = (
            ("Имя:", self._name_var),
            ("Расширение:", self._extension_var),
            ("Содержимое:", self._content_var),
        )
        for row, (label, variable) in enumerate(fields):
            ttk.Label(filters, text=label).grid(row=row, column=0, sticky="w")
            ttk.Entry(filters, textvariable=variable).grid(row=row, column=1, sticky="ew")
        ttk.Checkbutton(
            filters, text="Включать файлы без расширения", variable=self._include_var
        ).grid(row=3, column=0, columnspan=2, sticky="w")
        ttk.Checkbutton(
            filters, text="Рекурсивно", variable=self._recursive_var
        ).grid(row=4, column=0, columnspan=2, sticky="w")
        self._search_button = ttk.Button(filters, text="Найти", command=self._on_search)
        self._search_button.grid(row=5, column=0, columnspan=2, sticky="ew")

        self._results = tk.Listbox(panel, height=6)
        self._results.pack(side="left", fill="both", expand=True, padx=4, pady=4)
        return panel

    def _insert_tree_node(self, parent: str, path: str, text: str) -> None:
        if self._tree.exists(path):
            return
        self._tree.insert(parent, "end", iid=path, text=text)
        if os.path.isdir(path):
            self._tree.insert(path, "end", text="")

    def _populate(self, path: str) -> None:
        self._populated.add(path)
        self._tree.delete(*self._tree.get_children(path))
        for entry in _list_directory(path):
            self._insert_tree_node(path, entry.path, entry.name)

    def _on_tree_open(self, _event) -> None:
        path = self._tree.focus()
        if path and path not in self._populated:
            self._populate(path)

    def _on_tree_select(self, _event) -> None:
        path = self._tree.focus()
        if not path:
            return
        self.window.selected = path
        if os.path.isdir(path):
            self.window.navigate_to(path)
            self._refresh()

    def _on_table_select(self, _event) -> None:
        selection = self._table.selection()
        if selection:
            self.window.selected = selection[0]

    def _on_drive(self, _event) -> None:
        chosen = self._drives.curselection()
        if not chosen:
            return
        drive = self._drive_paths[chosen[0]]
        if self.window.navigate_to(drive):
            self._tree.delete(*self._tree.get_children(""))
            self._populated.clear()
            self._insert_tree_node("", drive, drive)
            self._populate(drive)
            self._tree.item(drive, open=True)
        self._refresh()

    def _on_path_entered(self, _event) -> None:
        self.window.navigate_to(self._path_var.get())
        self._refresh()

    def _refresh(self) -> None:
        self._path_var.set(self.window.path_text)
        self._table.delete(*self._table.get_children())
        if not self.window.table_root:
            return
        for entry in _list_directory(self.window.table_root):
            self._table.insert(
                "", "end", iid=entry.path, text=entry.name, values=_describe(entry)
            )

    def _context_menu(self, view, event) -> None:
        row = view.identify_row(event.y)
        if not row:
            self.window.dialogs.information("Контекстное меню", "Ничего не выбрано.")
            return
        view.selection_set(row)
        view.focus(row)
        self.window.selected = row
        menu = self._tk.Menu(self._root, tearoff=0)
        menu.add_command(label="Удалить", command=self._delete)
        menu.add_command(label="Переименовать", command=self._rename)
        menu.tk_popup(event.x_root, event.y_root)

    def _reload_after_change(self, old_path: str) -> None:
        if self._tree.exists(old_path):
            parent = self._tree.parent(old_path)
            if parent:
                self._populate(parent)
            else:
                self._tree.delete(old_path)
        self._refresh()

    def _delete(self) -> None:
        old_path = self.window.selected
        if self.window.delete_selected() and old_path is not None:
            self._reload_after_change(old_path)

    def _rename(self) -> None:
        old_path = self.window.selected
        if self.window.rename_selected() and old_path is not None:
            self._reload_after_change(old_path)

    def _on_search(self) -> None:
        if self.window.searching:
            return
        self.window.name_filter = self._name_var.get()
        self.window.extension_filter = self._extension_var.get()
        self.window.content_filter = self._content_var.get()
        self.window.include_no_extension = self._include_var.get()
        self.window.recursive = self._recursive_var.get()
        self._results.delete(0, "end")
        self._search_button.state(["disabled"])
        self._progress.pack(fill="x")
        self._progress.start()
        self.window.start_search()

    def _show_results(self, entries: list[ResultEntry]) -> None:
        self._results.delete(0, "end")
        for entry in entries:
            self._results.insert("end", entry.label)
        self._progress.stop()
        self._progress.pack_forget()
        self._search_button.state(["!disabled"])

    def _on_toggle(self) -> None:
        if self.window.toggle_search_panel():
            self._main_pane.add(self._search_panel, weight=0)
        else:
            self._main_pane.forget(self._search_panel)

    def _drain(self) -> None:
        while True:
            try:
                callback = self._pending.get_nowait()
            except queue.Empty:
                break
            callback()
        self._root.after(50, self._drain)


def main(argv=None) -> int:
    """Open the explorer window."""
    parser = argparse.ArgumentParser(prog="ngexplorer", description="A file explorer.")
    parser.add_argument("path", nargs="?", help="directory to open at start")
    args = parser.parse_args(argv)

    import tkinter as tk

    root = tk.Tk()
    _TkFrontend(root, args.path)
    root.mainloop()
    return 0