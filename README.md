# ngexplorer

A small desktop file explorer. It shows your drives, a folder tree and the
contents of the selected folder side by side, and has a search panel for
finding files below the current folder. The interface text is in Russian.

## Installing

```
pip install .
```

The window is built with Tk, which ships with most Python installations.
No other libraries are needed.

## Running

```
ngexplorer [path]
```

`path` is an optional directory to open at start.

## What it does

- **Drives.** The left list holds the drive letters that exist on Windows,
  or the file-system root elsewhere. Picking one opens it in the tree and
  the table.
- **Browsing.** Selecting a folder in the tree lists its contents in the
  table (name, size, type, date modified), folders first, sorted by name.
  Names starting with a dot are not listed. Type a path into the path bar
  and press Enter to jump to it; if the path does not exist or is not a
  directory, you get a warning and the bar goes back to the current folder.
- **Renaming.** Right-click an item and choose *Переименовать*. You edit only
  the part of the name before the last dot; the extension is kept. Nothing
  changes if the new name is empty or the same as the old one. Renaming onto
  a name that already exists is refused with an error.
- **Deleting.** Right-click an item, choose *Удалить* and confirm. Folders
  are removed together with everything inside them; a symbolic link is
  removed as a link only.
- **Searching.** The *🔍 Поиск* button shows or hides the search panel.
  Every filter you fill in must match (surrounding spaces are ignored):
  - *Имя* — part of the file name, case-insensitive.
  - *Расширение* — such as `.txt` or `txt`, case-insensitive. Tick
    *Включать файлы без расширения* to keep files that have none.
  - *Содержимое* — text that must appear on some line of the file,
    case-insensitive. Files are read as UTF-8; unreadable files never match.
  - *Рекурсивно* — also look inside subfolders (symbolic links to folders
    are not followed).

  The search runs in a background thread from the current folder, or from
  the file-system root if none has been opened. Hidden files and folders
  (names starting with a dot, or marked hidden on Windows) are skipped. The
  results list shows the names of the matching files, or
  *❌ Ничего не найдено* when there are none.

## What it does not do

- It does not open files: double-clicking a file does nothing.
- It has no drag and drop between the tree and the table.
- The results list shows file names only; it does not show full paths and
  its entries cannot be opened or navigated to.

## Using the pieces from Python

The search, file operations and window state live in plain modules and work
without a window:

- `ngexplorer.search` — `SearchCriteria(name, extension, content,
  include_no_extension, recursive)` with `matches(path)`,
  `search_files(root, criteria)` (a generator of matching paths) and
  `file_contains(path, text)`.
- `ngexplorer.fileops` — `split_name(path)`,
  `rename_keeping_extension(path, new_base_name)`, `delete_path(path)` and
  `resolve_directory(path)`; failures raise `FileOperationError`.
- `ngexplorer.app` — `ExplorerWindow(dialogs, schedule=None)`, the
  toolkit-independent window state with `navigate_to(path)`,
  `start_search()`, `rename_selected()`, `delete_selected()` and
  `toggle_search_panel()`; `dialogs` is any object with `warning`,
  `information`, `critical`, `question` and `get_text` methods.
  `result_entries(paths)` turns found paths into result-list entries, and
  `main(argv=None)` starts the window.

```python
from ngexplorer.search import SearchCriteria, search_files

criteria = SearchCriteria(extension=".txt", content="todo", recursive=True)
for path in search_files(".", criteria):
    print(path)
```

## Running the tests

```
pip install .[test]
pytest
```