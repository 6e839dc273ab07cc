"""Built-in keybinding table, shown when no config file is given."""

from __future__ import annotations

from typing import List, Tuple

DEFAULT_HEIGHT = 7

DEFAULT_COLUMNS: List[Tuple[str, int]] = [
    ("Mode", 8),
    ("Keybind", 16),
    ("Action", 80),
]

# (mode, keybind, action)
DEFAULT_ROWS: List[Tuple[str, str, str]] = [
    # Visual
    ("visual", "y", "yank (copy) selection"),
    ("visual", ">", "indent selection right"),
    ("visual", "<", "indent selection left"),

    # Insert
    ("insert", "<C-h>", "delete previous character"),
    ("insert", "<C-w>", "delete all from the cursor back to  word boundary (space or punctuation)"),
    ("insert", "<C-c>", "exit insert mode"),
    ("insert", "<Esc>", "exit insert mode"),

    # Normal - movement
    ("normal", "5h 20j 3k 4l", "move cursor left/down/up/right by amount"),
    ("normal", "h j k l", "move cursor left/down/up/right"),
    ("normal", "w", "move to next word"),
    ("normal", "b", "move to previous word"),
    ("normal", "gg", "go to top of file"),
    ("normal", "G", "go to bottom of file"),
    ("normal", "0", "go to beginning of line"),
    ("normal", "$", "go to end of line"),
    ("normal", "<C-f>", "page down and centre, we added zz"),
    ("normal", "<C-b>", "page up and centre, we added zz"),

    # Normal - editing
    ("normal", "dd", "delete (cut) current line"),
    ("normal", "yy", "yank current line"),
    ("normal", "<S-P>", "paste clipboard"),
    ("normal", "p", "paste after cursor"),
    ("normal", "u", "undo last change"),
    ("normal", "<C-r>", "redo last undone change"),

    # Normal - search
    ("normal", "/", "search forward"),
    ("normal", "?", "search backward"),
    ("normal", "n", "next search match (need to use / or ? before hand)"),
    ("normal", "N", "previous search match (need to use / or ? before hand)"),

    # Normal - LSP (if configured)
    ("normal", "<C-o>", "jump back from jump list (anything that moves the cursor counts as this)"),
    ("normal", "<C-i>", "jump forward in jump list (anything that moves the cursor counts as this)"),
    ("normal", "gd", "go to definition (LSP if attached)"),
    ("normal", "grr", "show references (LSP)"),
    ("normal", "K", "hover documentation (LSP or man page)"),

    # Custom
    ("normal", "<leader>h", "open harpoon menu"),
    ("normal", "<leader>a", "append current file to harpoon"),
    ("normal", "<leader>fo", "format and organize imports"),
    ("normal", "<leader>ff", "find file in project"),
    ("normal", 'di"', "delete inside current double quotes"),
    ("normal", 'da"', "delete around current double quotes (including quotes)"),

    ("normal", "dw", "delete from cursor to start of next word"),
    ("normal", "db", "delete from cursor to start of previous word"),

    ("normal", "diw", "delete inner word (current word only)"),
    ("normal", "daw", "delete around word (word plus surrounding space)"),

    ("normal", "ciw", "change inner word (delete current word, and puts in insert mode)"),
    ("normal", "yiw", "yank inner word"),

    ("normal", "di(", "delete inside parentheses"),
    ("normal", "da(", "delete around parentheses"),
]
