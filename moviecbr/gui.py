"""Desktop window for browsing movies and their most similar titles."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from moviecbr.app import TOP_N, MovieSimilarityApp
from moviecbr.movie import Movie

if TYPE_CHECKING:
    import tkinter

WINDOW_TITLE = "Movie Similarity Finder"
DEFAULT_DATA_PATH = "./data/tmdb_5000_movies.csv"

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1

RGB = tuple[int, int, int]


@dataclass(frozen=True)
class ColorTheme:
    """Colour palette of the window: a dark theme with orange-brown accents."""

    primary: RGB = (210, 144, 84)
    primary_light: RGB = (237, 184, 121)
    primary_dark: RGB = (160, 95, 50)
    secondary: RGB = (235, 235, 235)
    background: RGB = (24, 24, 24)
    card_bg: RGB = (36, 36, 36)
    text_primary: RGB = (235, 235, 235)
    text_secondary: RGB = (160, 160, 160)
    border_light: RGB = (64, 64, 64)
    selected_bg: RGB = (54, 45, 38)


def _hex(rgb: RGB) -> str:
    red, green, blue = rgb
    return f"#{red:02x}{green:02x}{blue:02x}"


def _percentage(similarity: float) -> int:
    """Whole percent, truncated toward zero and saturated to a 32-bit range."""
    value = similarity * 100.0
    if math.isnan(value):
        return 0
    if value >= _I32_MAX:
        return _I32_MAX
    if value <= _I32_MIN:
        return _I32_MIN
    return int(value)


def format_details(movie: Movie) -> str:
    """Text describing the selected movie, one piece of information per line."""
    lines = [
        movie.title,
        f"Year: {movie.release_date}    Rating: {movie.vote_average:.1f}",
        f"Budget: ${movie.budget}",
    ]
    if movie.genres:
        lines.append("Genres: " + ", ".join(str(genre) for genre in movie.genres))
    if movie.homepage:
        lines.append(f"Homepage: {movie.homepage}")
    if movie.keywords:
        lines.append("Keywords: " + ", ".join(str(kw) for kw in movie.keywords))
    if movie.production_companies:
        lines.append("Production Companies:")
        lines.extend(str(company) for company in movie.production_companies)
    return "\n".join(lines)


def format_similar_entry(rank: int, title: str, similarity: float) -> str:
    """One line of the similar-movies ranking: rank, title and whole percent."""
    return f"{rank}. {title}  {_percentage(similarity)}%"


class MovieSimilarityWindow:
    """A window showing the movie list, search box, details and ranking."""

    def __init__(
        self,
        app: MovieSimilarityApp,
        master: tkinter.Misc | None = None,
        theme: ColorTheme | None = None,
    ) -> None:
        import tkinter as tk

        self.app = app
        self.theme = theme or ColorTheme()
        self.root = master if master is not None else tk.Tk()
        self._syncing = False
        self._similar_indices: list[int] = []

        if isinstance(self.root, (tk.Tk, tk.Toplevel)):
            self.root.title(WINDOW_TITLE)
        self.root.configure(bg=_hex(self.theme.background))

        tk.Label(
            self.root,
            text=WINDOW_TITLE,
            font=("TkDefaultFont", 22, "bold"),
            fg=_hex(self.theme.primary),
            bg=_hex(self.theme.background),
        ).pack(pady=(8, 4))
        tk.Frame(self.root, height=1, bg=_hex(self.theme.border_light)).pack(
            fill="x", padx=8, pady=(0, 10)
        )

        if app.movies:
            self._build_content(tk)
        self.refresh()

    def _label(self, tk, parent, text, size, color, bold=False, **options):
        weight = "bold" if bold else "normal"
        return tk.Label(
            parent,
            text=text,
            font=("TkDefaultFont", size, weight),
            fg=_hex(color),
            bg=_hex(self.theme.background),
            **options,
        )

    def _listbox(self, tk, parent):
        return tk.Listbox(
            parent,
            exportselection=False,
            activestyle="none",
            font=("TkDefaultFont", 12, "bold"),
            bg=_hex(self.theme.card_bg),
            fg=_hex(self.theme.text_primary),
            selectbackground=_hex(self.theme.selected_bg),
            selectforeground=_hex(self.theme.primary),
            highlightbackground=_hex(self.theme.border_light),
            highlightcolor=_hex(self.theme.primary),
            relief="flat",
            cursor="hand2",
        )

    def _build_content(self, tk) -> None:
        theme = self.theme

        search = tk.Frame(self.root, bg=_hex(theme.card_bg))
        search.pack(fill="x", padx=5, pady=5)
        tk.Label(
            search,
            text="🔍 Search:",
            font=("TkDefaultFont", 12, "bold"),
            fg=_hex(theme.text_primary),
            bg=_hex(theme.card_bg),
        ).pack(side="left", padx=4)
        self._search_var = tk.StringVar(master=self.root, value=self.app.search_query)
        tk.Entry(
            search,
            textvariable=self._search_var,
            bg=_hex(theme.card_bg),
            fg=_hex(theme.text_primary),
            insertbackground=_hex(theme.text_primary),
            relief="flat",
        ).pack(side="left", fill="x", expand=True, padx=4, pady=2)
        self._search_var.trace_add("write", self._on_search_changed)

        columns = tk.Frame(self.root, bg=_hex(theme.background))
        columns.pack(fill="both", expand=True, padx=5, pady=10)
        columns.columnconfigure(0, weight=1, uniform="col")
        columns.columnconfigure(1, weight=1, uniform="col")
        columns.rowconfigure(0, weight=1)

        left = tk.Frame(columns, bg=_hex(theme.background))
        left.grid(row=0, column=0, sticky="nsew", padx=(0, 4))
        self._label(tk, left, "Select a movie:", 14, theme.primary, True).pack(
            anchor="w", pady=(0, 5)
        )
        self._movie_list = self._listbox(tk, left)
        self._movie_list.pack(fill="both", expand=True)
        self._movie_list.bind("<<ListboxSelect>>", self._on_movie_clicked)

        right = tk.Frame(columns, bg=_hex(theme.background))
        right.grid(row=0, column=1, sticky="nsew", padx=(4, 0))

        self._placeholder = self._label(
            tk,
            right,
            "Select a movie from the list\nto see details and similar titles",
            14,
            theme.text_secondary,
        )

        self._selected_panel = tk.Frame(right, bg=_hex(theme.background))
        card = tk.Frame(
            self._selected_panel,
            bg=_hex(theme.card_bg),
            highlightthickness=1,
            highlightbackground=_hex(theme.primary),
        )
        card.pack(fill="x", pady=(0, 10))
        tk.Label(
            card,
            text="Selected Movie",
            font=("TkDefaultFont", 14, "bold"),
            fg=_hex(theme.primary),
            bg=_hex(theme.card_bg),
        ).pack(anchor="w", padx=12, pady=(12, 5))
        self._details = tk.Label(
            card,
            justify="left",
            anchor="w",
            wraplength=420,
            font=("TkDefaultFont", 11),
            fg=_hex(theme.text_secondary),
            bg=_hex(theme.card_bg),
        )
        self._details.pack(fill="x", padx=12, pady=(0, 12))

        self._label(
            tk,
            self._selected_panel,
            f"Top {TOP_N} Similar Movies:",
            14,
            theme.primary,
            True,
        ).pack(anchor="w", pady=(0, 5))
        self._similar_list = self._listbox(tk, self._selected_panel)
        self._similar_list.configure(fg=_hex(theme.primary))
        self._similar_list.pack(fill="both", expand=True)
        self._similar_list.bind("<<ListboxSelect>>", self._on_similar_clicked)

    def _on_search_changed(self, *_args) -> None:
        if self._syncing:
            return
        self.app.search_query = self._search_var.get()
        self.app.filter_movies()
        self._fill_movie_list()

    def _on_movie_clicked(self, _event=None) -> None:
        if self._syncing:
            return
        chosen = self._movie_list.curselection()
        if chosen:
            self.app.pending_selection = self.app.filtered_indices[chosen[0]]
            self.refresh()

    def _on_similar_clicked(self, _event=None) -> None:
        if self._syncing:
            return
        chosen = self._similar_list.curselection()
        if chosen:
            self.app.pending_selection = self._similar_indices[chosen[0]]
            self.refresh()

    def _fill_movie_list(self) -> None:
        self._syncing = True
        try:
            self._movie_list.delete(0, "end")
            selected = self.app.selected_movie_index
            for row, index in enumerate(self.app.filtered_indices):
                self._movie_list.insert("end", self.app.movies[index].title)
                if index == selected:
                    self._movie_list.selection_set(row)
        finally:
            self._syncing = False

    def refresh(self) -> None:
        """Apply any pending selection and redraw every part of the window."""
        if not self.app.movies:
            return
        self.app.process_pending_selection()

        if self._search_var.get() != self.app.search_query:
            self._syncing = True
            try:
                self._search_var.set(self.app.search_query)
            finally:
                self._syncing = False
        self._fill_movie_list()

        selected = self.app.selected_movie_index
        if selected is None:
            self._selected_panel.pack_forget()
            self._placeholder.pack(pady=50)
            return

        self._placeholder.pack_forget()
        self._selected_panel.pack(fill="both", expand=True)
        self._details.configure(text=format_details(self.app.movies[selected]))

        ranking = self.app.top_similar(TOP_N)
        self._similar_indices = [index for index, _ in ranking]
        self._syncing = True
        try:
            self._similar_list.delete(0, "end")
            for rank, (index, score) in enumerate(ranking, 1):
                title = self.app.movies[index].title
                self._similar_list.insert(
                    "end", format_similar_entry(rank, title, score)
                )
        finally:
            self._syncing = False


def main(argv: Sequence[str] | None = None) -> int:
    """Load the movie table and open the window."""
    parser = argparse.ArgumentParser(
        prog="moviecbr", description="Find movies similar to a chosen one."
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=DEFAULT_DATA_PATH,
        help=f"CSV file of movies (default: {DEFAULT_DATA_PATH})",
    )
    args = parser.parse_args(argv)

    app = MovieSimilarityApp()
    try:
        app.load_movies(args.path)
    except (OSError, ValueError) as err:
        print(f"Error loading movies: {err}", file=sys.stderr)

    window = MovieSimilarityWindow(app)
    window.root.mainloop()
    return 0