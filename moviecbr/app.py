"""Application state for browsing movies and finding the most similar ones."""

from __future__ import annotations

import csv
import functools
import os
from dataclasses import dataclass, field

from moviecbr.movie import Movie

TOP_N = 10


def _by_score_descending(a: tuple[int, float], b: tuple[int, float]) -> int:
    # Incomparable scores (NaN) count as equal, so the stable sort keeps their order.
    if a[1] > b[1]:
        return -1
    if a[1] < b[1]:
        return 1
    return 0


@dataclass
class MovieSimilarityApp:
    """Loaded movies, the current selection and the similarity ranking for it."""

    movies: list[Movie] = field(default_factory=list)
    selected_movie_index: int | None = None
    similar_movies: list[tuple[int, float]] = field(default_factory=list)
    min_budget: int = 0
    max_budget: int = 0
    search_query: str = ""
    filtered_indices: list[int] = field(default_factory=list)
    pending_selection: int | None = None

    def load_movies(self, path: str | os.PathLike[str]) -> None:
        """Read movies from a CSV file with a header row.

        Raises OSError if the file cannot be read and ValueError for a row
        that does not describe a movie; the current state is then kept.
        """
        with open(path, newline="", encoding="utf-8") as handle:
            reader = csv.DictReader(handle)
            movies = []
            for row in reader:
                try:
                    movies.append(Movie.from_row(row))
                except ValueError as exc:
                    raise ValueError(f"line {reader.line_num}: {exc}") from exc

        self.movies = movies
        budgets = [movie.budget for movie in movies]
        self.min_budget = min(budgets, default=0)
        self.max_budget = max(budgets, default=0)
        self.filtered_indices = list(range(len(movies)))

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.movies):
            raise IndexError(f"movie index {index} out of range")

    def calculate_similarities(self) -> None:
        """Rank every movie by similarity to the selected one, best first."""
        if self.selected_movie_index is None:
            return
        self._check_index(self.selected_movie_index)
        reference = self.movies[self.selected_movie_index]
        scores = [
            (index, movie.similarity(reference, self.min_budget, self.max_budget))
            for index, movie in enumerate(self.movies)
        ]
        scores.sort(key=functools.cmp_to_key(_by_score_descending))
        self.similar_movies = scores

    def filter_movies(self) -> None:
        """Keep the indices of movies whose title contains the search query."""
        query = self.search_query.lower()
        self.filtered_indices = [
            index
            for index, movie in enumerate(self.movies)
            if query in movie.title.lower()
        ]

    def process_pending_selection(self) -> None:
        """Apply a pending selection: rank, and search for the chosen title."""
        if self.pending_selection is None:
            return
        index = self.pending_selection
        self.pending_selection = None
        self._check_index(index)
        self.selected_movie_index = index
        self.calculate_similarities()
        self.search_query = self.movies[index].title
        self.filter_movies()

    def top_similar(self, n: int = TOP_N) -> list[tuple[int, float]]:
        """The ``n`` best-ranked movies other than the selected one."""
        if self.selected_movie_index is None:
            return []
        others = (
            entry
            for entry in self.similar_movies
            if entry[0] != self.selected_movie_index
        )
        return [entry for _, entry in zip(range(max(n, 0)), others)]