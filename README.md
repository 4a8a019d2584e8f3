# moviecbr

`moviecbr` finds movies that resemble one you pick. It compares the chosen movie with every other movie and ranks them by similarity. The comparison uses budget, genres, keywords, production companies, homepage and title, and each of these attributes carries its own weight.

## Installation

```
pip install .
```

The desktop window is built on Tkinter from the standard library. The package has no other runtime dependencies.

## The desktop finder

```
moviecbr [PATH]
```

This opens the **Movie Similarity Finder** window.

- `PATH` is a CSV file in the TMDB 5000 movies layout. It defaults to `./data/tmdb_5000_movies.csv`.
- If the file cannot be read, or one of its rows is malformed, the command prints `Error loading movies: ...` to standard error. The window still opens, but shows only its title.

In the window:

- **Search.** Type in the search box to narrow the list to titles containing the text. Case is ignored.
- **Select.** Click a movie to select it. The right-hand side then shows:
  - its title, year and rating (one decimal);
  - its budget;
  - its genres, homepage, keywords and production companies, when present;
  - the ten most similar other movies, with each score as a whole percentage truncated toward zero.
- **Search box after a selection.** Selecting a movie puts its title in the search box.
- **Reselect.** Click an entry in the similar list to make it the new selection.

## How similarity is scored

`moviecbr.cbr` provides these measures:

- **`levenshtein(a, b)`** returns the number of single-character edits that turn `a` into `b`.
- **`similarity_string(a, b)`** is `1 - levenshtein(a, b) / n`, where `n` is the UTF-8 byte length of the longer string. Two empty strings give 1.0.
- **`similarity_number(a, b, maximum, minimum)`** is `1 - |a - b| / (maximum - minimum)`.
  - It raises `ValueError` when `maximum` is below `minimum`.
  - For an empty range it returns NaN when `a == b`, and `-inf` otherwise.
- **`similarity_id(a, b)`** is the Jaccard index of the `id` values of two collections of `HasId` items. It returns 0.0 when both collections are empty.

`Movie.similarity(other, min_budget, max_budget)` in `moviecbr.movie` combines these into a weighted average, with these weights:

| Attribute            | Measure             | Weight |
|----------------------|---------------------|--------|
| title                | `similarity_string` | 2.5    |
| keywords             | `similarity_id`     | 2.0    |
| genres               | `similarity_id`     | 1.0    |
| production companies | `similarity_id`     | 1.0    |
| budget               | `similarity_number` | 0.3    |
| homepage             | `similarity_string` | 0.2    |

If every loaded movie has the same budget, the budget range is empty. Every score is then NaN, and the window shows it as 0%.

## Using it as a library

```python
from moviecbr.app import MovieSimilarityApp
from moviecbr.cbr import similarity_string

print(similarity_string("kitten", "sitting"))

app = MovieSimilarityApp()
app.load_movies("data/tmdb_5000_movies.csv")
app.pending_selection = 0
app.process_pending_selection()
for index, score in app.top_similar(5):
    print(app.movies[index].title, score)
```

### `MovieSimilarityApp`

`MovieSimilarityApp` in `moviecbr.app` holds the browsing state.

- **`load_movies(path)`** reads a CSV file that has a header row. It records the smallest and largest budget and lists every movie as matching the search.
  - It raises `OSError` if the file cannot be read.
  - It raises `ValueError`, naming the line, for a row that does not describe a movie.
  - On error the previous state is kept.
- **`filter_movies()`** sets `filtered_indices` to the movies whose title contains `search_query`, ignoring case.
- **`calculate_similarities()`** sets `similar_movies` to `(index, score)` pairs for every movie, best first, compared with `selected_movie_index`.
- **`process_pending_selection()`** applies `pending_selection`. It selects that movie, ranks the others, sets the search query to the movie's title and filters the list. It raises `IndexError` for an index out of range.
- **`top_similar(n=10)`** returns the best `n` ranked entries, leaving out the selected movie itself.

### Movies

- **`Movie.from_row(row)`** builds a movie from one CSV row keyed by column name.
  - The `genres`, `keywords`, `production_companies`, `production_countries` and `spoken_languages` columns hold JSON arrays. These become `Genre`, `Keyword`, `Company`, `Country` and `Language` values.
  - An empty `runtime` means unknown.
  - Missing or malformed fields raise `ValueError`.

### Window helpers

`moviecbr.gui` contains the window and its text helpers:

- **`MovieSimilarityWindow`** is the Tkinter window. Its `refresh()` applies a pending selection and redraws the window.
- **`format_details(movie)`** and **`format_similar_entry(rank, title, similarity)`** build the text the window shows.
- **`ColorTheme`** holds the colour palette.

## Running the tests

```
pip install ".[test]"
pytest
```