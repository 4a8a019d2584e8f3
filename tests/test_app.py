import csv
import json

import pytest

from moviecbr.app import TOP_N, MovieSimilarityApp

COLUMNS = [
    "budget",
    "genres",
    "homepage",
    "id",
    "keywords",
    "original_language",
    "original_title",
    "overview",
    "popularity",
    "production_companies",
    "production_countries",
    "release_date",
    "revenue",
    "runtime",
    "spoken_languages",
    "status",
    "tagline",
    "title",
    "vote_average",
    "vote_count",
]


def make_row(movie_id, title, budget, genres=(1,), keywords=(10,), companies=(100,)):
    return {
        "budget": str(budget),
        "genres": json.dumps([{"id": g, "name": f"genre{g}"} for g in genres]),
        "homepage": f"http://example.com/{movie_id}",
        "id": str(movie_id),
        "keywords": json.dumps([{"id": k, "name": f"kw{k}"} for k in keywords]),
        "original_language": "en",
        "original_title": title,
        "overview": "An overview.",
        "popularity": "1.5",
        "production_companies": json.dumps(
            [{"id": c, "name": f"company{c}"} for c in companies]
        ),
        "production_countries": json.dumps([{"iso_3166_1": "US", "name": "USA"}]),
        "release_date": "2000-01-01",
        "revenue": "0",
        "runtime": "",
        "spoken_languages": json.dumps([{"iso_639_1": "en", "name": "English"}]),
        "status": "Released",
        "tagline": "",
        "title": title,
        "vote_average": "6.5",
        "vote_count": "42",
    }


def write_csv(path, rows):
    with open(path, "w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=COLUMNS)
        writer.writeheader()
        writer.writerows(rows)
    return path


@pytest.fixture
def loaded_app(tmp_path):
    rows = [
        make_row(1, "Space Adventure", 1000, genres=(1, 2), keywords=(10, 11)),
        make_row(2, "Space Adventure II", 2000, genres=(1, 2), keywords=(10, 11)),
        make_row(3, "Quiet Drama", 5000, genres=(3,), keywords=(20,), companies=(200,)),
        make_row(4, "Garden Story", 3000, genres=(4,), keywords=(30,), companies=(300,)),
    ]
    app = MovieSimilarityApp()
    app.load_movies(write_csv(tmp_path / "movies.csv", rows))
    return app


def test_load_movies_reads_rows_and_budget_range(loaded_app):
    assert [m.title for m in loaded_app.movies] == [
        "Space Adventure",
        "Space Adventure II",
        "Quiet Drama",
        "Garden Story",
    ]
    assert loaded_app.min_budget == 1000
    assert loaded_app.max_budget == 5000
    assert loaded_app.filtered_indices == [0, 1, 2, 3]


def test_load_movies_empty_table(tmp_path):
    app = MovieSimilarityApp()
    app.load_movies(write_csv(tmp_path / "empty.csv", []))
    assert app.movies == []
    assert (app.min_budget, app.max_budget) == (0, 0)
    assert app.filtered_indices == []


def test_load_movies_missing_file(tmp_path):
    app = MovieSimilarityApp()
    with pytest.raises(FileNotFoundError):
        app.load_movies(tmp_path / "absent.csv")


def test_load_movies_bad_row_keeps_state(loaded_app, tmp_path):
    bad = make_row(9, "Broken", 10)
    bad["budget"] = "lots"
    before = list(loaded_app.movies)
    with pytest.raises(ValueError):
        loaded_app.load_movies(write_csv(tmp_path / "bad.csv", [bad]))
    assert loaded_app.movies == before


def test_load_movies_short_row_is_an_error(tmp_path):
    path = tmp_path / "short.csv"
    with open(path, "w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle)
        writer.writerow(COLUMNS)
        writer.writerow(["100", "[]", ""])
    app = MovieSimilarityApp()
    with pytest.raises(ValueError):
        app.load_movies(path)


def test_filter_movies_is_case_insensitive(loaded_app):
    loaded_app.search_query = "SPACE"
    loaded_app.filter_movies()
    assert loaded_app.filtered_indices == [0, 1]


def test_filter_movies_no_match(loaded_app):
    loaded_app.search_query = "nothing like this"
    loaded_app.filter_movies()
    assert loaded_app.filtered_indices == []


def test_calculate_similarities_without_selection_does_nothing(loaded_app):
    loaded_app.calculate_similarities()
    assert loaded_app.similar_movies == []


def test_calculate_similarities_sorted_descending(loaded_app):
    loaded_app.selected_movie_index = 0
    loaded_app.calculate_similarities()
    scores = [score for _, score in loaded_app.similar_movies]
    assert scores == sorted(scores, reverse=True)
    assert sorted(i for i, _ in loaded_app.similar_movies) == [0, 1, 2, 3]
    assert loaded_app.similar_movies[0][0] == 0
    assert loaded_app.similar_movies[0][1] == pytest.approx(1.0)
    assert loaded_app.similar_movies[1][0] == 1


def test_process_pending_selection(loaded_app):
    loaded_app.pending_selection = 2
    loaded_app.process_pending_selection()
    assert loaded_app.pending_selection is None
    assert loaded_app.selected_movie_index == 2
    assert loaded_app.search_query == "Quiet Drama"
    assert loaded_app.filtered_indices == [2]
    assert len(loaded_app.similar_movies) == 4


def test_process_pending_selection_without_pending(loaded_app):
    loaded_app.process_pending_selection()
    assert loaded_app.selected_movie_index is None
    assert loaded_app.search_query == ""


def test_process_pending_selection_out_of_range(loaded_app):
    loaded_app.pending_selection = 7
    with pytest.raises(IndexError):
        loaded_app.process_pending_selection()


def test_top_similar_excludes_selected(loaded_app):
    loaded_app.pending_selection = 0
    loaded_app.process_pending_selection()
    top = loaded_app.top_similar(2)
    assert len(top) == 2
    assert all(index != 0 for index, _ in top)
    assert top[0][0] == 1
    assert top == loaded_app.similar_movies[1:3]


def test_top_similar_default_limit(loaded_app):
    loaded_app.pending_selection = 3
    loaded_app.process_pending_selection()
    top = loaded_app.top_similar()
    assert len(top) == min(TOP_N, len(loaded_app.movies) - 1)
    assert {i for i, _ in top} == {0, 1, 2}


def test_top_similar_without_selection(loaded_app):
    assert loaded_app.top_similar(5) == []


def test_equal_budgets_keep_load_order(tmp_path):
    rows = [make_row(i, f"Same {i}", 700) for i in range(1, 4)]
    app = MovieSimilarityApp()
    app.load_movies(write_csv(tmp_path / "same.csv", rows))
    app.pending_selection = 1
    app.process_pending_selection()
    assert [i for i, _ in app.similar_movies] == [0, 1, 2]