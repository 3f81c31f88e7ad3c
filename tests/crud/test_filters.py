# tests/crud/test_filters.py
import pytest

from libroresenas.crud.filters import (AllOf, AnyOf, Contains, Equals, escape_like,
                                       list_criteria, search_criteria, to_sql)
from libroresenas.models.book import Book

def test_list_criteria_composition():
    assert list_criteria() == AllOf(())
    assert list_criteria(author="Tolkien") == AllOf((Contains("author", "Tolkien"),))
    assert list_criteria(author="Tolkien", genre="Fantasy") == AllOf((
        Contains("author", "Tolkien"),
        Contains("genre", "Fantasy"),
    ))
    assert list_criteria(genre="Fantasy") == AllOf((Contains("genre", "Fantasy"),))

def test_search_criteria_is_title_or_author():
    assert search_criteria("dune") == AnyOf((Contains("title", "dune"), Contains("author", "dune")))

@pytest.mark.parametrize("raw, escaped", [
    ("plain", "plain"),
    ("100%", "100\\%"),
    ("a_b", "a\\_b"),
    ("back\\slash", "back\\\\slash"),
])
def test_escape_like(raw, escaped):
    assert escape_like(raw) == escaped

def test_to_sql_filters_rows(db_session):
    db_session.add_all([
        Book(title="Dune", author="Frank Herbert", genre="Science Fiction"),
        Book(title="Emma", author="Jane Austen", genre="Romance"),
    ])
    db_session.commit()

    def titles(criterion):
        return sorted(b.title for b in db_session.query(Book).filter(to_sql(Book, criterion)))

    assert titles(AllOf()) == ["Dune", "Emma"]
    assert titles(AnyOf()) == []
    assert titles(Equals("genre", "Romance")) == ["Emma"]
    assert titles(Contains("author", "HERB")) == ["Dune"]
    assert titles(AnyOf((Contains("title", "emm"), Contains("author", "herbert")))) == ["Dune", "Emma"]
    assert titles(AllOf((Contains("title", "emm"), Contains("author", "herbert")))) == []

def test_to_sql_unknown_field():
    with pytest.raises(ValueError):
        to_sql(Book, Contains("publisher", "x"))

def test_to_sql_unknown_criterion():
    with pytest.raises(TypeError):
        to_sql(Book, "title = 'x'")
