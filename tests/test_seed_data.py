"""
Tests for the database seed script.
"""

import pytest
from sqlalchemy import func, select

from app.models import Author, Book
from scripts import seed_data


@pytest.fixture
def seed(db_session, monkeypatch):
    """Point the seed script at the test session."""
    monkeypatch.setattr(seed_data, "SessionLocal", lambda: db_session)
    monkeypatch.setattr(seed_data, "create_tables", lambda: None)
    return seed_data.seed_database


def count(db_session, model) -> int:
    return db_session.execute(select(func.count()).select_from(model)).scalar_one()


def test_seed_creates_sample_data(seed, db_session, capsys):
    seed()

    total_books = sum(len(titles) for titles in seed_data.BOOKS.values())
    assert count(db_session, Author) == len(seed_data.AUTHORS)
    assert count(db_session, Book) == total_books

    out = capsys.readouterr().out
    assert f"Authors: {len(seed_data.AUTHORS)}" in out
    assert f"Books: {total_books}" in out


def test_seed_clears_existing_data(seed, db_session, sample_book):
    seed()

    titles = db_session.execute(select(Book.title)).scalars().all()
    assert titles.count("Dom Casmurro") == 1
    assert count(db_session, Author) == len(seed_data.AUTHORS)


def test_summary_reports_authors_created_by_this_run(seed, db_session, capsys):
    seed()
    capsys.readouterr()

    seed(clear_existing=False)

    out = capsys.readouterr().out
    assert f"Authors: {len(seed_data.AUTHORS)}" in out
    assert count(db_session, Author) == 2 * len(seed_data.AUTHORS)
