#!/usr/bin/env python3
"""
Database Seed Script

Populates the database with sample authors and books for development.

USAGE:
    # From the project root with the virtualenv activated
    python scripts/seed_data.py

    # Keep existing rows instead of clearing them first
    python scripts/seed_data.py --keep

Records are created through AuthorService and BookService, so the seed goes
through the same code paths as the API.
"""

import argparse
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy import delete
from sqlalchemy.orm import Session

from app.database import SessionLocal, create_tables
from app.models import Author, Book
from app.schemas import AuthorCreate, BookCreate
from app.services import AuthorService, BookService

AUTHORS = [
    ("Machado", "de Assis"),
    ("Clarice", "Lispector"),
    ("Jorge", "Amado"),
    ("Cecília", "Meireles"),
    ("Graciliano", "Ramos"),
]

BOOKS = {
    ("Machado", "de Assis"): [
        "Dom Casmurro",
        "Memórias Póstumas de Brás Cubas",
        "Quincas Borba",
    ],
    ("Clarice", "Lispector"): [
        "A Hora da Estrela",
        "Perto do Coração Selvagem",
    ],
    ("Jorge", "Amado"): [
        "Capitães da Areia",
        "Gabriela, Cravo e Canela",
    ],
    ("Cecília", "Meireles"): [
        "Romanceiro da Inconfidência",
    ],
    ("Graciliano", "Ramos"): [
        "Vidas Secas",
        "São Bernardo",
    ],
}


def clear_data(db: Session) -> None:
    """Clear all existing data from the database."""
    print("Clearing existing data...")
    db.execute(delete(Book))
    db.execute(delete(Author))
    db.commit()
    print("Data cleared.")


def create_authors(db: Session) -> dict[tuple[str, str], int]:
    """Create sample authors and return their IDs keyed by name."""
    print("Creating authors...")
    service = AuthorService(db)
    for first_name, last_name in AUTHORS:
        service.create_author(AuthorCreate(first_name=first_name, last_name=last_name))

    authors = service.list_authors().data or []
    ids = {(a.first_name, a.last_name): a.id for a in authors}
    print(f"Created {len(AUTHORS)} authors.")
    return ids


def create_books(db: Session, author_ids: dict[tuple[str, str], int]) -> int:
    """Create sample books for the seeded authors."""
    print("Creating books...")
    service = BookService(db)
    count = 0
    for author_name, titles in BOOKS.items():
        for title in titles:
            result = service.create_book(
                BookCreate(title=title, author_id=author_ids[author_name])
            )
            if not result.status:
                raise RuntimeError(f"Could not create '{title}': {result.message}")
            count += 1

    print(f"Created {count} books.")
    return count


def seed_database(clear_existing: bool = True) -> None:
    """
    Main function to seed the database.

    Args:
        clear_existing: If True, clears existing data before seeding.
    """
    print("=" * 60)
    print("Starting database seed...")
    print("=" * 60)

    create_tables()
    db = SessionLocal()

    try:
        if clear_existing:
            clear_data(db)

        author_ids = create_authors(db)
        book_count = create_books(db, author_ids)

        print("=" * 60)
        print("Database seeding completed successfully!")
        print("=" * 60)
        print("\nSummary:")
        print(f"  - Authors: {len(AUTHORS)}")
        print(f"  - Books: {book_count}")
        print("\nAPI documentation at http://localhost:8001/docs")

    except Exception as e:
        print(f"Error seeding database: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the library database")
    parser.add_argument(
        "--keep",
        action="store_true",
        help="Keep existing data instead of clearing it first",
    )
    args = parser.parse_args()
    seed_database(clear_existing=not args.keep)
