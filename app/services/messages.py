"""
Outcome messages placed in the response envelope by the services.

Failure messages are fixed strings; clients may compare against them.
"""

NOT_FOUND = "No record found!"
AUTHOR_NOT_FOUND = "No author record found!"

AUTHOR_FOUND = "Author found successfully!"
AUTHORS_LISTED = "Authors listed successfully!"
AUTHOR_CREATED = "Author created successfully!"
AUTHOR_EDITED = "Author edited successfully!"
AUTHOR_DELETED = "Author deleted successfully!"

BOOK_FOUND = "Book found successfully!"
BOOKS_LISTED = "Books listed successfully!"
BOOK_CREATED = "Book created successfully!"
BOOK_EDITED = "Book edited successfully!"
BOOK_DELETED = "Book deleted successfully!"
