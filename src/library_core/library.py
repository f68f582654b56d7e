from __future__ import annotations
import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, List, Optional

from library_core.config import settings
from library_core.errors import (
    BookNotFound, BookNotLendable, DuplicateEmail, DuplicateISBN, InvalidEmail,
    MissingFields, NoActiveLoan, UserNotEligible, UserNotFound
)
from library_core.models import Book, Loan, User
from library_core.schemas import LibraryStats

logger = logging.getLogger(__name__)

def _utcnow() -> datetime:
    return datetime.now(timezone.utc)

class Library:
    """In-memory catalog of books, users and loans.

    Books, users and loans share one ID counter, so IDs are unique across the
    three kinds but not contiguous within one. Entities returned by the
    library are the stored objects themselves: changes made through them are
    seen by the library.
    """

    def __init__(
        self,
        name: str,
        address: str,
        *,
        loan_days: Optional[int] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.name = name
        self.address = address
        self.books: List[Book] = []
        self.users: List[User] = []
        self.loans: List[Loan] = []
        self.next_id = 1
        self.loan_days = settings.LOAN_DAYS if loan_days is None else loan_days
        self._clock = clock or _utcnow

    def _take_id(self) -> int:
        new_id = self.next_id
        self.next_id += 1
        return new_id

    def add_book(self, title: str, author: str, isbn: str = "", pages: int = 0) -> Book:
        if not (title and author):
            raise MissingFields("Faltan datos del libro (title, author).")
        if isbn and any(b.isbn == isbn for b in self.books):
            raise DuplicateISBN(f"Ya existe un libro con el ISBN '{isbn}'.")
        book = Book(id=self._take_id(), title=title, author=author, isbn=isbn, pages=pages)
        self.books.append(book)
        logger.debug("Libro %s registrado: %s", book.id, book.title)
        return book

    def register_user(self, name: str, email: str, phone: str = "") -> User:
        if not (name and email):
            raise MissingFields("Faltan datos del usuario (name, email).")
        if "@" not in email:
            raise InvalidEmail(f"Email no válido: '{email}'.")
        if any(u.email == email for u in self.users):
            raise DuplicateEmail(f"Ya existe un usuario con el email '{email}'.")
        user = User(id=self._take_id(), name=name, email=email, phone=phone)
        self.users.append(user)
        logger.debug("Usuario %s registrado: %s", user.id, user.email)
        return user

    def find_book(self, book_id: int) -> Optional[Book]:
        return next((b for b in self.books if b.id == book_id), None)

    def find_user(self, user_id: int) -> Optional[User]:
        return next((u for u in self.users if u.id == user_id), None)

    def active_loan_for(self, book_id: int) -> Optional[Loan]:
        return next((l for l in self.loans if l.book_id == book_id and l.is_open()), None)

    def loans_for_user(self, user_id: int) -> List[Loan]:
        return [l for l in self.loans if l.user_id == user_id]

    def issue_loan(self, book_id: int, user_id: int) -> Loan:
        book = self.find_book(book_id)
        if book is None:
            raise BookNotFound(f"No existe un libro con ID {book_id}.")
        user = self.find_user(user_id)
        if user is None:
            raise UserNotFound(f"No existe un usuario con ID {user_id}.")
        if not user.may_borrow():
            raise UserNotEligible(f"El usuario '{user.name}' no puede pedir préstamos.")
        if not book.is_lendable():
            raise BookNotLendable(f"El libro '{book.title}' no se puede prestar.")
        if self.active_loan_for(book.id) is not None:
            raise BookNotLendable(f"El libro '{book.title}' ya tiene un préstamo activo.")
        # borrow() cannot fail once is_lendable() holds; mark before recording
        book.borrow()
        now = self._clock()
        loan = Loan(
            id=self._take_id(), book_id=book.id, user_id=user.id,
            issued_at=now, due_at=now + timedelta(days=self.loan_days),
        )
        self.loans.append(loan)
        logger.debug("Préstamo %s: libro %s -> usuario %s", loan.id, book.id, user.id)
        return loan

    def return_loan(self, book_id: int) -> Loan:
        book = self.find_book(book_id)
        if book is None:
            raise BookNotFound(f"No existe un libro con ID {book_id}.")
        loan = self.active_loan_for(book_id)
        if loan is None:
            raise NoActiveLoan(f"No existe un préstamo activo para el libro '{book.title}'.")
        book.return_book()
        loan.returned = True
        logger.debug("Préstamo %s devuelto (libro %s)", loan.id, book.id)
        return loan

    def statistics(self) -> LibraryStats:
        total = len(self.books)
        on_loan = sum(1 for b in self.books if b.on_loan)
        return LibraryStats(
            name=self.name,
            total_books=total,
            books_on_loan=on_loan,
            available_books=total - on_loan,
            active_users=sum(1 for u in self.users if u.active),
            active_loans=sum(1 for l in self.loans if l.is_open()),
        )

    def list_available(self) -> List[str]:
        lines: List[str] = []
        for book in self.books:
            if book.on_loan:
                continue
            lines.append(book.info())
            if book.is_large():
                lines.append(f"    Libro extenso ({book.pages} páginas)")
        return lines
