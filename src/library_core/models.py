from datetime import datetime, timezone
from pydantic import BaseModel

from library_core.config import settings
from library_core.errors import (
    AlreadyOnLoan, InvalidBook, InvalidEmail, InvalidPages, MissingFields, NotOnLoan
)

AVAILABLE_LABEL = "Disponible"
ON_LOAN_LABEL = "Prestado"
ACTIVE_LABEL = "Activo"
INACTIVE_LABEL = "Inactivo"

class Book(BaseModel):
    id: int
    title: str
    author: str
    isbn: str = ""
    pages: int = 0
    on_loan: bool = False

    def info(self) -> str:
        status = ON_LOAN_LABEL if self.on_loan else AVAILABLE_LABEL
        return f"[{self.id}] {self.title} por {self.author} - {status}"

    def is_lendable(self) -> bool:
        return not self.on_loan and self.pages > 0

    def is_large(self) -> bool:
        return self.pages > settings.LARGE_BOOK_PAGES

    def borrow(self) -> None:
        if self.on_loan:
            raise AlreadyOnLoan(f"El libro '{self.title}' ya está prestado.")
        if self.pages <= 0:
            raise InvalidBook(f"El libro '{self.title}' no es válido ({self.pages} páginas).")
        self.on_loan = True

    def return_book(self) -> None:
        if not self.on_loan:
            raise NotOnLoan(f"El libro '{self.title}' no está prestado.")
        self.on_loan = False

    def update_info(self, title: str, author: str, pages: int) -> None:
        if not (title and author):
            raise MissingFields("Faltan datos del libro (title, author).")
        if pages <= 0:
            raise InvalidPages(f"La cantidad de páginas debe ser positiva (recibido: {pages}).")
        self.title = title
        self.author = author
        self.pages = pages

class User(BaseModel):
    id: int
    name: str
    email: str
    phone: str = ""
    active: bool = True

    def summary(self) -> str:
        status = ACTIVE_LABEL if self.active else INACTIVE_LABEL
        return f"{self.name} ({self.email}) - {status}"

    def may_borrow(self) -> bool:
        return self.active and bool(self.name) and bool(self.email)

    def activate(self) -> None:
        self.active = True

    def deactivate(self) -> None:
        self.active = False

    def update_contact(self, email: str, phone: str) -> None:
        if "@" not in (email or ""):
            raise InvalidEmail(f"Email no válido: '{email}'.")
        self.email = email
        self.phone = phone

class Loan(BaseModel):
    id: int
    book_id: int
    user_id: int
    issued_at: datetime
    due_at: datetime
    returned: bool = False

    def is_open(self) -> bool:
        return not self.returned

    def is_overdue(self, now: datetime | None = None) -> bool:
        """True if the loan is still open and its due date is in the past."""
        if self.returned:
            return False
        return self.due_at < (now or datetime.now(timezone.utc))
