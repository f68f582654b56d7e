from __future__ import annotations
import logging
from typing import Dict, Any, Optional

from library_core.errors import BookNotFound, LibraryError, UserNotFound
from library_core.library import Library

logger = logging.getLogger(__name__)

def _ok(msg: str, **data):    return {"ok": True,  "message": msg, **({"data": data} if data else {})}
def _err(msg: str, code="", **data): return {"ok": False, "message": msg, "code": code, **({"data": data} if data else {})}

def _fail(action: str, exc: LibraryError) -> Dict[str, Any]:
    logger.warning("[%s] %s: %s", action, exc.code, exc.message)
    return _err(exc.message, code=exc.code)

def list_books(library: Library) -> Dict[str, Any]:
    if not library.books:
        return _ok("No hay libros registrados aún.", items=[])
    items = [b.model_dump() for b in library.books]
    logger.info("[list_books] %s libros", len(items))
    return _ok("Listado de libros disponible.", items=items, available=library.list_available())

def register_book(library: Library, *, title: str, author: str, isbn: Optional[str] = None, pages: int = 0) -> Dict[str, Any]:
    try:
        b = library.add_book(title, author, isbn or "", pages)
    except LibraryError as e:
        return _fail("register_book", e)
    logger.info("[register_book] %s", b.info())
    return _ok("Libro registrado exitosamente.", book_id=b.id, title=b.title, author=b.author, info=b.info())

def register_user(library: Library, *, name: str, email: str, phone: Optional[str] = None) -> Dict[str, Any]:
    try:
        u = library.register_user(name, email, phone or "")
    except LibraryError as e:
        return _fail("register_user", e)
    logger.info("[register_user] %s", u.summary())
    return _ok("Usuario registrado exitosamente.", user_id=u.id, name=u.name, email=u.email, summary=u.summary())

def issue_loan(library: Library, *, book_id: int, user_id: int) -> Dict[str, Any]:
    try:
        loan = library.issue_loan(book_id, user_id)
    except LibraryError as e:
        return _fail("issue_loan", e)
    book = library.find_book(book_id)
    user = library.find_user(user_id)
    logger.info("[issue_loan] %s prestó '%s'", user.name, book.title)
    return _ok(
        "El préstamo se realizó exitosamente.",
        loan_id=loan.id, book_id=book.id, user_id=user.id,
        title=book.title, user_name=user.name, due_date=loan.due_at.isoformat()
    )

def return_loan(library: Library, *, book_id: int) -> Dict[str, Any]:
    try:
        loan = library.return_loan(book_id)
    except LibraryError as e:
        return _fail("return_loan", e)
    logger.info("[return_loan] préstamo %s cerrado", loan.id)
    return _ok("El libro fue devuelto exitosamente.", loan_id=loan.id, book_id=loan.book_id)

def update_book(library: Library, *, book_id: int, title: str, author: str, pages: int) -> Dict[str, Any]:
    try:
        book = library.find_book(book_id)
        if book is None:
            raise BookNotFound(f"No existe un libro con ID {book_id}.")
        book.update_info(title, author, pages)
    except LibraryError as e:
        return _fail("update_book", e)
    logger.info("[update_book] %s", book.info())
    return _ok("Libro actualizado exitosamente.", book_id=book.id, info=book.info())

def update_contact(library: Library, *, user_id: int, email: str, phone: str) -> Dict[str, Any]:
    try:
        user = library.find_user(user_id)
        if user is None:
            raise UserNotFound(f"No existe un usuario con ID {user_id}.")
        user.update_contact(email, phone)
    except LibraryError as e:
        return _fail("update_contact", e)
    logger.info("[update_contact] usuario %s -> %s", user.id, user.email)
    return _ok("Contacto actualizado exitosamente.", user_id=user.id, email=user.email, phone=user.phone)

def set_user_active(library: Library, *, user_id: int, active: bool) -> Dict[str, Any]:
    user = library.find_user(user_id)
    if user is None:
        return _fail("set_user_active", UserNotFound(f"No existe un usuario con ID {user_id}."))
    if active:
        user.activate()
    else:
        user.deactivate()
    logger.info("[set_user_active] %s", user.summary())
    return _ok("Usuario actualizado exitosamente.", user_id=user.id, summary=user.summary())

def get_statistics(library: Library) -> Dict[str, Any]:
    stats = library.statistics()
    logger.info("[get_statistics] %s libros, %s préstamos activos", stats.total_books, stats.active_loans)
    return _ok(stats.render(), **stats.model_dump())
