import logging
from library_core.config import settings
from library_core.library import Library
from library_core import actions

logger = logging.getLogger(settings.APP_NAME)

BOOKS = [
    ("El Quijote", "Miguel de Cervantes", "978-84-376-0494-7", 863),
    ("Cien Años de Soledad", "Gabriel García Márquez", "978-84-376-0495-4", 471),
    ("Go Programming", "Alan Donovan", "978-0-13-419044-0", 380),
    ("Clean Code", "Robert Martin", "978-0-13-235088-4", 464),
]

USERS = [
    ("Carlos", "carlos@gmail.com", "+56 999 999 999"),
    ("Maria", "maria@gmail.com", "+56 999 999 999"),
    ("Juan", "juan@gmail.com", "+56 999 999 999"),
    ("Pedro", "pedro@gmail.com", "+56 999 999 999"),
]

def _report(r: dict, ok_text: str) -> None:
    if r["ok"]:
        print(f"  OK  {ok_text}")
    else:
        print(f"  ERR {r['message']} [{r['code']}]")

def run_demo(library: Library | None = None) -> Library:
    library = library or Library(settings.LIBRARY_NAME, settings.LIBRARY_ADDRESS)
    print(f"Biblioteca creada: {library.name} ({library.address})")

    print("\nAgregando libros...")
    book_ids = {}
    for idx, (title, author, isbn, pages) in enumerate(BOOKS):
        r = actions.register_book(library, title=title, author=author, isbn=isbn, pages=pages)
        _report(r, (r.get("data") or {}).get("info", ""))
        if r["ok"]:
            book_ids[idx] = r["data"]["book_id"]
    r = actions.register_book(library, title="El Quijote (copia)", author="Miguel de Cervantes", isbn=BOOKS[0][2], pages=863)
    _report(r, "")

    print("\nRegistrando usuarios...")
    user_ids = {}
    for idx, (name, email, phone) in enumerate(USERS):
        r = actions.register_user(library, name=name, email=email, phone=phone)
        _report(r, (r.get("data") or {}).get("summary", ""))
        if r["ok"]:
            user_ids[idx] = r["data"]["user_id"]

    print("\nRealizando préstamos...")
    for book_idx, user_idx in [(0, 0), (2, 1), (1, 2)]:
        if book_idx not in book_ids or user_idx not in user_ids:
            print(f"  --  Préstamo omitido: '{BOOKS[book_idx][0]}' o '{USERS[user_idx][0]}' no se registró")
            continue
        r = actions.issue_loan(library, book_id=book_ids[book_idx], user_id=user_ids[user_idx])
        d = r.get("data") or {}
        _report(r, f"{d.get('user_name')} prestó '{d.get('title')}' hasta {d.get('due_date')}")

    print("\nLibros disponibles:")
    available = library.list_available()
    for line in available or ["  No hay libros disponibles"]:
        print(f"  {line}")

    if 0 in book_ids:
        print("\nDevolviendo libro...")
        _report(actions.return_loan(library, book_id=book_ids[0]), "Libro devuelto")

    print("\n" + actions.get_statistics(library)["message"])

    book = library.find_book(book_ids[3]) if 3 in book_ids else None
    if book is not None:
        print("\nPréstamo directo sobre el libro")
        print(f"  Estado inicial: {book.info()}")
        book.borrow()
        print(f"  Después del préstamo: {book.info()}")
        print(f"  ¿Es prestable?: {book.is_lendable()}")
        print(f"  ¿Es libro grande?: {book.is_large()}")
    return library

def main() -> None:
    logging.basicConfig(level=settings.LOG_LEVEL)
    logger.info("Iniciando demo (%s)", settings.ENV)
    run_demo()

if __name__ == "__main__":
    main()
