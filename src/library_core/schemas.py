from pydantic import BaseModel

class LibraryStats(BaseModel):
    name: str
    total_books: int
    books_on_loan: int
    available_books: int
    active_users: int
    active_loans: int

    def render(self) -> str:
        return "\n".join([
            f"Estadísticas de {self.name}:",
            f"  Total de libros: {self.total_books}",
            f"  Libros prestados: {self.books_on_loan}",
            f"  Libros disponibles: {self.available_books}",
            f"  Usuarios activos: {self.active_users}",
            f"  Préstamos activos: {self.active_loans}",
        ])
