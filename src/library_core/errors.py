class LibraryError(Exception):
    code = "LIBRARY_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

class MissingFields(LibraryError):
    code = "MISSING_FIELDS"

class InvalidPages(LibraryError):
    code = "INVALID_PAGES"

class InvalidEmail(LibraryError):
    code = "INVALID_EMAIL"

class DuplicateISBN(LibraryError):
    code = "DUPLICATE_ISBN"

class DuplicateEmail(LibraryError):
    code = "DUPLICATE_EMAIL"

class BookNotFound(LibraryError):
    code = "BOOK_NOT_FOUND"

class UserNotFound(LibraryError):
    code = "USER_NOT_FOUND"

class NoActiveLoan(LibraryError):
    code = "NO_ACTIVE_LOAN"

class AlreadyOnLoan(LibraryError):
    code = "ALREADY_ON_LOAN"

class NotOnLoan(LibraryError):
    code = "NOT_ON_LOAN"

class BookNotLendable(LibraryError):
    code = "BOOK_NOT_LENDABLE"

class UserNotEligible(LibraryError):
    code = "USER_NOT_ELIGIBLE"

class InvalidBook(LibraryError):
    code = "INVALID_BOOK"
