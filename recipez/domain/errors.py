"""Error taxonomy shared by the stores and the HTTP layer.

ValidationError -> 400, NotFoundError -> 404, StorageError -> 500.
"""


class RecipezError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(RecipezError):
    status_code = 400


class NotFoundError(RecipezError):
    status_code = 404


class StorageError(RecipezError):
    status_code = 500


__all__ = ['RecipezError', 'ValidationError', 'NotFoundError', 'StorageError']
