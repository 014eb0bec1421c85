class CatalogError(Exception):
    """Base class for every error raised by the song catalog and playlist use cases."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def kind(self) -> str:
        return type(self).__name__


class ValidationError(CatalogError):
    """Caller supplied an empty or malformed value."""


class DuplicateError(CatalogError):
    """A record with the same unique fields already exists."""


class NotFoundError(CatalogError):
    pass


class AuthorizationError(CatalogError):
    """Caller is not the admin of the playlist."""


class NothingAddedError(CatalogError):
    """None of the songs passed to add_songs could be added."""


class StorageError(CatalogError):
    pass


class ErrMessages:
    @staticmethod
    def field_cannot_be_empty(field_name: str) -> str:
        return f'{field_name} cannot be empty.'

    @staticmethod
    def record_not_found(record_name: str, record_id: str) -> str:
        return f'{record_name} with id={record_id} not found.'

    @staticmethod
    def could_not_update(record_name: str, record_id: str) -> str:
        return f"Couldn't update the {record_name} with id={record_id}, because the record was not found."

    @staticmethod
    def could_not_remove(record_name: str, record_id: str) -> str:
        return f"Couldn't remove the {record_name} with id={record_id}, because the record was not found."

    @staticmethod
    def non_admin(playlist_id: str) -> str:
        return f"Caller isn't the admin of the playlist with id {playlist_id}."

    @staticmethod
    def already_exists(record_name: str) -> str:
        return f'{record_name} already exists.'

    NOTHING_ADDED = 'Unable to find the songs you wanted to add or they all already exist.'
    NO_SINGERS = 'You must provide singer(s).'
