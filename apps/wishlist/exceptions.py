from django.core.exceptions import ValidationError as DjangoValidationError


class WishlistError(Exception):
    """Base class for every error raised by the wishlist app."""


class ValidationError(DjangoValidationError, WishlistError):
    """Malformed item input. ``field`` names the first invalid attribute."""

    def __init__(self, field: str, message: str | None = None):
        self.field = field
        super().__init__(message or f"Please supply a valid {field}.", code=f"invalid_{field}")


class InvalidRowIdError(WishlistError, LookupError):
    def __init__(self, row_id):
        self.row_id = row_id
        super().__init__(f"The wishlist does not contain rowId {row_id}.")


class UnknownModelError(WishlistError, LookupError):
    def __init__(self, model):
        self.model = model
        super().__init__(f"The supplied model {model} does not exist.")


class AlreadyStoredError(WishlistError):
    def __init__(self, identifier):
        self.identifier = identifier
        super().__init__(f"A wishlist with identifier {identifier} was already stored.")
