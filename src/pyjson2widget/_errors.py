"""Exception hierarchy for field discovery, formatting and projection."""


class Json2WidgetError(Exception):
    """Base exception for widget configuration errors.

    ``str(err)`` is a short message safe to show in the widget editor, e.g.
    "invalid field path". ``internal()`` names the offending path, format
    option or display mode. ``wrapped`` keeps the underlying exception when
    one was raised, e.g. the ``ValueError`` from an unknown format type.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class InvalidFieldPathError(Json2WidgetError):
    """Raised when a field path cannot be parsed."""


class InvalidFieldFormatError(Json2WidgetError):
    """Raised when a field format configuration is invalid."""


class UnsupportedDisplayModeError(Json2WidgetError, ValueError):
    """Raised when a display mode has no registered projector."""


# Sanitized user-facing error message constants
ERR_MSG_INVALID_FIELD_PATH = "invalid field path"
ERR_MSG_INVALID_FORMAT_KIND = "invalid format type"
ERR_MSG_INVALID_DECIMALS = "invalid decimals value"
ERR_MSG_INVALID_FORMAT_OPTION = "invalid format option"
ERR_MSG_UNSUPPORTED_DISPLAY_MODE = "unsupported display mode"
