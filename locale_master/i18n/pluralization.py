"""Plural form selection for pipe separated messages."""

PLURAL_SEPARATOR = "|"


class PluralizationResolver:
    """Selects one segment of a ``zero|one|other`` style message.

    - no separator: message returned unchanged
    - ``"item|items"``: first segment when count is 1, second otherwise
    - ``"none|one|many"``: first for 0, second for 1, third for anything else

    Segments beyond the third are ignored. The selected segment is returned
    as is; placeholder substitution is the caller's job.
    """

    def resolve(self, message: str, count: int) -> str:
        if PLURAL_SEPARATOR not in message:
            return message

        parts = [part.strip() for part in message.split(PLURAL_SEPARATOR)]

        if len(parts) == 1:
            return parts[0]
        if len(parts) == 2:
            return parts[0] if count == 1 else parts[1]
        if count == 0:
            return parts[0]
        if count == 1:
            return parts[1]
        return parts[2]

    @staticmethod
    def plural_form(singular: str, plural: str, count: int) -> str:
        return singular if count == 1 else plural
