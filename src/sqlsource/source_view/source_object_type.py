from enum import Enum

from sqlsource.source_view.source_view_error import SourceViewObjectTypeError


class SourceObjectType(Enum):
    """Enumeration of database objects whose source can be viewed."""
    TRIGGER = "trigger"
    PROCEDURE = "procedure"
    VIEW = "view"
    FUNCTION = "function"
    GENERATOR = "generator"

    @classmethod
    def from_name(cls, name: str) -> "SourceObjectType":
        """
        Look up an object type by name, ignoring case.

        Args:
            name: The object type name, e.g. "procedure"

        Returns:
            The matching object type

        Raises:
            SourceViewObjectTypeError: If the name is not a known object type
        """
        try:
            return cls(name.lower())

        except ValueError as e:
            raise SourceViewObjectTypeError(f"Unknown object type: {name}") from e
