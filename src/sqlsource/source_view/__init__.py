"""Source view pages for database objects."""

from sqlsource.source_view.source_object_type import SourceObjectType
from sqlsource.source_view.source_view_error import (
    SourceViewError, SourceViewObjectTypeError, SourceViewSettingsError
)
from sqlsource.source_view.source_view_page import SourceViewPage
from sqlsource.source_view.source_view_panel import SourceLoader, SourceViewPanel, SourceViewSurface
from sqlsource.source_view.source_view_settings import SourceViewSettings

__all__ = [
    "SourceLoader",
    "SourceObjectType",
    "SourceViewError",
    "SourceViewObjectTypeError",
    "SourceViewPage",
    "SourceViewPanel",
    "SourceViewSettings",
    "SourceViewSettingsError",
    "SourceViewSurface",
]
