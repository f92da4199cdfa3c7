from abc import ABC, abstractmethod
import logging
from typing import Callable

from sqlsource.source_view.source_object_type import SourceObjectType
from sqlsource.source_view.source_view_page import SourceViewPage
from sqlsource.source_view.source_view_settings import SourceViewSettings


class SourceViewSurface(ABC):
    """
    A display surface that can show an HTML page, e.g. a webview panel.
    """

    @abstractmethod
    def set_title(self, title: str) -> None:
        """Set the title shown for the surface."""

    @abstractmethod
    def set_html(self, html: str) -> None:
        """Replace the page shown by the surface."""

    @abstractmethod
    def reveal(self) -> None:
        """Bring the surface to the front."""


# Returns the source text for an object, or None if the object has none.
SourceLoader = Callable[[], str | None]


class SourceViewPanel:
    """
    Shows the highlighted source of database objects on a display surface.

    The same surface is reused for every object shown.
    """

    FUNCTION_PLACEHOLDER = "-- Function source retrieval not implemented yet"

    def __init__(self, surface: SourceViewSurface, settings: SourceViewSettings | None = None) -> None:
        self._surface = surface
        self._page = SourceViewPage(settings)
        self._logger = logging.getLogger("SourceViewPanel")

    def _placeholder_source(self, name: str, object_type: SourceObjectType) -> str:
        if object_type == SourceObjectType.FUNCTION:
            return self.FUNCTION_PLACEHOLDER

        return f"-- No source available for {object_type.value} {name}"

    def show_source(self, name: str, object_type: SourceObjectType, loader: SourceLoader) -> str:
        """
        Fetch and show the source of a database object.

        The loading page is shown while the loader runs.  If the loader raises,
        the error page is shown instead of the source.

        Args:
            name: The object name
            object_type: The kind of object
            loader: Callable that fetches the object's source

        Returns:
            The HTML finally shown on the surface
        """
        self._surface.set_title(self._page.make_title(name, object_type))
        self._surface.set_html(self._page.loading_html(name, object_type))
        self._surface.reveal()

        try:
            source = loader()

        except Exception as e:
            self._logger.error("Error loading source for %s %s: %s", object_type.value, name, str(e), exc_info=True)
            html = self._page.error_html(name, e)
            self._surface.set_html(html)
            return html

        if source is None:
            source = self._placeholder_source(name, object_type)

        self._logger.debug("Showing source for %s %s (%d chars)", object_type.value, name, len(source))
        html = self._page.source_html(name, object_type, source)
        self._surface.set_html(html)
        return html

    def display(self, content: str, title: str) -> str:
        """
        Show SQL text that is already available.

        Args:
            content: The SQL text
            title: The title for the surface

        Returns:
            The HTML shown on the surface
        """
        self._logger.debug("Displaying %s", title)
        html = self._page.content_html(title, content)
        self._surface.set_title(title)
        self._surface.set_html(html)
        self._surface.reveal()
        return html
