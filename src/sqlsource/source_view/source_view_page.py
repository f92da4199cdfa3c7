"""
Builds the HTML documents shown by a source view.
"""

from sqlsource.source_view.source_object_type import SourceObjectType
from sqlsource.source_view.source_view_settings import SourceViewSettings
from sqlsource.sql.sql_html_renderer import SQLHTMLRenderer


class SourceViewPage:
    """
    Produces the loading, error and source pages for a database object.

    All text that comes from the caller (object names, error messages and
    the source itself) is HTML-escaped before it is placed in a page.
    """

    def __init__(self, settings: SourceViewSettings | None = None) -> None:
        self._settings = settings if settings is not None else SourceViewSettings()
        self._renderer = SQLHTMLRenderer()

    @property
    def settings(self) -> SourceViewSettings:
        """The styling settings used for generated pages."""
        return self._settings

    def make_title(self, name: str, object_type: SourceObjectType) -> str:
        """
        Build the title for an object's page, e.g. "TRIGGER: SET_ID".

        Args:
            name: The object name
            object_type: The kind of object

        Returns:
            The page title
        """
        return f"{object_type.value.upper()}: {name}"

    def _document(self, title: str, style: str, body: str) -> str:
        return (
            '<!DOCTYPE html>\n'
            '<html lang="en">\n'
            '<head>\n'
            '    <meta charset="UTF-8">\n'
            '    <meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
            f'    <title>{self._renderer.escape_html(title)}</title>\n'
            f'    <style>{style}</style>\n'
            '</head>\n'
            '<body>\n'
            f'{body}\n'
            '</body>\n'
            '</html>'
        )

    def _body_style(self) -> str:
        return (
            "body { font-family: var(--vscode-font-family); "
            f"padding: {self._settings.padding}px; "
            "color: var(--vscode-editor-foreground); "
            "background-color: var(--vscode-editor-background); }"
        )

    def _highlight_style(self) -> str:
        escape = self._renderer.escape_html
        keyword_weight = " font-weight: bold;" if self._settings.bold_keywords else ""
        return (
            f".{SQLHTMLRenderer.KEYWORD_CLASS} {{ color: {escape(self._settings.keyword_color)};{keyword_weight} }}\n"
            f".{SQLHTMLRenderer.STRING_CLASS} {{ color: {escape(self._settings.string_color)}; }}\n"
            f".{SQLHTMLRenderer.COMMENT_CLASS} {{ color: {escape(self._settings.comment_color)}; }}"
        )

    def loading_html(self, name: str, object_type: SourceObjectType) -> str:
        """
        Build the page shown while an object's source is being fetched.

        Args:
            name: The object name
            object_type: The kind of object

        Returns:
            The HTML document
        """
        escape = self._renderer.escape_html
        body = f"<h2>Loading {escape(object_type.value)} {escape(name)}...</h2>"
        return self._document(name, self._body_style(), body)

    def error_html(self, name: str, error: Exception | str) -> str:
        """
        Build the page shown when an object's source could not be fetched.

        Args:
            name: The object name
            error: The failure, shown as its message

        Returns:
            The HTML document
        """
        escape = self._renderer.escape_html
        style = self._body_style() + "\n.error { color: var(--vscode-errorForeground); }"
        body = (
            f"<h2>Error loading info for {escape(name)}</h2>\n"
            f'<p class="error">{escape(str(error))}</p>'
        )
        return self._document(name, style, body)

    def source_html(self, name: str, object_type: SourceObjectType, source: str) -> str:
        """
        Build the page showing an object's highlighted source.

        Args:
            name: The object name
            object_type: The kind of object
            source: The SQL source text

        Returns:
            The HTML document
        """
        title = self.make_title(name, object_type)
        style = "\n".join([
            self._body_style(),
            "pre { white-space: pre-wrap; word-wrap: break-word; "
            "font-family: var(--vscode-editor-font-family); font-size: var(--vscode-editor-font-size); }",
            self._highlight_style(),
        ])
        body = (
            f"<h1>{self._renderer.escape_html(title)}</h1>\n"
            f"<pre><code>{self._renderer.render(source)}</code></pre>"
        )
        return self._document(title, style, body)

    def content_html(self, title: str, content: str) -> str:
        """
        Build a page showing highlighted SQL under an arbitrary title.

        Args:
            title: The page title
            content: The SQL text to show

        Returns:
            The HTML document
        """
        style = "\n".join([
            self._body_style(),
            "pre { white-space: pre-wrap; word-wrap: break-word; }",
            self._highlight_style(),
        ])
        body = f'<pre id="code-content">{self._renderer.render(content)}</pre>'
        return self._document(title, style, body)
