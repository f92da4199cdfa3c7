from dataclasses import dataclass
import json

from sqlsource.source_view.source_view_error import SourceViewSettingsError


@dataclass
class SourceViewSettings:
    """
    Styling settings for source view pages.

    This class handles the loading and saving of settings to a JSON file.
    """
    keyword_color: str = "#569cd6"
    string_color: str = "#ce9178"
    comment_color: str = "#6a9955"
    bold_keywords: bool = True
    padding: int = 20  # Page padding in pixels

    @classmethod
    def load(cls, path: str) -> "SourceViewSettings":
        """
        Load settings from a JSON file.

        Missing values fall back to their defaults.

        Raises:
            SourceViewSettingsError: If the file cannot be read or is malformed
        """
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)

        except OSError as e:
            raise SourceViewSettingsError(f"Failed to read source view settings: {str(e)}") from e

        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise SourceViewSettingsError(f"Invalid source view settings file {path}: {str(e)}") from e

        if not isinstance(data, dict):
            raise SourceViewSettingsError(f"Invalid source view settings file {path}: expected an object")

        defaults = cls()
        try:
            colors = data.get("colors", {})
            layout = data.get("layout", {})
            return cls(
                keyword_color=str(colors.get("keyword", defaults.keyword_color)),
                string_color=str(colors.get("string", defaults.string_color)),
                comment_color=str(colors.get("comment", defaults.comment_color)),
                bold_keywords=bool(layout.get("boldKeywords", defaults.bold_keywords)),
                padding=int(layout.get("padding", defaults.padding))
            )

        except (AttributeError, TypeError, ValueError) as e:
            raise SourceViewSettingsError(f"Invalid source view settings file {path}: {str(e)}") from e

    def save(self, path: str) -> None:
        """
        Save settings to a JSON file.

        Raises:
            SourceViewSettingsError: If the file cannot be written
        """
        data = {
            "colors": {
                "keyword": self.keyword_color,
                "string": self.string_color,
                "comment": self.comment_color,
            },
            "layout": {
                "boldKeywords": self.bold_keywords,
                "padding": self.padding,
            },
        }
        try:
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2)

        except OSError as e:
            raise SourceViewSettingsError(f"Failed to save source view settings: {str(e)}") from e
