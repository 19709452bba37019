# ==============================================
# TextTransformer
# ==============================================
#
# PURPOSE:
#   The string transformations the sandbox applies to keys and values,
#   kept in one place so every operation derives keys the same way.
#
# CLASS: TextTransformer
# ----------------------
#   Stateless utility class.
#
#   Methods:
#   --------
#   - reverse(text: str) -> str
#       Character reversal: "hola" → "aloh".
#
#   - upper(text: str) -> str
#       Uppercase form: "aloh" → "ALOH".
#
#   - to_text(item: Any) -> str
#       String representation of any object: 12 → "12", None → "None".
#
# ==============================================

from typing import Any


class TextTransformer:

    @classmethod
    def reverse(cls, text: str) -> str:
        """
        Reverse the characters of a string.

        Args:
            text: The string to reverse

        Returns:
            The reversed string (empty stays empty)
        """
        cls._require_text(text)
        return text[::-1]

    @classmethod
    def upper(cls, text: str) -> str:
        cls._require_text(text)
        return text.upper()

    @staticmethod
    def to_text(item: Any) -> str:
        if isinstance(item, str):
            return item
        return str(item)

    @staticmethod
    def _require_text(text: Any) -> None:
        if not isinstance(text, str):
            raise ValueError("Value must be a string")
