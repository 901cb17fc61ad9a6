"""
Path convertors for the symbol and name lookup routes.

Registered at import time so that `{symbol:symbol}` and `{name:letters}`
only match the documented shapes; anything else falls through to 404.
"""

from starlette.convertors import Convertor, register_url_convertor


class SymbolConvertor(Convertor):
    """One to three ASCII letters"""
    regex = "[A-Za-z]{1,3}"

    def convert(self, value: str) -> str:
        return value

    def to_string(self, value: str) -> str:
        return value


class LettersConvertor(Convertor):
    """One or more ASCII letters"""
    regex = "[A-Za-z]+"

    def convert(self, value: str) -> str:
        return value

    def to_string(self, value: str) -> str:
        return value


register_url_convertor("symbol", SymbolConvertor())
register_url_convertor("letters", LettersConvertor())
