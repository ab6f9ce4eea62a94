"""HexChat addon translating channel conversation through a web translation service."""
