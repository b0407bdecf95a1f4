"""Conversions between path segments and schema objects."""

from app.schemas.person import PersonSchema


class PersonFormatter:
    """Turns a bare name from the URL into a person and back."""

    @staticmethod
    def parse(text: str) -> PersonSchema:
        return PersonSchema(name=text)

    @staticmethod
    def print(person: PersonSchema) -> str:
        return person.name or ""
