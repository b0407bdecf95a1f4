from sqlalchemy import select

from app.exceptions import RecordNotFoundException
from app.models.person import Person
from app.services.base import BaseService


class PersonService(BaseService):
    """Service for person persistence and lookup."""

    def create_person(self, name: str) -> Person:
        """Create a new person.

        Args:
            name: Person name

        Returns:
            Created Person instance with its generated ID
        """
        person = Person(name=name)
        self.db.add(person)
        self.db.flush()
        return person

    def get_person(self, person_id: int) -> Person:
        """Get a person by ID.

        Args:
            person_id: Person ID

        Returns:
            Person instance

        Raises:
            RecordNotFoundException: If person not found
        """
        person = self.db.scalar(select(Person).where(Person.id == person_id))
        if not person:
            raise RecordNotFoundException("Person", person_id)
        return person

    def get_all_persons(self) -> list[Person]:
        """Get all persons ordered by ID."""
        return list(self.db.scalars(select(Person).order_by(Person.id)).all())
