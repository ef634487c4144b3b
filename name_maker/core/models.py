"""Value types shared by the corpus, generator and CLI."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Gender(str, Enum):
    """Which first-name pool a draw is restricted to."""

    MALE = "male"
    FEMALE = "female"


class RandomName(BaseModel):
    """A first name paired with a surname.

    Renders as ``"<first_name> <last_name>"``.
    """

    model_config = ConfigDict(frozen=True)

    first_name: str
    last_name: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __str__(self) -> str:
        return self.full_name


class Family(BaseModel):
    """Two parents and zero or more children sharing one surname."""

    model_config = ConfigDict(frozen=True)

    surname: str
    father: RandomName
    mother: RandomName
    children: list[RandomName] = Field(default_factory=list)

    def members(self) -> list[RandomName]:
        """Father, mother, then children in draw order."""
        return [self.father, self.mother, *self.children]

    def names(self) -> list[str]:
        return [member.full_name for member in self.members()]
