"""Identity model: the single signed-in actor."""
from pydantic import BaseModel


class Identity(BaseModel):
    id: str
    name: str
    email: str

    model_config = {"frozen": True}

    @property
    def initials(self) -> str:
        """Profile avatar text, e.g. "John Doe" -> "JD"."""
        return "".join(part[0] for part in self.name.split() if part).upper()
