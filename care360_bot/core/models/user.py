"""
User-related data models.
"""

from pydantic import BaseModel, Field, ConfigDict


class UserProfile(BaseModel):
    """Patient profile from the local user list, keyed by the platform account id."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    user_id: int = Field(alias="id")
    name: str = ""
    phone: str = ""

    def display_text(self) -> str:
        """Render the profile the way the personal cabinet shows it."""
        return f"Ваши данные:\nФИО: {self.name}\nНомер: {self.phone}\nID: {self.user_id}"
