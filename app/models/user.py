from enum import Enum
from typing import Optional
from uuid import uuid4

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class Language(str, Enum):
    ENGLISH = "English"
    HINDI = "हिंदी"
    MARATHI = "मराठी"
    PUNJABI = "ਪੰਜਾਬੀ"

    @classmethod
    def resolve(cls, value: Optional[str]) -> "Language":
        """Returns the matching language, or English for anything unknown."""
        if isinstance(value, cls):
            return value
        if value:
            cleaned = value.strip()
            for language in cls:
                if cleaned == language.value or cleaned.lower() == language.name.lower():
                    return language
        return cls.ENGLISH

    @property
    def locale(self) -> str:
        return LANGUAGE_LOCALES[self]


LANGUAGE_LOCALES: dict[Language, str] = {
    Language.ENGLISH: "en-IN",
    Language.HINDI: "hi-IN",
    Language.MARATHI: "mr-IN",
    Language.PUNJABI: "pa-IN",
}

_missing_locales = set(Language) - set(LANGUAGE_LOCALES)
if _missing_locales:
    raise RuntimeError(f"No speech locale for languages: {sorted(_missing_locales)}")


class User(BaseModel):
    id: str = Field(
        default_factory=lambda: uuid4().hex,
        validation_alias=AliasChoices("id", "_id"),
        serialization_alias="_id",
    )
    name: str = Field(..., min_length=1)
    village: str = Field(..., min_length=1)
    crop: Optional[str] = Field(default=None, description="Primary crop of the farmer.")
    language: Language = Field(default=Language.ENGLISH)

    @field_validator("language", mode="before")
    @classmethod
    def _resolve_language(cls, value):
        return Language.resolve(value)


class RequestContext(BaseModel):
    """Who is asking and in which language the answer should be."""

    model_config = ConfigDict(frozen=True)

    user: User
    language: Language

    @classmethod
    def for_user(cls, user: User) -> "RequestContext":
        return cls(user=user, language=user.language)
