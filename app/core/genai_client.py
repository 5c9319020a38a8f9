import json
from typing import Any, Optional, Type, TypeVar

from langchain_core.messages import HumanMessage
from langchain_core.prompts import ChatPromptTemplate
from langchain_google_genai import (
    ChatGoogleGenerativeAI,
    HarmBlockThreshold,
    HarmCategory,
)
from pydantic import BaseModel

from app.models.user import Language

from .config import settings

SchemaT = TypeVar("SchemaT", bound=BaseModel)

DEFAULT_SAFETY_SETTINGS = {
    HarmCategory.HARM_CATEGORY_HATE_SPEECH: HarmBlockThreshold.BLOCK_LOW_AND_ABOVE,
}


def get_chat_model(model: str | None = None, **kwargs) -> ChatGoogleGenerativeAI:
    if "google_api_key" not in kwargs and "api_key" not in kwargs:
        kwargs["google_api_key"] = settings.GEMINI_API_KEY
    if "safety_settings" not in kwargs:
        kwargs["safety_settings"] = DEFAULT_SAFETY_SETTINGS
    return ChatGoogleGenerativeAI(model=model or settings.GEMINI_MODEL, **kwargs)


def build_messages(
    system_prompt: str,
    input_data: dict[str, Any],
    language: Optional[Language] = None,
    media_blocks: Optional[list[dict[str, Any]]] = None,
) -> list:
    """
    System prompt (plus the answer-language instruction) followed by one human
    turn carrying the request as JSON and any inline media.
    """
    if language is not None:
        prompt = ChatPromptTemplate.from_messages(
            [
                (
                    "system",
                    "{system_prompt}\n\nIMPORTANT: Your entire response must be "
                    "in the following language: {language}.",
                )
            ]
        )
        messages = prompt.format_messages(
            system_prompt=system_prompt, language=language.value
        )
    else:
        prompt = ChatPromptTemplate.from_messages([("system", "{system_prompt}")])
        messages = prompt.format_messages(system_prompt=system_prompt)

    user_content = [
        {"type": "text", "text": json.dumps(input_data, ensure_ascii=False)}
    ] + (media_blocks or [])
    messages.append(HumanMessage(content=user_content))
    return messages


async def ainvoke_structured(
    schema: Type[SchemaT],
    system_prompt: str,
    input_data: dict[str, Any],
    language: Optional[Language] = None,
    media_blocks: Optional[list[dict[str, Any]]] = None,
) -> Optional[SchemaT]:
    model = get_chat_model().with_structured_output(schema, method="json_schema")
    return await model.ainvoke(
        build_messages(system_prompt, input_data, language, media_blocks)
    )
